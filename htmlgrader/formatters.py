"""Rendering of check results into the supported output formats."""
from __future__ import annotations

import csv
import io
import json
from types import MappingProxyType
from typing import Callable, Mapping

from rich.console import Console
from rich.table import Table
from rich.text import Text

from htmlgrader.domain import CheckResult
from htmlgrader.domain.errors import InvalidFormatError

#: Renders the labelled block printed for one source.
Formatter = Callable[[str, CheckResult], str]

_TABLE_WIDTH = 100


def _header(label: str) -> str:
    return f"Results from: {label}"


def render_json(label: str, result: CheckResult) -> str:
    """Header line followed by the result as a JSON object indented by 4."""

    body = json.dumps(result, indent=4, sort_keys=True, ensure_ascii=False)
    return f"{_header(label)}\n{body}"


def render_csv(label: str, result: CheckResult) -> str:
    stream = io.StringIO()
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(["selector", "present"])
    for selector, present in result.items():
        writer.writerow([selector, "true" if present else "false"])
    return f"{_header(label)}\n{stream.getvalue().rstrip()}"


def render_table(label: str, result: CheckResult) -> str:
    """Header line followed by a plain-text rich table, one row per selector."""

    table = Table()
    table.add_column("Selector")
    table.add_column("Present", justify="center")
    for selector, present in result.items():
        table.add_row(Text(selector), "yes" if present else "no")

    console = Console(
        file=io.StringIO(),
        width=_TABLE_WIDTH,
        color_system=None,
        highlight=False,
    )
    console.print(table)
    return f"{_header(label)}\n{console.file.getvalue().rstrip()}"


def build_formatter_registry() -> Mapping[str, Formatter]:
    """Build the read-only table of output formats keyed by upper-case name."""

    return MappingProxyType(
        {
            "JSON": render_json,
            "CSV": render_csv,
            "TABLE": render_table,
        }
    )


def resolve_format(name: str, registry: Mapping[str, Formatter]) -> str:
    """Return the registered name matching ``name`` regardless of case."""

    canonical = (name or "").strip().upper()
    if canonical in registry:
        return canonical
    accepted = ", ".join(registry)
    raise InvalidFormatError(f"Invalid output format. Accepted values are: {accepted}")


__all__ = [
    "Formatter",
    "build_formatter_registry",
    "render_csv",
    "render_json",
    "render_table",
    "resolve_format",
]
