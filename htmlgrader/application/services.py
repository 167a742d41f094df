"""Programmatic entry points that do not go through the command line."""
from __future__ import annotations

from pathlib import Path
from typing import Union

from htmlgrader.domain import CheckResult
from htmlgrader.engine import check
from htmlgrader.infrastructure import FileSource, load_checks


def check_html_file(
    html_file: Union[str, Path], checks_file: Union[str, Path]
) -> CheckResult:
    """Check a local HTML file against the selectors listed in ``checks_file``."""

    selectors = load_checks(checks_file)
    raw_html = FileSource(html_file).read()
    return check(raw_html, selectors)


__all__ = ["check_html_file"]
