"""Interface de linha de comando do htmlgrader."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from htmlgrader.application import SourceDispatcher
from htmlgrader.container import GraderContainer, build_container
from htmlgrader.domain import GraderError, HtmlSource
from htmlgrader.engine import validate_selectors
from htmlgrader.formatters import resolve_format
from htmlgrader.infrastructure import load_checks
from htmlgrader.settings import get_checks_file, get_log_level, get_output_format

_NO_INPUT_MESSAGE = "No valid input given."


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="htmlgrader",
        description=(
            "Check whether an HTML file or URL contains the elements listed "
            "in a JSON checks file"
        ),
    )
    parser.add_argument(
        "-c",
        "--checks",
        default=None,
        help="Path to checks.json (default: checks.json or HTMLGRADER_CHECKS_FILE)",
    )
    parser.add_argument("-f", "--file", default=None, help="Path to index.html")
    parser.add_argument("-u", "--url", default=None, help="URL to html file")
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output format: JSON, CSV or TABLE, case-insensitive (default: JSON)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Timeout in seconds for URL fetches (default: HTMLGRADER_HTTP_TIMEOUT or 15)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level: DEBUG, INFO, WARNING, ERROR (default WARNING)",
    )
    return parser.parse_args(argv)


def _configure_logging(level_name: str, console: Console) -> None:
    handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


def _report(console: Console, message: object) -> None:
    console.print(str(message), style="red", markup=False, highlight=False, soft_wrap=True)


def _build_sources(args: argparse.Namespace, container: GraderContainer) -> List[HtmlSource]:
    sources: List[HtmlSource] = []
    if args.file is not None:
        file_source = container.file_source(args.file)
        file_source.assert_exists()
        sources.append(file_source)
    if args.url is not None:
        sources.append(container.url_source(args.url))
    return sources


def run(
    args: argparse.Namespace,
    container: GraderContainer,
    *,
    console: Console | None = None,
) -> int:
    """Execute one grading run and return the process exit code.

    Every error is turned into an exit code here and nowhere else. Format,
    checks file, selectors and inputs are validated before anything is
    fetched; results go to stdout, diagnostics to stderr.
    """

    err_console = console or Console(stderr=True)
    log = logging.getLogger("htmlgrader.cli")

    try:
        output_format = resolve_format(
            args.output or get_output_format(), container.formatters
        )
        selectors = load_checks(args.checks or get_checks_file())
        validate_selectors(selectors)
        sources = _build_sources(args, container)
    except GraderError as exc:
        _report(err_console, exc)
        return 1

    if not sources:
        _report(err_console, _NO_INPUT_MESSAGE)
        return 1

    dispatcher = SourceDispatcher(selectors)
    try:
        outcomes = asyncio.run(dispatcher.run(sources))
    except GraderError as exc:
        _report(err_console, exc)
        return 1

    formatter = container.formatters[output_format]
    succeeded = 0
    for outcome in outcomes:
        if not outcome.ok:
            _report(err_console, f"{outcome.source.label}: {outcome.error}")
            continue
        sys.stdout.write(formatter(outcome.source.label, outcome.result))
        sys.stdout.write("\n")
        succeeded += 1

    log.info("%d of %d source(s) checked", succeeded, len(outcomes))
    return 0 if succeeded else 1


def main(argv: Sequence[str] | None = None) -> None:
    load_dotenv()
    args = _parse_args(argv)
    console = Console(stderr=True)
    _configure_logging(args.log_level or get_log_level(), console)
    container = build_container(timeout=args.timeout)
    raise SystemExit(run(args, container, console=console))


__all__ = ["main", "run"]


if __name__ == "__main__":  # pragma: no cover - suporte a execução direta
    main()
