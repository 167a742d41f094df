"""Dependency container wiring formatters and HTML sources for the CLI."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

import httpx

from htmlgrader.formatters import Formatter, build_formatter_registry
from htmlgrader.infrastructure import FileSource, UrlSource


@dataclass(frozen=True)
class GraderContainer:
    """Container exposing the dependencies of a grading run."""

    formatters: Mapping[str, Formatter]
    file_source: Callable[[str], FileSource]
    url_source: Callable[[str], UrlSource]


def build_container(
    *,
    timeout: float | None = None,
    client: httpx.AsyncClient | None = None,
) -> GraderContainer:
    """Build the container once at startup."""

    def url_source(url: str) -> UrlSource:
        return UrlSource(url, client=client, timeout=timeout)

    return GraderContainer(
        formatters=build_formatter_registry(),
        file_source=FileSource,
        url_source=url_source,
    )


__all__ = ["GraderContainer", "build_container"]
