"""Entities describing where a document came from and how its check ended."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from htmlgrader.domain.errors import GraderError

from .check_result import CheckResult

FILE = "file"
URL = "url"


@dataclass(frozen=True)
class SourceDescriptor:
    """Identifies one HTML input and the strategy used to acquire it."""

    #: Acquisition strategy, either ``"file"`` or ``"url"``.
    kind: str
    #: File path or URL as supplied on the command line.
    location: str

    @property
    def label(self) -> str:
        return self.location


@dataclass(frozen=True)
class SourceOutcome:
    """Result of processing a single source: a check result or the error that stopped it."""

    source: SourceDescriptor
    result: Optional[CheckResult] = None
    error: Optional[GraderError] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.result is not None
