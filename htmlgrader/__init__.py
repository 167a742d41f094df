"""htmlgrader - verifica a presença de elementos HTML via seletores CSS."""
from .application import SourceDispatcher, check_html_file
from .domain import (
    CheckResult,
    ConfigurationError,
    GraderError,
    InputNotFoundError,
    InputUnreachableError,
    InvalidFormatError,
    InvalidSelectorError,
    ParseError,
)
from .engine import check

__all__ = [
    "CheckResult",
    "ConfigurationError",
    "GraderError",
    "InputNotFoundError",
    "InputUnreachableError",
    "InvalidFormatError",
    "InvalidSelectorError",
    "ParseError",
    "SourceDispatcher",
    "check",
    "check_html_file",
]
