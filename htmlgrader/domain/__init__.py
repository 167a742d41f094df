"""API pública do domínio do htmlgrader.

Centraliza entidades, portas e erros para que possam ser importados
diretamente de ``htmlgrader.domain``.
"""

from .entities import FILE, URL, CheckResult, SourceDescriptor, SourceOutcome
from .errors import (
    ConfigurationError,
    GraderError,
    InputError,
    InputNotFoundError,
    InputUnreachableError,
    InvalidFormatError,
    InvalidSelectorError,
    ParseError,
)
from .ports import HtmlSource

__all__ = [
    "CheckResult",
    "SourceDescriptor",
    "SourceOutcome",
    "FILE",
    "URL",
    "HtmlSource",
    "GraderError",
    "ConfigurationError",
    "InvalidFormatError",
    "InputError",
    "InputNotFoundError",
    "InputUnreachableError",
    "ParseError",
    "InvalidSelectorError",
]
