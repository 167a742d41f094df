"""Exceptions raised while loading checks, acquiring HTML and evaluating selectors."""
from __future__ import annotations


class GraderError(Exception):
    """Base class for every error reported to the user by htmlgrader."""


class ConfigurationError(GraderError):
    """The checks file is missing or does not hold a list of selectors."""


class InvalidFormatError(GraderError):
    """The requested output format is not registered."""


class InputError(GraderError):
    """An HTML source could not be acquired."""


class InputNotFoundError(InputError):
    """The HTML file path does not exist."""


class InputUnreachableError(InputError):
    """The URL is empty or could not be fetched."""


class ParseError(GraderError):
    """The raw HTML could not be interpreted as text."""


class InvalidSelectorError(GraderError):
    """A selector is not valid CSS for the evaluator."""

    def __init__(self, selector: object, reason: str) -> None:
        super().__init__(f"Invalid selector {selector!r}: {reason}")
        #: Selector as read from the checks file.
        self.selector = selector


__all__ = [
    "ConfigurationError",
    "GraderError",
    "InputError",
    "InputNotFoundError",
    "InputUnreachableError",
    "InvalidFormatError",
    "InvalidSelectorError",
    "ParseError",
]
