"""Evaluation of CSS selectors against a parsed document."""
from __future__ import annotations

from typing import Iterable, Optional

import soupsieve
from soupsieve import SelectorSyntaxError

from htmlgrader.domain.errors import InvalidSelectorError

from .parser import Document

_ANY_NAMESPACE = "*"


def compile_selector(selector: str) -> soupsieve.SoupSieve:
    """Compile ``selector`` or raise ``InvalidSelectorError`` explaining why not.

    Besides syntax errors this rejects what soupsieve parses but cannot match
    in a document: pseudo-elements, at-rules and namespace prefixes other
    than ``*|``, since no namespaces are declared.
    """

    if not isinstance(selector, str):
        raise InvalidSelectorError(selector, "selectors must be strings")
    if not selector.strip():
        raise InvalidSelectorError(selector, "selector is empty")
    try:
        compiled = soupsieve.compile(selector)
    except (SelectorSyntaxError, NotImplementedError) as exc:
        # soupsieve appends the selector with a caret marker on extra lines
        reason = str(exc).splitlines()[0] if str(exc) else type(exc).__name__
        raise InvalidSelectorError(selector, reason) from exc

    prefix = _namespace_prefix(selector)
    if prefix is not None and prefix != _ANY_NAMESPACE:
        raise InvalidSelectorError(
            selector, f"namespace prefix '{prefix}|' is not supported"
        )
    return compiled


def _namespace_prefix(selector: str) -> Optional[str]:
    """Return the first namespace prefix written in ``selector``, if any.

    ``|=`` (dash match), quoted strings and escaped characters are skipped.
    """

    quote_char: str | None = None
    escaped = False
    for index, char in enumerate(selector):
        if escaped:
            escaped = False
            continue
        if char == "\\":
            escaped = True
            continue
        if quote_char is not None:
            if char == quote_char:
                quote_char = None
            continue
        if char in ("'", '"'):
            quote_char = char
            continue
        if char == "|" and selector[index + 1 : index + 2] != "=":
            start = index
            while start > 0 and (
                selector[start - 1].isalnum() or selector[start - 1] in "-_*"
            ):
                start -= 1
            return selector[start:index]
    return None


def exists(doc: Document, selector: str) -> bool:
    """Return True when at least one node of ``doc`` matches ``selector``."""

    return compile_selector(selector).select_one(doc) is not None


def validate_selectors(selectors: Iterable[str]) -> None:
    """Compile every selector so a broken checks file fails before any fetch."""

    for selector in selectors:
        compile_selector(selector)


__all__ = ["compile_selector", "exists", "validate_selectors"]
