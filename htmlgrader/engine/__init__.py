"""Selector presence-check engine: parse once, evaluate each selector."""

from .checker import check
from .parser import Document, parse_html
from .selectors import compile_selector, exists, validate_selectors

__all__ = [
    "Document",
    "check",
    "compile_selector",
    "exists",
    "parse_html",
    "validate_selectors",
]
