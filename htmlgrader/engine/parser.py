"""Conversion of raw HTML into a queryable BeautifulSoup document."""
from __future__ import annotations

from typing import Optional, Union

from bs4 import BeautifulSoup, FeatureNotFound
from bs4.dammit import UnicodeDammit

from htmlgrader.domain.errors import ParseError
from htmlgrader.settings import get_parser_features

#: Parsed, queryable form of one HTML input.
Document = BeautifulSoup

_FALLBACK_ENCODINGS = ["utf-8", "windows-1252"]

# Only the start of a byte stream is inspected when sniffing binary content.
_SNIFF_SIZE = 1024
_BINARY_CONTROL_RATIO = 0.10
_CONTROL_BYTES = (
    frozenset(range(0x00, 0x09)) | frozenset(range(0x0E, 0x20)) | {0x0B, 0x7F}
)


def parse_html(
    raw_html: Union[bytes, str], *, features: Optional[str] = None
) -> Document:
    """Build a document tree from ``raw_html``, repairing malformed markup.

    The default tree builder (``html5lib``) follows the browser parsing rules,
    so missing ``<html>``/``<body>`` elements are created and unclosed tags are
    closed. Only input that cannot be read as text raises ``ParseError``.
    """

    text = _as_text(raw_html)
    builder = features or get_parser_features()
    try:
        return BeautifulSoup(text, builder)
    except FeatureNotFound as exc:
        raise ParseError(f"HTML parser '{builder}' is not available") from exc


def _as_text(raw_html: Union[bytes, str]) -> str:
    if isinstance(raw_html, str):
        return raw_html
    if isinstance(raw_html, (bytes, bytearray)):
        if not raw_html:
            return ""
        dammit = UnicodeDammit(
            bytes(raw_html), user_encodings=_FALLBACK_ENCODINGS, is_html=True
        )
        text = dammit.unicode_markup
        if text is None:
            raise ParseError("HTML input could not be decoded as text")
        if _looks_binary(bytes(raw_html), dammit.original_encoding):
            raise ParseError("HTML input looks like binary data, not text")
        return text
    raise ParseError(
        f"HTML input must be text or bytes, got {type(raw_html).__name__}"
    )


def _looks_binary(raw: bytes, encoding: Optional[str]) -> bool:
    """Sniff the head of ``raw``: a NUL plus a high share of control bytes.

    UTF-16/32 text is full of NUL bytes, so it is never treated as binary.
    A stray NUL in an otherwise textual document is left to the parser,
    which replaces it.
    """

    normalized = (encoding or "").lower().replace("_", "-")
    if normalized.startswith(("utf-16", "utf-32")):
        return False
    head = raw[:_SNIFF_SIZE]
    if b"\x00" not in head:
        return False
    controls = sum(1 for byte in head if byte in _CONTROL_BYTES)
    return controls / len(head) > _BINARY_CONTROL_RATIO


__all__ = ["Document", "parse_html"]
