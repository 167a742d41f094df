from __future__ import annotations

import pytest

from htmlgrader.domain.errors import ParseError
from htmlgrader.engine import parse_html


def test_parse_html_builds_implicit_structure() -> None:
    document = parse_html("<p>solto</p>")

    assert document.html is not None
    assert document.head is not None
    assert document.body is not None
    assert document.body.p.get_text() == "solto"


def test_parse_html_empty_bytes() -> None:
    document = parse_html(b"")

    assert document.html is not None


def test_parse_html_decodes_declared_charset() -> None:
    raw = '<meta charset="iso-8859-1"><p>Informa\xe7\xe3o</p>'.encode("iso-8859-1")

    document = parse_html(raw)

    assert document.p.get_text() == "Informação"


def test_parse_html_rejects_binary_bytes() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_html(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x02\x00")

    assert "binary" in str(excinfo.value)


@pytest.mark.parametrize(
    "raw",
    [
        "<p>a\x00b</p>",
        b"<html><body><p>a\x00b</p></body></html>",
    ],
)
def test_parse_html_tolerates_stray_nul_in_text(raw) -> None:
    document = parse_html(raw)

    assert document.p is not None


def test_parse_html_accepts_utf16_with_bom() -> None:
    raw = "<p>texto</p>".encode("utf-16")

    document = parse_html(raw)

    assert document.p.get_text() == "texto"


def test_parse_html_rejects_non_text_input() -> None:
    with pytest.raises(ParseError):
        parse_html(12345)  # type: ignore[arg-type]


def test_parse_html_unknown_tree_builder() -> None:
    with pytest.raises(ParseError) as excinfo:
        parse_html("<p>x</p>", features="no-such-parser")

    assert "no-such-parser" in str(excinfo.value)
