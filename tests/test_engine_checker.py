"""Testes do motor de verificação de seletores."""
from __future__ import annotations

import pytest

from htmlgrader.domain.errors import InvalidSelectorError, ParseError
from htmlgrader.engine import check


_PAGE = """
<!DOCTYPE html>
<html>
  <head>
    <meta name="viewport" content="width=device-width">
    <title>Landing</title>
  </head>
  <body>
    <nav class="top"><a href="/about">About</a></nav>
    <section id="pitch">
      <p class="lead">Hello</p>
    </section>
  </body>
</html>
"""


def test_check_reports_presence_in_sorted_order() -> None:
    html = '<html><body><div id="main"></div></body></html>'

    result = check(html, ["div", "#main", "span"])

    assert result == {"#main": True, "div": True, "span": False}
    assert list(result) == ["#main", "div", "span"]


def test_check_empty_document_still_has_root_element() -> None:
    assert check("", ["html"]) == {"html": True}


def test_check_repairs_unclosed_tags() -> None:
    assert check("<div><p>text", ["p", "div p"]) == {"div p": True, "p": True}


def test_check_empty_selector_list_returns_empty_mapping() -> None:
    assert check("<p>x</p>", []) == {}


def test_check_duplicate_selectors_collapse_into_one_key() -> None:
    result = check("<p>x</p>", ["p", "span", "p"])

    assert result == {"p": True, "span": False}


def test_check_is_idempotent() -> None:
    selectors = ["section p", "nav a", "footer"]

    assert check(_PAGE, selectors) == check(_PAGE, selectors)


def test_check_order_ignores_input_order() -> None:
    selectors = ["title", "a[href]", ".lead", "#pitch", "body nav"]

    result = check(_PAGE, selectors)

    assert list(result) == sorted(selectors)


@pytest.mark.parametrize(
    ("selector", "expected"),
    [
        ("nav", True),
        ("#pitch", True),
        ("#missing", False),
        (".lead", True),
        (".hero", False),
        ("a[href]", True),
        ("a[href='/about']", True),
        ("a[href='/contact']", False),
        ("meta[name=viewport]", True),
        ("section p", True),
        ("nav p", False),
        ("body > nav", True),
    ],
)
def test_check_supported_selector_kinds(selector: str, expected: bool) -> None:
    assert check(_PAGE, [selector]) == {selector: expected}


def test_check_accepts_bytes() -> None:
    raw = '<meta charset="iso-8859-1"><p class="caf\xe9">x</p>'.encode("iso-8859-1")

    assert check(raw, ["p", "table"]) == {"p": True, "table": False}


def test_check_invalid_selector_aborts_whole_check() -> None:
    with pytest.raises(InvalidSelectorError) as excinfo:
        check(_PAGE, ["nav", "div[", "p"])

    assert excinfo.value.selector == "div["


def test_check_rejects_non_string_selector() -> None:
    with pytest.raises(InvalidSelectorError):
        check(_PAGE, ["nav", 3])  # type: ignore[list-item]


def test_check_binary_input_raises_parse_error() -> None:
    with pytest.raises(ParseError):
        check(b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR", ["html"])


def test_check_accepts_one_shot_iterables() -> None:
    selectors = iter(["span", "p"])

    assert check("<p>x</p>", selectors) == {"p": True, "span": False}


def test_check_stray_nul_is_not_binary() -> None:
    assert check("<p>a\x00b</p>", ["p"]) == {"p": True}
