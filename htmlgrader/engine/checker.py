"""Selector presence checks over a single HTML document."""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from htmlgrader.domain.entities import CheckResult
from htmlgrader.domain.errors import InvalidSelectorError

from .parser import parse_html
from .selectors import exists

_log = logging.getLogger("htmlgrader.engine")


def check(
    raw_html: Union[bytes, str],
    selectors: Iterable[str],
    *,
    features: Optional[str] = None,
) -> CheckResult:
    """Report, for each selector, whether it matches anything in ``raw_html``.

    Selectors are evaluated in ascending lexicographic order against a single
    parsed document and the returned mapping preserves that order. Duplicate
    selectors collapse into one key. ``ParseError`` and
    ``InvalidSelectorError`` propagate; no partial result is returned.
    """

    pending = list(selectors)
    for selector in pending:
        if not isinstance(selector, str):
            raise InvalidSelectorError(selector, "selectors must be strings")
    ordered = sorted(pending)

    document = parse_html(raw_html, features=features)

    result: CheckResult = {}
    for selector in ordered:
        result[selector] = exists(document, selector)

    _log.debug(
        "%d selector(s) checked, %d present",
        len(result),
        sum(1 for present in result.values() if present),
    )
    return result


__all__ = ["check"]
