"""Resolve HTML sources into raw documents and check each one."""
from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Sequence, Union

from htmlgrader.domain import CheckResult, HtmlSource, SourceOutcome
from htmlgrader.domain.errors import ParseError
from htmlgrader.engine import check

Checker = Callable[[Union[bytes, str], Sequence[str]], CheckResult]


class SourceDispatcher:
    """Runs the presence-check engine over every configured source.

    Acquisition of all sources happens first, concurrently, so that a failed
    download stops the run before anything is reported. Checks then run one
    source at a time; each call owns its own document and result.
    """

    def __init__(self, selectors: Sequence[str], *, checker: Checker = check) -> None:
        self._selectors = tuple(selectors)
        self._check = checker
        self._log = logging.getLogger("htmlgrader.dispatcher")

    @property
    def selectors(self) -> Sequence[str]:
        return self._selectors

    async def acquire_all(self, sources: Sequence[HtmlSource]) -> List[Union[bytes, str]]:
        """Fetch every source, raising the first failure in source order."""

        tasks = [asyncio.create_task(source.fetch()) for source in sources]
        settled = await asyncio.gather(*tasks, return_exceptions=True)
        for source, item in zip(sources, settled):
            if isinstance(item, BaseException):
                self._log.debug("acquisition of %s failed: %s", source.descriptor.label, item)
                raise item
        return list(settled)

    def check_all(
        self,
        sources: Sequence[HtmlSource],
        documents: Sequence[Union[bytes, str]],
    ) -> List[SourceOutcome]:
        """Check each acquired document; a ``ParseError`` only fails its own source."""

        outcomes: List[SourceOutcome] = []
        for source, raw_html in zip(sources, documents):
            descriptor = source.descriptor
            try:
                result = self._check(raw_html, self._selectors)
            except ParseError as exc:
                self._log.debug("%s could not be parsed: %s", descriptor.label, exc)
                outcomes.append(SourceOutcome(source=descriptor, error=exc))
                continue
            outcomes.append(SourceOutcome(source=descriptor, result=result))
        return outcomes

    async def run(self, sources: Sequence[HtmlSource]) -> List[SourceOutcome]:
        documents = await self.acquire_all(sources)
        return self.check_all(sources, documents)


__all__ = ["Checker", "SourceDispatcher"]
