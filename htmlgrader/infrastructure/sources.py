"""Acquisition of raw HTML from local files and remote URLs."""
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Mapping, Union

import httpx

from htmlgrader.domain import FILE, URL, HtmlSource, SourceDescriptor
from htmlgrader.domain.errors import InputNotFoundError, InputUnreachableError
from htmlgrader.settings import get_http_timeout

_DEFAULT_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/126.0.0.0 Safari/537.36"
    ),
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,"
        "*/*;q=0.8"
    ),
}


class FileSource(HtmlSource):
    """Reads the HTML of a document stored on the local filesystem."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        self._descriptor = SourceDescriptor(kind=FILE, location=str(path))

    @property
    def descriptor(self) -> SourceDescriptor:
        return self._descriptor

    def assert_exists(self) -> None:
        """Raise ``InputNotFoundError`` unless the path points to a file."""

        if not self._path.is_file():
            raise InputNotFoundError(f"{self._path} does not exist. Exiting.")

    def read(self) -> bytes:
        """Read the file synchronously, for callers outside an event loop."""

        self.assert_exists()
        try:
            return self._path.read_bytes()
        except OSError as exc:
            raise InputNotFoundError(f"Could not read {self._path}: {exc}") from exc

    async def fetch(self) -> bytes:
        return await asyncio.to_thread(self.read)


class UrlSource(HtmlSource):
    """Downloads the HTML of a remote document with ``httpx``."""

    def __init__(
        self,
        url: str,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        """Validate the URL and keep the request settings.

        Parameters
        ----------
        url:
            Address of the document; blank values are rejected immediately.
        client:
            Optional shared client. It is never closed by this source; when
            omitted a client is created and closed for each fetch.
        timeout:
            Request timeout in seconds; defaults to ``HTMLGRADER_HTTP_TIMEOUT``.
        headers:
            Extra headers merged over the browser-like defaults.
        """

        if not url or not url.strip():
            raise InputUnreachableError("Invalid URL specified.")
        self._url = url.strip()
        self._descriptor = SourceDescriptor(kind=URL, location=self._url)
        self._client = client
        self._timeout = get_http_timeout() if timeout is None else timeout
        self._headers: dict[str, str] = dict(_DEFAULT_HEADERS)
        if headers:
            self._headers.update(headers)
        self._log = logging.getLogger("htmlgrader.sources")

    @property
    def descriptor(self) -> SourceDescriptor:
        return self._descriptor

    async def fetch(self) -> Union[bytes, str]:
        self._log.info("GET %s", self._url)
        try:
            if self._client is not None:
                response = await self._get(self._client)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._get(client)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise InputUnreachableError(
                f"Error fetching {self._url}: {_describe(exc)}"
            ) from exc

        self._log.debug(
            "%s answered %s (%d bytes)",
            response.url,
            response.status_code,
            len(response.content),
        )
        # Without a charset header let the parser sniff <meta charset>.
        if response.charset_encoding:
            return response.text
        return response.content

    async def _get(self, client: httpx.AsyncClient) -> httpx.Response:
        response = await client.get(
            self._url,
            headers=self._headers,
            timeout=self._timeout,
            follow_redirects=True,
        )
        response.raise_for_status()
        return response


def _describe(exc: Exception) -> str:
    message = str(exc).strip()
    if not message:
        return type(exc).__name__
    return message.splitlines()[0]


__all__ = ["FileSource", "UrlSource"]
