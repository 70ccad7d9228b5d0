"""XmlLoader: asynchronous fetch-and-convert for URLs and local files.

HTTP(S) sources are fetched with ``httpx.AsyncClient``; anything else is read
from the filesystem in a worker thread.  Transport errors and 5xx responses
are retried with jittered exponential backoff via ``tenacity``; 4xx responses
fail immediately.  Every failure surfaces as ``LoadError``, never as a
conversion error.

``httpx`` and ``tenacity`` are imported lazily in ``__init__`` so that the
base install (no HTTP extra) can import this module.  Install them with::

    pip install jxon[http]

Example::

    loader = XmlLoader()
    doc = await loader.load_and_parse("https://example.com/feed.xml")
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any
from urllib.parse import unquote, urlparse

from jxon.errors import LoadError

if TYPE_CHECKING:
    from jxon.parser import JxonParser
    from jxon.tree.nodes import JxonObject

__all__ = ["XmlLoader"]

logger = logging.getLogger(__name__)

_HTTP_SCHEMES = frozenset({"http", "https"})


class _ServerError(Exception):
    """A 5xx response; retried."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}")
        self.status_code = status_code
        self.body = body


class XmlLoader:
    """Loads XML from a URL or path and converts it with a ``JxonParser``.

    Args:
        parser: Parser used for conversion.  Defaults to ``JxonParser()``.
        timeout: Per-request timeout in seconds.
        max_attempts: Total HTTP attempts, including the first.
        backoff: Multiplier for the jittered exponential wait between
            attempts, in seconds.  ``0`` disables waiting.
        transport: Optional ``httpx`` transport, e.g. ``httpx.MockTransport``.

    Raises:
        ImportError: If ``httpx`` or ``tenacity`` is not installed.  The
            message includes the install command.
    """

    def __init__(
        self,
        parser: JxonParser | None = None,
        timeout: float = 10.0,
        max_attempts: int = 3,
        backoff: float = 0.5,
        transport: Any = None,
    ) -> None:
        try:
            import httpx
            from tenacity import (
                before_sleep_log,
                retry,
                retry_if_exception_type,
                stop_after_attempt,
                wait_random_exponential,
            )
        except ImportError as exc:
            raise ImportError(
                "httpx and tenacity are required for XmlLoader. "
                "Install with: pip install jxon[http]"
            ) from exc

        if max_attempts < 1:
            msg = f"max_attempts must be >= 1, got {max_attempts}"
            raise ValueError(msg)

        if parser is None:
            from jxon.parser import JxonParser

            parser = JxonParser()

        self._parser = parser
        self._timeout = timeout
        self._transport = transport
        self._httpx: Any = httpx

        _retry = retry(
            retry=retry_if_exception_type((httpx.TransportError, _ServerError)),
            wait=wait_random_exponential(multiplier=backoff, max=30),
            stop=stop_after_attempt(max_attempts),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )
        self._fetch_with_retry = _retry(self._fetch_once)

    def __repr__(self) -> str:
        return f"XmlLoader(timeout={self._timeout!r})"

    async def load(self, source: str | Path) -> bytes:
        """Return the raw XML content of ``source``.

        Raises:
            LoadError: On network, HTTP status or filesystem failure.
        """
        source_str = str(source)
        parsed = urlparse(source_str)

        if parsed.scheme in _HTTP_SCHEMES:
            return await self._load_url(source_str)
        if parsed.scheme == "file":
            return await self._load_path(Path(unquote(parsed.path)), source_str)
        return await self._load_path(Path(source_str), source_str)

    async def load_and_parse(self, source: str | Path) -> JxonObject:
        """Load ``source`` and convert it into a JxonObject.

        Raises:
            LoadError: If loading fails or the content is not well-formed XML.
            DocumentEmptyError: If the document has no root element.
        """
        content = await self.load(source)
        try:
            return self._parser.parse_xml(content)
        except LoadError as exc:
            if exc.source is not None:
                raise
            raise LoadError(str(exc), source=str(source)) from exc

    async def _load_url(self, url: str) -> bytes:
        httpx = self._httpx
        try:
            return await self._fetch_with_retry(url)
        except _ServerError as exc:
            msg = f"GET {url} failed with HTTP {exc.status_code}: {exc.body}"
            raise LoadError(msg, source=url) from exc
        except httpx.HTTPError as exc:
            msg = f"GET {url} failed: {exc}"
            raise LoadError(msg, source=url) from exc

    async def _fetch_once(self, url: str) -> bytes:
        logger.debug("Fetching %s", url)
        async with self._httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            response = await client.get(url)

        if response.status_code >= 500:
            raise _ServerError(response.status_code, response.text)
        if response.status_code != 200:
            msg = f"GET {url} failed with HTTP {response.status_code}: {response.text}"
            raise LoadError(msg, source=url)
        return response.content

    async def _load_path(self, path: Path, source: str) -> bytes:
        logger.debug("Reading %s", path)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            msg = f"Cannot read {path}: {exc}"
            raise LoadError(msg, source=source) from exc
