"""Unit tests for XmlLoader.

Skipped automatically on base installs (no httpx/tenacity) via
``pytest.importorskip``.  Network access is replaced by
``httpx.MockTransport``; no real requests are made.
"""

from __future__ import annotations

import builtins
import logging
from pathlib import Path
from typing import Any

import pytest

httpx = pytest.importorskip("httpx", reason="http extra not installed")
pytest.importorskip("tenacity", reason="http extra not installed")

from jxon.adapters.loader import XmlLoader  # noqa: E402
from jxon.config import JxonConfig  # noqa: E402
from jxon.errors import LoadError  # noqa: E402
from jxon.parser import JxonParser  # noqa: E402

URL = "https://example.com/feed.xml"

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _Responder:
    """MockTransport handler replaying a fixed sequence of responses."""

    def __init__(self, *responses: Any) -> None:
        self._responses = list(responses)
        self.calls = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


def _loader(responder: _Responder, **kwargs: Any) -> XmlLoader:
    kwargs.setdefault("backoff", 0)
    return XmlLoader(transport=httpx.MockTransport(responder), **kwargs)


# ---------------------------------------------------------------------------
# HTTP success
# ---------------------------------------------------------------------------


class TestHttpSuccess:
    async def test_load_and_parse(self) -> None:
        responder = _Responder(httpx.Response(200, content=b"<r><i>1</i><i>2</i></r>"))
        result = await _loader(responder).load_and_parse(URL)
        assert result == {"r": {"i": [1.0, 2.0]}}
        assert responder.calls == 1

    async def test_load_returns_bytes(self) -> None:
        responder = _Responder(httpx.Response(200, content=b"<r/>"))
        assert await _loader(responder).load(URL) == b"<r/>"

    async def test_parser_config_used(self) -> None:
        responder = _Responder(httpx.Response(200, content=b"<r><a/><b/></r>"))
        parser = JxonParser(config=JxonConfig(empty_element_value=""))
        result = await _loader(responder, parser=parser).load_and_parse(URL)
        assert result == {"r": {"a": "", "b": ""}}


# ---------------------------------------------------------------------------
# HTTP failures and retries
# ---------------------------------------------------------------------------


class TestHttpFailures:
    async def test_client_error_not_retried(self) -> None:
        responder = _Responder(httpx.Response(404, text="no such feed"))
        with pytest.raises(LoadError, match="404: no such feed") as exc_info:
            await _loader(responder).load_and_parse(URL)
        assert exc_info.value.source == URL
        assert responder.calls == 1

    async def test_server_error_retried_then_succeeds(self) -> None:
        responder = _Responder(
            httpx.Response(503, text="busy"),
            httpx.Response(200, content=b"<r>ok</r>"),
        )
        assert await _loader(responder).load_and_parse(URL) == {"r": "ok"}
        assert responder.calls == 2

    async def test_server_error_exhausts_attempts(self) -> None:
        responder = _Responder(*[httpx.Response(500, text="boom") for _ in range(3)])
        with pytest.raises(LoadError, match="HTTP 500: boom"):
            await _loader(responder, max_attempts=3).load_and_parse(URL)
        assert responder.calls == 3

    async def test_transport_error_retried(self) -> None:
        responder = _Responder(
            httpx.ConnectError("refused"),
            httpx.Response(200, content=b"<r>1</r>"),
        )
        assert await _loader(responder).load_and_parse(URL) == {"r": 1.0}
        assert responder.calls == 2

    async def test_transport_error_becomes_load_error(self) -> None:
        responder = _Responder(httpx.ConnectError("refused"), httpx.ConnectError("refused"))
        with pytest.raises(LoadError, match="refused") as exc_info:
            await _loader(responder, max_attempts=2).load_and_parse(URL)
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_retry_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        responder = _Responder(
            httpx.Response(502, text="bad gateway"),
            httpx.Response(200, content=b"<r/>"),
        )
        with caplog.at_level(logging.WARNING, logger="jxon.adapters.loader"):
            await _loader(responder).load_and_parse(URL)
        assert "Retrying" in caplog.text

    async def test_malformed_body_is_load_error_with_source(self) -> None:
        responder = _Responder(httpx.Response(200, content=b"<r>"))
        with pytest.raises(LoadError, match="Malformed XML") as exc_info:
            await _loader(responder).load_and_parse(URL)
        assert exc_info.value.source == URL


# ---------------------------------------------------------------------------
# Filesystem sources
# ---------------------------------------------------------------------------


class TestFileSources:
    async def test_plain_path(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.xml"
        path.write_bytes(b"<r><![CDATA[ x ]]></r>")
        assert await XmlLoader().load_and_parse(path) == {"r": " x "}

    async def test_file_url(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.xml"
        path.write_bytes(b"<r>true</r>")
        assert await XmlLoader().load_and_parse(path.as_uri()) == {"r": True}

    async def test_file_url_is_percent_decoded(self, tmp_path: Path) -> None:
        path = tmp_path / "my doc%.xml"
        path.write_bytes(b"<r>1</r>")
        uri = path.as_uri()
        assert "%20" in uri
        assert await XmlLoader().load_and_parse(uri) == {"r": 1.0}

    async def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(LoadError, match="Cannot read"):
            await XmlLoader().load(tmp_path / "nope.xml")


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestConstruction:
    def test_invalid_max_attempts(self) -> None:
        with pytest.raises(ValueError, match="max_attempts"):
            XmlLoader(max_attempts=0)

    def test_repr(self) -> None:
        assert repr(XmlLoader(timeout=5.0)) == "XmlLoader(timeout=5.0)"

    def test_import_error_has_install_hint(self, monkeypatch: pytest.MonkeyPatch) -> None:
        real_import = builtins.__import__

        def _fake_import(name: str, *args: Any, **kwargs: Any) -> Any:
            if name == "httpx":
                raise ImportError("No module named 'httpx'")
            return real_import(name, *args, **kwargs)

        monkeypatch.setattr(builtins, "__import__", _fake_import)
        with pytest.raises(ImportError, match=r"pip install jxon\[http\]"):
            XmlLoader()
