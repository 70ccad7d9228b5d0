"""Tests for MinidomAdapter."""

from __future__ import annotations

import pytest

from jxon.adapters import MinidomAdapter
from jxon.errors import LoadError
from jxon.protocols import DocumentAdapter, DomNode


@pytest.fixture
def adapter() -> MinidomAdapter:
    return MinidomAdapter()


class TestMinidomAdapter:
    def test_protocol_conformance(self, adapter: MinidomAdapter) -> None:
        assert isinstance(adapter, DocumentAdapter)

    def test_returns_root_element(self, adapter: MinidomAdapter) -> None:
        root = adapter.parse("<?xml version='1.0'?><!-- c --><feed><a/></feed>")
        assert root is not None
        assert root.nodeName == "feed"

    def test_root_satisfies_dom_protocol(self, adapter: MinidomAdapter) -> None:
        assert isinstance(adapter.parse("<a/>"), DomNode)

    def test_keeps_cdata_nodes(self, adapter: MinidomAdapter) -> None:
        root = adapter.parse("<a><![CDATA[x]]></a>")
        assert root is not None
        assert root.firstChild.nodeType == root.CDATA_SECTION_NODE

    @pytest.mark.parametrize("text", ["", "<a>", "<a></b>", "plain text"])
    def test_malformed_raises_load_error(self, adapter: MinidomAdapter, text: str) -> None:
        with pytest.raises(LoadError, match="Malformed XML"):
            adapter.parse(text)

    def test_load_error_chains_cause(self, adapter: MinidomAdapter) -> None:
        with pytest.raises(LoadError) as exc_info:
            adapter.parse("<a>")
        assert exc_info.value.__cause__ is not None

    def test_repr(self, adapter: MinidomAdapter) -> None:
        assert repr(adapter) == "MinidomAdapter()"
