"""Structural interfaces at the boundary between jxon and XML parsers.

``DomNode`` is the subset of the W3C DOM node interface the walker reads.
``xml.dom.minidom`` nodes satisfy it as-is; any other tree can be adapted by
exposing the same attributes.

``DocumentAdapter`` is the extension point for obtaining a root element from
XML text.  Any class with a conformant ``parse`` method passes ``isinstance``
checks, no inheritance required.

Example::

    from jxon.protocols import DocumentAdapter

    class MyAdapter:
        def parse(self, text: str | bytes) -> DomNode | None:
            ...

    assert isinstance(MyAdapter(), DocumentAdapter)
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

__all__ = ["DocumentAdapter", "DomNode"]


@runtime_checkable
class DomNode(Protocol):
    """A W3C-DOM-style node.

    ``attributes`` is a ``NamedNodeMap``-like object (``length`` and
    ``item(i)``) for elements and ``None`` for other node kinds.
    ``childNodes`` is an ordered sequence of nodes.
    """

    nodeType: int
    nodeName: str
    nodeValue: str | None
    attributes: Any
    childNodes: Any


@runtime_checkable
class DocumentAdapter(Protocol):
    """Turns XML text into a root element.

    ``parse`` must return the document's root element, or ``None`` when the
    document has none.  Syntax errors are reported as ``LoadError``.
    """

    def parse(self, text: str | bytes) -> DomNode | None: ...
