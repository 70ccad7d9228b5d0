"""MinidomAdapter: DocumentAdapter backed by ``xml.dom.minidom``.

minidom keeps CDATA sections as their own nodes and reports attributes in
declared order, which is what the walker needs.
"""

from __future__ import annotations

from xml.dom import minidom
from xml.parsers.expat import ExpatError

from jxon.errors import LoadError

__all__ = ["MinidomAdapter"]


class MinidomAdapter:
    """Parses XML text into a minidom tree and returns its root element."""

    def __repr__(self) -> str:
        return "MinidomAdapter()"

    def parse(self, text: str | bytes) -> minidom.Element | None:
        """Return the root element of ``text``.

        Raises:
            LoadError: If ``text`` is not well-formed XML.
        """
        try:
            document = minidom.parseString(text)
        except ExpatError as exc:
            msg = f"Malformed XML: {exc}"
            raise LoadError(msg) from exc
        return document.documentElement
