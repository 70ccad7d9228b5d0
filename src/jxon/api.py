"""Public API functions for jxon.

Each call creates a fresh ``JxonParser`` so that no state is shared between
calls.  Reuse a ``JxonParser`` directly to convert many documents with one
configuration.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from jxon.config import JxonConfig
from jxon.parser import JxonParser

if TYPE_CHECKING:
    from jxon.protocols import DomNode
    from jxon.tree.nodes import JxonObject

__all__ = ["load_and_parse", "parse_document", "parse_xml"]


def parse_document(root: DomNode | None, config: JxonConfig | None = None) -> JxonObject:
    """Convert an already parsed root element into a JxonObject.

    Args:
        root:   The document's root element (or the DOM ``Document``).
        config: Conversion settings.  Defaults to ``JxonConfig()`` when None.

    Returns:
        A JxonObject with one key, the root tag name.

    Raises:
        DocumentEmptyError: If ``root`` is None.
    """
    return JxonParser(config=config).parse_document(root)


def parse_xml(text: str | bytes, config: JxonConfig | None = None) -> JxonObject:
    """Parse XML text and convert it into a JxonObject.

    Args:
        text:   A complete XML document.
        config: Conversion settings.  Defaults to ``JxonConfig()`` when None.

    Raises:
        LoadError: If ``text`` is not well-formed XML.
    """
    return JxonParser(config=config).parse_xml(text)


async def load_and_parse(
    source: str | Path,
    config: JxonConfig | None = None,
    timeout: float = 10.0,
) -> JxonObject:
    """Fetch an XML document from a URL or path and convert it.

    Requires the ``http`` extra (``pip install jxon[http]``).

    Args:
        source:  An ``http(s)://`` or ``file://`` URL, or a filesystem path.
        config:  Conversion settings.  Defaults to ``JxonConfig()`` when None.
        timeout: HTTP timeout in seconds.

    Raises:
        LoadError: If the source cannot be fetched, read or parsed.
    """
    from jxon.adapters.loader import XmlLoader

    loader = XmlLoader(parser=JxonParser(config=config), timeout=timeout)
    return await loader.load_and_parse(source)
