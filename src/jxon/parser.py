"""JxonParser: document-level entry point wiring adapter and transformer.

``parse_document`` takes an already parsed root element; ``parse_xml`` first
hands XML text to a ``DocumentAdapter``.  Either way the result is a
``JxonObject`` with exactly one key, the root element's tag name.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from jxon.adapters.minidom import MinidomAdapter
from jxon.config import JxonConfig
from jxon.errors import DocumentEmptyError
from jxon.tree.nodes import JxonObject
from jxon.tree.transformer import NodeTransformer

if TYPE_CHECKING:
    from jxon.protocols import DocumentAdapter, DomNode

__all__ = ["JxonParser"]

DOCUMENT_NODE = 9


class JxonParser:
    """Converts XML documents into JXON objects.

    Holds a ``NodeTransformer`` built from one immutable ``JxonConfig`` and a
    ``DocumentAdapter`` for turning text into a DOM.  A parser carries no
    per-call state and may be shared.

    Example::

        from jxon.parser import JxonParser

        parser = JxonParser()
        parser.parse_xml("<root><item>1</item><item>2</item></root>")
        # JxonObject({'root': JxonObject({'item': [1.0, 2.0]})})
    """

    def __init__(
        self,
        config: JxonConfig | None = None,
        adapter: DocumentAdapter | None = None,
    ) -> None:
        """Initialise the parser.

        Args:
            config:  Conversion settings.  Defaults to ``JxonConfig()``.
            adapter: Source of DOM trees for ``parse_xml``.  Defaults to
                ``MinidomAdapter()``.
        """
        self._config = config if config is not None else JxonConfig()
        self._adapter = adapter if adapter is not None else MinidomAdapter()
        self._transformer = NodeTransformer(config=self._config)

    @property
    def config(self) -> JxonConfig:
        return self._config

    @property
    def adapter(self) -> DocumentAdapter:
        return self._adapter

    def parse_document(self, root: DomNode | None) -> JxonObject:
        """Wrap the transformed root element under its tag name.

        Args:
            root: The document's root element.  A DOM ``Document`` node is
                accepted and unwrapped to its ``documentElement``.

        Returns:
            A JxonObject with a single key, the root tag name.

        Raises:
            DocumentEmptyError: If there is no root element.
        """
        if root is not None and getattr(root, "nodeType", None) == DOCUMENT_NODE:
            root = root.documentElement  # type: ignore[attr-defined]
        if root is None:
            msg = "Document has no root element"
            raise DocumentEmptyError(msg)

        document = JxonObject()
        document[root.nodeName] = self._transformer.transform(root, parent=document)
        return document

    def parse_xml(self, text: str | bytes) -> JxonObject:
        """Parse XML text with the configured adapter and convert it.

        Raises:
            LoadError: If the adapter cannot parse ``text``.
            DocumentEmptyError: If the adapter yields no root element.
        """
        return self.parse_document(self._adapter.parse(text))
