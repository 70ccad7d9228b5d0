"""ElementWalker: lists an element's attributes and child nodes by kind.

Attributes come first, in declared order, followed by child nodes in document
order.  Comments, processing instructions and other DOM node kinds that carry
no data are dropped.  A node kind outside the DOM vocabulary is malformed
input: it is logged and skipped, or raised in strict mode.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from jxon.errors import MalformedInputError
from jxon.tree.nodes import ChildDescriptor, NodeKind

if TYPE_CHECKING:
    from jxon.protocols import DomNode

__all__ = ["ElementWalker"]

logger = logging.getLogger(__name__)

# W3C DOM nodeType codes (same values as xml.dom.Node).
ELEMENT_NODE = 1
TEXT_NODE = 3
CDATA_SECTION_NODE = 4
ENTITY_REFERENCE_NODE = 5
ENTITY_NODE = 6
PROCESSING_INSTRUCTION_NODE = 7
COMMENT_NODE = 8
DOCUMENT_TYPE_NODE = 10
NOTATION_NODE = 12

_IGNORABLE = frozenset(
    {
        ENTITY_REFERENCE_NODE,
        ENTITY_NODE,
        PROCESSING_INSTRUCTION_NODE,
        COMMENT_NODE,
        DOCUMENT_TYPE_NODE,
        NOTATION_NODE,
    }
)


@dataclass(frozen=True, slots=True)
class ElementWalker:
    """Enumerates the attributes and child nodes of a DOM element.

    Stateless apart from the ``strict`` flag; one instance may serve any
    number of elements and threads.

    Example::

        walker = ElementWalker()
        element = minidom.parseString('<a x="1">hi</a>').documentElement
        [d.kind for d in walker.enumerate(element)]
        # [NodeKind.ATTRIBUTE, NodeKind.TEXT]
    """

    strict: bool = False

    def enumerate(self, element: DomNode) -> list[ChildDescriptor]:
        """Return the element's descriptors, attributes first.

        Args:
            element: A DOM element node.

        Returns:
            Descriptors in enumeration order.  Empty when the element has
            neither attributes nor data-carrying children.

        Raises:
            MalformedInputError: In strict mode, when a child node has an
                unrecognised ``nodeType``.
        """
        descriptors: list[ChildDescriptor] = []

        attributes = element.attributes
        if attributes is not None:
            for idx in range(attributes.length):
                attr = attributes.item(idx)
                descriptors.append(
                    ChildDescriptor(
                        kind=NodeKind.ATTRIBUTE,
                        name=attr.nodeName,
                        raw_value=attr.nodeValue or "",
                    )
                )

        for child in element.childNodes:
            descriptor = self._classify(child)
            if descriptor is not None:
                descriptors.append(descriptor)

        return descriptors

    def _classify(self, child: DomNode) -> ChildDescriptor | None:
        node_type = getattr(child, "nodeType", None)

        if node_type == ELEMENT_NODE:
            return ChildDescriptor(kind=NodeKind.ELEMENT, name=child.nodeName, node=child)
        if node_type == TEXT_NODE:
            return ChildDescriptor(kind=NodeKind.TEXT, raw_value=child.nodeValue or "")
        if node_type == CDATA_SECTION_NODE:
            return ChildDescriptor(kind=NodeKind.CDATA, raw_value=child.nodeValue or "")
        if node_type in _IGNORABLE:
            logger.debug("Skipping ignorable node of type %s", node_type)
            return None

        msg = f"Unrecognised child node type {node_type!r}"
        if self.strict:
            raise MalformedInputError(msg, node_type=node_type)
        logger.warning("%s; skipping node", msg)
        return None
