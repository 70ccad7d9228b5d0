"""NodeTransformer: converts a DOM element into its JXON value.

Mapping rules, applied per element:

- no attributes and no children -> ``config.empty_element_value``
- a single non-element descriptor -> that value, coerced to a scalar
- otherwise a ``JxonObject`` with ``@attr`` keys, child tag keys and an
  accumulated ``#text`` key
- repeated keys are promoted to lists in document order
- an element without element children collapses to its coerced ``#text``,
  dropping its attributes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from jxon.coercion import convert_value
from jxon.config import JxonConfig
from jxon.errors import NestingTooDeepError
from jxon.tree.nodes import (
    ATTRIBUTE_PREFIX,
    TEXT_KEY,
    ChildDescriptor,
    JxonObject,
    JxonValue,
    NodeKind,
)
from jxon.tree.walker import ElementWalker

if TYPE_CHECKING:
    from jxon.protocols import DomNode

__all__ = ["NodeTransformer"]


def _assign(obj: JxonObject, key: str, value: JxonValue) -> None:
    """Store ``value`` under ``key``, promoting to a list on collision."""
    if key not in obj:
        obj[key] = value
        return

    existing = obj[key]
    if isinstance(existing, list):
        existing.append(value)
    else:
        obj[key] = [existing, value]


def _leaf_value(descriptor: ChildDescriptor) -> str:
    """Raw value a non-element descriptor contributes; CDATA is not trimmed."""
    raw = descriptor.raw_value or ""
    if descriptor.kind is NodeKind.CDATA:
        return raw
    return raw.strip()


@dataclass
class NodeTransformer:
    """Recursively converts DOM elements into JXON values.

    Holds only immutable configuration, so one instance can transform any
    number of independent trees, from any number of threads.  Every call
    builds its own result objects.

    Example::

        transformer = NodeTransformer()
        element = minidom.parseString("<a><b>1</b><b>2</b></a>").documentElement
        transformer.transform(element)
        # JxonObject({'b': [1.0, 2.0]})
    """

    config: JxonConfig = field(default_factory=JxonConfig)
    walker: ElementWalker = field(init=False)

    def __post_init__(self) -> None:
        self.walker = ElementWalker(strict=self.config.strict)

    def transform(
        self,
        element: DomNode,
        parent: JxonObject | None = None,
        depth: int = 0,
    ) -> JxonValue:
        """Convert one element (and its subtree) into a JXON value.

        Args:
            element: A DOM element node.
            parent:  The JxonObject the result will be attached to, recorded
                     as a weak back-reference on any object built here.
            depth:   Nesting depth of ``element`` below the document root.

        Returns:
            A scalar, or a ``JxonObject`` when the element has element
            children.

        Raises:
            NestingTooDeepError: If ``depth`` exceeds ``config.max_depth``.
            MalformedInputError: In strict mode, on unrecognised node kinds.
        """
        max_depth = self.config.max_depth
        if max_depth is not None and depth > max_depth:
            msg = f"Element nesting exceeds max_depth={max_depth}"
            raise NestingTooDeepError(msg)

        descriptors = self.walker.enumerate(element)
        if not descriptors:
            return self.config.empty_element_value

        if len(descriptors) == 1 and descriptors[0].kind is not NodeKind.ELEMENT:
            return convert_value(_leaf_value(descriptors[0]))

        obj = JxonObject(parent=parent)
        text = ""
        saw_element_child = False

        for descriptor in descriptors:
            kind = descriptor.kind
            if kind is NodeKind.ATTRIBUTE:
                value = convert_value(_leaf_value(descriptor))
                _assign(obj, ATTRIBUTE_PREFIX + str(descriptor.name), value)
            elif kind is NodeKind.ELEMENT:
                value = self.transform(descriptor.node, parent=obj, depth=depth + 1)
                _assign(obj, str(descriptor.name), value)
                saw_element_child = True
            elif kind is NodeKind.TEXT:
                text += _leaf_value(descriptor)
                if text:
                    obj[TEXT_KEY] = text
            elif kind is NodeKind.CDATA:
                text += _leaf_value(descriptor)
                obj[TEXT_KEY] = text

        if not saw_element_child:
            return convert_value(obj.get(TEXT_KEY))

        return obj
