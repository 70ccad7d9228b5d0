"""JxonObject, NodeKind and ChildDescriptor: the jxon data model.

A transformed document is made of three kinds of value:

- scalars (``None``, ``bool``, ``float``, ``datetime``, ``str``)
- ``JxonObject``, an insertion-ordered mapping of string keys to values
- ``list``, produced only by array promotion of colliding sibling keys
"""

from __future__ import annotations

import weakref
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum, auto
from typing import Any, Union

__all__ = [
    "ATTRIBUTE_PREFIX",
    "TEXT_KEY",
    "ChildDescriptor",
    "JxonObject",
    "JxonValue",
    "NodeKind",
]

ATTRIBUTE_PREFIX = "@"
TEXT_KEY = "#text"


class NodeKind(StrEnum):
    """The four descriptor kinds produced by the ElementWalker.

    - ATTRIBUTE -> "attribute" : an attribute of the element
    - ELEMENT   -> "element"   : a child element
    - TEXT      -> "text"      : a text run, whitespace-trimmed on use
    - CDATA     -> "cdata"     : a CDATA section, used verbatim
    """

    ATTRIBUTE = auto()
    ELEMENT = auto()
    TEXT = auto()
    CDATA = auto()


@dataclass(frozen=True, slots=True)
class ChildDescriptor:
    """One attribute or child node of an element, classified by kind.

    Attributes:
        kind:       Which kind of descriptor this is (see NodeKind).
        name:       Qualified attribute or element name; None for text.
        raw_value:  Raw attribute/text/CDATA string; None for elements.
        node:       The child element itself, for ELEMENT descriptors.
    """

    kind: NodeKind
    name: str | None = None
    raw_value: str | None = None
    node: Any = None


class JxonObject(dict):  # type: ignore[type-arg]
    """An ordered JXON mapping with an optional weak link to its parent.

    Being a plain ``dict`` subclass, a JxonObject serialises directly with
    ``json``.  The parent link is a ``weakref`` so that a child never keeps
    its parent alive; the transform itself never reads it.  Pickling or
    copying a JxonObject keeps its contents but not its parent link.
    """

    __slots__ = ("_parent_ref", "__weakref__")

    def __init__(self, *args: Any, parent: JxonObject | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> JxonObject | None:
        """The enclosing JxonObject, or None at the top or once it is collected."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def text(self) -> str | None:
        """The accumulated ``#text`` content, if any."""
        return self.get(TEXT_KEY)

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickles and copies drop the parent link; weakrefs cannot be pickled.
        return (type(self), (dict(self),))

    def __repr__(self) -> str:
        return f"JxonObject({dict.__repr__(self)})"


JxonValue = Union[bool, float, datetime, str, None, JxonObject, "list[JxonValue]"]
