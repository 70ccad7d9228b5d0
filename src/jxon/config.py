"""JxonConfig: immutable conversion settings.

A single ``JxonConfig`` is shared by every recursive ``transform`` call of one
parser.  It is frozen so that a parser can be reused across threads.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["JxonConfig"]

_SCALAR_TYPES = (type(None), bool, int, float, str)


@dataclass(frozen=True, slots=True)
class JxonConfig:
    """Immutable configuration for the XML-to-JXON transform.

    Attributes:
        empty_element_value: Value substituted for an element that has no
            attributes and no children (e.g. ``<a/>``).  Must be a JSON
            scalar.  Default ``None``.
        strict: When True, an input node of unrecognised kind raises
            ``MalformedInputError`` instead of being logged and skipped.
            Default False.
        max_depth: Maximum element nesting depth below the root.  ``None``
            disables the guard and leaves Python's recursion limit as the
            only bound.  Default 256.
    """

    empty_element_value: Any = None
    strict: bool = False
    max_depth: int | None = 256

    def __post_init__(self) -> None:
        if not isinstance(self.empty_element_value, _SCALAR_TYPES):
            msg = (
                "empty_element_value must be a JSON scalar, "
                f"got {type(self.empty_element_value).__name__}"
            )
            raise ValueError(msg)
        if self.max_depth is not None and self.max_depth < 1:
            msg = f"max_depth must be >= 1 or None, got {self.max_depth}"
            raise ValueError(msg)
