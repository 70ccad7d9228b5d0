"""Exception hierarchy for jxon.

Conversion errors (``DocumentEmptyError``, ``MalformedInputError``,
``NestingTooDeepError``) are raised by the core transform.  ``LoadError``
belongs to the loading collaborators only and is never raised by the core.
"""

from __future__ import annotations

__all__ = [
    "DocumentEmptyError",
    "JxonError",
    "LoadError",
    "MalformedInputError",
    "NestingTooDeepError",
]


class JxonError(Exception):
    """Base class for every error raised by jxon."""


class DocumentEmptyError(JxonError):
    """No root element was supplied to ``parse_document``."""


class MalformedInputError(JxonError):
    """An input node reported a kind the walker does not recognise.

    Attributes:
        node_type: The unrecognised DOM ``nodeType`` value.
    """

    def __init__(self, message: str, node_type: object = None) -> None:
        super().__init__(message)
        self.node_type = node_type


class NestingTooDeepError(JxonError):
    """The element tree is nested deeper than ``JxonConfig.max_depth``."""


class LoadError(JxonError):
    """Fetching, reading or parsing an XML source failed.

    Attributes:
        source: The URL or path that failed to load.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source
