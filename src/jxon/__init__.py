"""jxon - convert XML documents to JSON-compatible values by natural mapping."""

from __future__ import annotations

from jxon.api import load_and_parse, parse_document, parse_xml
from jxon.coercion import convert_value
from jxon.config import JxonConfig
from jxon.errors import (
    DocumentEmptyError,
    JxonError,
    LoadError,
    MalformedInputError,
    NestingTooDeepError,
)
from jxon.parser import JxonParser
from jxon.serialize import dumps
from jxon.tree.nodes import ChildDescriptor, JxonObject, NodeKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "ChildDescriptor",
    "DocumentEmptyError",
    "JxonConfig",
    "JxonError",
    "JxonObject",
    "JxonParser",
    "LoadError",
    "MalformedInputError",
    "NestingTooDeepError",
    "NodeKind",
    "convert_value",
    "dumps",
    "load_and_parse",
    "parse_document",
    "parse_xml",
]
