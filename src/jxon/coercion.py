"""convert_value: coerce raw XML text to the closest native scalar.

Rules, first match wins:

1. ``None``, empty or whitespace-only -> ``None``
2. ``"true"`` / ``"false"`` (any case) -> ``bool``
3. a complete decimal numeric literal -> ``float``
4. an ISO-8601 date or date-time -> ``datetime``
5. anything else -> the input string, untouched

The numeric test matches the whole string.  Strings that merely start with a
number (``"12px"``) stay strings, and ``"inf"`` / ``"nan"`` are not numbers.
Literals that overflow a double (``"1e999"``) stay strings too.
"""

from __future__ import annotations

import math
import re
from datetime import datetime

__all__ = ["ScalarValue", "convert_value"]

ScalarValue = bool | float | datetime | str | None

# Optional sign, digits with optional fraction (or a bare fraction), optional exponent.
_NUMERIC = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# fromisoformat also accepts compact forms like "20240101"; require a separator.
_ISO_DATE_PREFIX = re.compile(r"\d{4}-\d{2}-\d{2}")


def _parse_datetime(value: str) -> datetime | None:
    if not _ISO_DATE_PREFIX.match(value):
        return None
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return None


def convert_value(raw: str | None) -> ScalarValue:
    """Convert a raw attribute or text value to its closest scalar type.

    Args:
        raw: The raw string.  ``None`` is treated like an empty string.

    Returns:
        ``None``, a ``bool``, a ``float``, a ``datetime`` or the original
        string.
    """
    if raw is None or not raw.strip():
        return None

    lowered = raw.lower()
    if lowered in ("true", "false"):
        return lowered == "true"

    stripped = raw.strip()
    if _NUMERIC.fullmatch(stripped):
        number = float(stripped)
        if math.isfinite(number):
            return number

    parsed = _parse_datetime(stripped)
    if parsed is not None:
        return parsed

    return raw
