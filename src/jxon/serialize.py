"""JSON serialisation for JXON values.

JSON has no date type, so ``datetime`` values are written as ISO-8601
strings.  Every other JXON value maps onto a native JSON type.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

__all__ = ["dumps", "json_default"]


def json_default(value: Any) -> str:
    """``json.dumps`` hook encoding ``datetime`` as ISO-8601."""
    if isinstance(value, datetime):
        return value.isoformat()
    msg = f"Object of type {type(value).__name__} is not JSON serializable"
    raise TypeError(msg)


def dumps(value: Any, **kwargs: Any) -> str:
    """Serialise a JXON value to a JSON string.

    Args:
        value:  Any JXON value.
        kwargs: Passed through to ``json.dumps`` (``indent``, ``sort_keys``...).
    """
    kwargs.setdefault("ensure_ascii", False)
    return json.dumps(value, default=json_default, **kwargs)
