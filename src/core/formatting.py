"""Result formatters for tool responses.

Numeric engine results become fixed 2-decimal text, everything else is
serialized as 2-space indented JSON.
"""

from __future__ import annotations

import json
from numbers import Real
from typing import Any

from core.errors import ProcessingError


def format_number(value: Any) -> str:
    # Integer-valued results (counts, depth) keep the two decimals too
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ProcessingError(f"Expected a numeric result, got {type(value).__name__}")
    return f"{float(value):.2f}"


def _to_jsonable(obj: Any) -> Any:
    # Engine configurations expose their selected features
    if hasattr(obj, "get_selected_elements"):
        return sorted(str(e) for e in obj.get_selected_elements())
    if isinstance(obj, (set, frozenset)):
        items = (e if isinstance(e, (str, int, float)) else _to_jsonable(e) for e in obj)
        return sorted(items, key=str)
    name = getattr(obj, "name", None)
    if isinstance(name, str):
        return name
    return str(obj)


def format_structured(value: Any) -> str:
    return json.dumps(value, indent=2, default=_to_jsonable)
