# jsonconvert/convert/filters.py
"""
Per-type coercion filters and default values.

A filter is called as ``fn(value, data, node, context)``:

    value    the raw value read from the input document
    data     the whole input object the value was read from
    node     the property's schema node
    context  the ExecutionContext of the running conversion

and returns the coerced value. Filters must not mutate `data`; the engine
threads the returned value into the output. The built-in filters only look
at `value`.
"""
from __future__ import annotations

import math
from typing import Any, Callable, Dict, Mapping, Optional

from jsonconvert.schema.attributes import get_attribute

Filter = Callable[..., Any]

DEFAULT_VALUES: Dict[str, Any] = {
    "string": "",
    "number": 0,
    "boolean": False,
    "null": None,
}


def to_string(value: Any, *_: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_number(value: Any, *_: Any) -> Any:
    """None/"" -> 0, numbers pass, numeric text is parsed, anything else is NaN."""
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def to_boolean(value: Any, *_: Any) -> bool:
    return bool(value)


def to_null(value: Any, *_: Any) -> None:
    return None


def to_array(value: Any, *_: Any) -> list:
    return value if isinstance(value, list) else []


def to_object(value: Any, *_: Any) -> dict:
    return value if isinstance(value, dict) else {}


DEFAULT_FILTERS: Dict[str, Filter] = {
    "string": to_string,
    "number": to_number,
    "boolean": to_boolean,
    "null": to_null,
    "array": to_array,
    "object": to_object,
}


def resolve_filter(node: Mapping[str, Any], filters: Mapping[str, Optional[Filter]]) -> Optional[Filter]:
    """The node's own `filter` attribute, else the registry entry for its type."""
    fn = get_attribute(node, "filter")
    if callable(fn):
        return fn
    fn = filters.get(node.get("type"))
    return fn if callable(fn) else None
