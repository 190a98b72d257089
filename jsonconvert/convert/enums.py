# jsonconvert/convert/enums.py
"""
Enum remapping.

A property may declare ``@enums``: a list of records

    {"input_value": "1", "input_type": "number",
     "output_value": "active", "output_type": "string"}

The first record whose (type-coerced) input_value strictly equals the
property value replaces it with the (type-coerced) output_value.

Remapping only runs when ConvertOptions.remap_enums is set; by default
`@enums` is carried in the schema and ignored during conversion.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from jsonconvert.convert.filters import Filter
from jsonconvert.schema.attributes import get_attribute
from jsonconvert.schema.types import classify
from jsonconvert.utils.logger import get_logger

logger = get_logger("convert.enums")


def strict_equal(a: Any, b: Any) -> bool:
    """Same JSON kind and equal value; containers compare by identity."""
    if classify(a) != classify(b):
        return False
    if isinstance(a, (dict, list, tuple)):
        return a is b
    return a == b


def _typed(value: Any, type_name: Any, filters: Mapping[str, Optional[Filter]],
           data: Dict[str, Any], node: Dict[str, Any], context: Any) -> Any:
    fn = filters.get(type_name) if isinstance(type_name, str) else None
    if callable(fn):
        return fn(value, data, node, context)
    return value


def remap_enum(value: Any, node: Dict[str, Any], filters: Mapping[str, Optional[Filter]],
               data: Dict[str, Any], context: Any = None) -> Any:
    """Return the remapped value, or `value` itself when no record matches. Records are not modified."""
    records = get_attribute(node, "enums")
    if not isinstance(records, list) or not records:
        return value

    for i, record in enumerate(records):
        if not isinstance(record, Mapping):
            continue
        expected = _typed(record.get("input_value"), record.get("input_type"), filters, data, node, context)
        if strict_equal(value, expected):
            logger.debug("enum record %d matched %r on '%s'", i, value, get_attribute(node, "name"))
            return _typed(record.get("output_value"), record.get("output_type"), filters, data, node, context)
    return value
