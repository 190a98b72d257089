# jsonconvert/schema/types.py
from typing import Any, Dict

SUPPORTED_TYPES = (
    "string",
    "number",
    "boolean",
    "null",
    "object",
    "array",
)


def classify(value: Any) -> str:
    """
    Map a Python value onto one of the six JSON kinds.
    Anything that is not None/bool/int/float/str/dict/list/tuple is reported as "string".
    """
    if value is None:
        return "null"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return "string"


def is_schema_node(value: Any) -> bool:
    """True for a dict whose `type` is a supported kind, i.e. a schema fragment rather than example data."""
    if not isinstance(value, dict):
        return False
    t = value.get("type")
    return isinstance(t, str) and t in SUPPORTED_TYPES


def is_object_schema(node: Any) -> bool:
    """Object node with a `properties` mapping."""
    return (
        isinstance(node, dict)
        and node.get("type") == "object"
        and isinstance(node.get("properties"), dict)
    )


def is_array_schema(node: Any) -> bool:
    """Array node with an `items` mapping."""
    return (
        isinstance(node, dict)
        and node.get("type") == "array"
        and isinstance(node.get("items"), dict)
    )


def properties_of(node: Dict[str, Any]) -> Dict[str, Any]:
    """Declared properties of an object node, {} when absent."""
    props = node.get("properties")
    return props if isinstance(props, dict) else {}
