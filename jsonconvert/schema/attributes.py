# jsonconvert/schema/attributes.py
"""
Schema attribute namespacing.

Draft-04 keywords are stored on a schema node under their own names. Every
other attribute (``name``, ``alias``, ``filter``, ``enums``, user-defined
metadata) is an extension attribute and is stored under ``@<name>`` so that
a built schema remains a plain draft-04 document.

`SchemaNode` keeps the two groups apart while a node is being assembled and
renders them into a dict at the end, so an extension key is prefixed exactly
once no matter how often it is written.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

EXTENSION_PREFIX = "@"

# Draft-04 validation and metadata keywords
STANDARD_ATTRIBUTES = frozenset({
    "id",
    "$schema",
    "$ref",
    "title",
    "description",
    "default",
    "type",
    "format",
    "enum",
    # numbers
    "multipleOf",
    "maximum",
    "exclusiveMaximum",
    "minimum",
    "exclusiveMinimum",
    # strings
    "maxLength",
    "minLength",
    "pattern",
    # arrays
    "items",
    "additionalItems",
    "maxItems",
    "minItems",
    "uniqueItems",
    # objects
    "properties",
    "patternProperties",
    "additionalProperties",
    "required",
    "maxProperties",
    "minProperties",
    "dependencies",
    # composition / reuse
    "definitions",
    "allOf",
    "anyOf",
    "oneOf",
    "not",
})


def is_standard(name: str) -> bool:
    return name in STANDARD_ATTRIBUTES


def bare_name(name: str) -> str:
    """Attribute name without the extension prefix."""
    if name.startswith(EXTENSION_PREFIX) and not is_standard(name):
        return name[len(EXTENSION_PREFIX):]
    return name


def storage_key(name: str) -> str:
    """Key under which attribute `name` is stored on a schema dict."""
    name = bare_name(name)
    if is_standard(name):
        return name
    return EXTENSION_PREFIX + name


def set_attribute(node: Dict[str, Any], name: str, value: Any) -> Dict[str, Any]:
    """Write an attribute, prefixing it when it is not a draft-04 keyword. Returns `node`."""
    node[storage_key(name)] = value
    return node


def get_attribute(node: Mapping[str, Any], name: str, default: Any = None) -> Any:
    """Read an attribute written by `set_attribute` (or by the builder)."""
    if not isinstance(node, Mapping):
        return default
    return node.get(storage_key(name), default)


def has_attribute(node: Mapping[str, Any], name: str) -> bool:
    return isinstance(node, Mapping) and storage_key(name) in node


@dataclass
class SchemaNode:
    """A schema node under construction: draft-04 keywords plus extension attributes."""
    standard: Dict[str, Any] = field(default_factory=dict)
    extensions: Dict[str, Any] = field(default_factory=dict)

    def set(self, name: str, value: Any) -> None:
        name = bare_name(name)
        if is_standard(name):
            self.standard[name] = value
        else:
            self.extensions[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        name = bare_name(name)
        if is_standard(name):
            return self.standard.get(name, default)
        return self.extensions.get(name, default)

    def discard(self, name: str) -> None:
        name = bare_name(name)
        self.standard.pop(name, None)
        self.extensions.pop(name, None)

    def update(self, attrs: Mapping[str, Any]) -> None:
        for k, v in attrs.items():
            self.set(k, v)

    def to_dict(self) -> Dict[str, Any]:
        out = {EXTENSION_PREFIX + k: v for k, v in self.extensions.items()}
        out.update(self.standard)
        return out

    @classmethod
    def from_dict(cls, attrs: Mapping[str, Any]) -> "SchemaNode":
        node = cls()
        node.update(attrs)
        return node


def namespace(node: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of `node` whose non-standard keys carry the extension prefix.
    Already-prefixed keys are kept as they are, so namespace(namespace(n)) == namespace(n).
    """
    return SchemaNode.from_dict(node).to_dict()
