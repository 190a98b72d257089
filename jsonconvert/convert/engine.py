# jsonconvert/convert/engine.py
"""
Reshape a JSON-like document against a schema.

    schema = build_schema({"*id": 1, "name@n": "x"})
    convert({"n": "hi"}, schema)        # -> {"id": 0, "name": "hi"}

Wrong-shaped input is coerced rather than rejected: a non-dict where an
object is expected becomes {}, a non-list where an array is expected
becomes []. Missing optional properties are left out; missing required
ones get a default.
"""
from __future__ import annotations

from copy import deepcopy
from dataclasses import replace
from typing import Any, Dict, List, Optional, Set

from jsonconvert.config import DEFAULT_CONVERT_OPTIONS, ConvertOptions
from jsonconvert.context import ExecutionContext
from jsonconvert.convert.enums import remap_enum
from jsonconvert.convert.filters import resolve_filter
from jsonconvert.errors import CircularReferenceError
from jsonconvert.schema.attributes import get_attribute, has_attribute
from jsonconvert.schema.builder import build_schema
from jsonconvert.schema.types import (
    is_array_schema,
    is_object_schema,
    is_schema_node,
    properties_of,
)
from jsonconvert.utils.io import json_clone
from jsonconvert.utils.logger import get_logger

logger = get_logger("convert")


class Converter:
    """One conversion run: options plus the context passed to filters."""

    def __init__(self, options: ConvertOptions, context: ExecutionContext):
        self.options = options
        self.context = context
        self._on_path: Set[int] = set()

    def parse(self, data: Any, schema: Dict[str, Any]) -> Any:
        if is_object_schema(schema):
            return self.parse_object(data, schema)
        if is_array_schema(schema):
            return self.parse_array(data, schema)
        logger.debug("root schema of type %r is neither object nor array; nothing to convert", schema.get("type"))
        return None

    @staticmethod
    def input_key(node: Dict[str, Any], fallback: str) -> str:
        """Key to read from the input: alias, else name, else the property key."""
        return get_attribute(node, "alias") or get_attribute(node, "name") or fallback

    def get_value(self, data: Dict[str, Any], node: Dict[str, Any], source: str) -> Any:
        value = data[source]

        fn = resolve_filter(node, self.options.filters)
        if fn is not None:
            value = fn(value, data, node, self.context)

        if self.options.remap_enums:
            value = remap_enum(value, node, self.options.filters, data, self.context)
        return value

    def get_default(self, node: Dict[str, Any], path: str = "$") -> Any:
        if not isinstance(node, dict):
            return None
        if has_attribute(node, "default"):
            return deepcopy(node["default"])

        kind = node.get("type")
        defaults = self.options.defaults
        if isinstance(kind, str) and kind in defaults:
            return deepcopy(defaults[kind])

        if kind == "array":
            return []

        if kind == "object":
            self._enter(node, "schema", path)
            try:
                return {
                    key: self.get_default(prop, f"{path}.{key}")
                    for key, prop in properties_of(node).items()
                }
            finally:
                self._leave(node)
        return None

    def parse_object(self, data: Any, schema: Dict[str, Any], path: str = "$") -> Any:
        data = data if isinstance(data, dict) else {}

        if not is_object_schema(schema):
            return data

        properties = schema["properties"]
        if not properties:
            return data

        self._enter(data, "document", path)
        try:
            output: Dict[str, Any] = {}
            required = schema.get("required") or []
            consumed: List[str] = []

            for key, prop in properties.items():
                if not isinstance(prop, dict):
                    prop = {}
                source = self.input_key(prop, key)

                if source in data:
                    consumed.append(source)
                    value = self.get_value(data, prop, source)
                    if is_object_schema(prop):
                        output[key] = self.parse_object(value, prop, f"{path}.{key}")
                    elif is_array_schema(prop):
                        output[key] = self.parse_array(value, prop, f"{path}.{key}")
                    else:
                        output[key] = value
                elif key in required:
                    output[key] = self.get_default(prop, f"{path}.{key}")

            if self.options.redundancy:
                extra = json_clone(data) or {}
                for source in consumed:
                    extra.pop(source, None)
                for k, v in extra.items():
                    output.setdefault(k, v)
                if extra:
                    logger.debug("kept %d undeclared field(s) at %s", len(extra), path)
        finally:
            self._leave(data)

        return output

    def parse_array(self, data: Any, schema: Dict[str, Any], path: str = "$") -> Any:
        if isinstance(data, tuple):
            data = list(data)
        data = data if isinstance(data, list) else []

        if not is_array_schema(schema):
            return data
        if not data:
            return []

        items = schema["items"]
        if not is_object_schema(items):
            # arrays of scalars / arrays are passed through
            return data

        return [self.parse_object(item, items, f"{path}[{i}]") for i, item in enumerate(data)]

    # -- traversal guard --
    def _enter(self, container: Any, where: str, path: str) -> None:
        marker = id(container)
        if marker in self._on_path:
            raise CircularReferenceError(where, path)
        self._on_path.add(marker)

    def _leave(self, container: Any) -> None:
        self._on_path.discard(id(container))


def _is_blank(schema: Any) -> bool:
    return schema is None or (not schema and not isinstance(schema, (list, tuple)))


def convert(data: Any, schema: Any = None, options: Optional[ConvertOptions] = None, **overrides: Any) -> Any:
    """
    Convert `data` to the shape described by `schema`.

    `schema` is a built schema document, or any template accepted by
    build_schema (built with default SchemaOptions). Without a schema the
    input is returned unchanged.

    `overrides` are ConvertOptions fields (redundancy, defaults, filters,
    remap_enums) replacing those of `options`.
    """
    if _is_blank(schema):
        logger.debug("no schema given, returning input unchanged")
        return data

    opts = options or DEFAULT_CONVERT_OPTIONS
    if overrides:
        opts = replace(opts, **overrides)

    if not is_schema_node(schema):
        schema = build_schema(schema)

    context = ExecutionContext(convert=convert)
    return Converter(opts, context).parse(data, schema)
