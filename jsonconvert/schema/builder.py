# jsonconvert/schema/builder.py
"""
Infer a draft-04 schema from an example document.

Template keys may carry naming conventions:

    "*id"          required property `id`
    "name@n"       property `name`, read from input key `n`
    "*uid@user_id" both

Template values are either example data or hand-written schema fragments
(dicts whose `type` is a supported kind); fragments are merged into the
built node and their `properties`/`items` are themselves templates.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List, Optional, Set

from jsonconvert.config import DEFAULT_SCHEMA_OPTIONS, SchemaOptions
from jsonconvert.errors import CircularReferenceError
from jsonconvert.schema.attributes import SchemaNode
from jsonconvert.schema.types import classify, is_schema_node
from jsonconvert.utils.logger import get_logger

logger = get_logger("schema")

DRAFT_04 = "http://json-schema.org/draft-04/schema#"

BASE_SCHEMA = {
    "id": DRAFT_04,
    "$schema": DRAFT_04,
    "title": "",
    "description": "",
}


def _given(value: Any) -> bool:
    """Sub-template present: any container (even an empty one) or a truthy scalar."""
    return isinstance(value, (dict, list, tuple)) or bool(value)


class SchemaBuilder:
    """Walks one template into a SchemaNode tree. Not reusable across threads."""

    def __init__(self, options: SchemaOptions = DEFAULT_SCHEMA_OPTIONS):
        self.options = options
        self._on_path: Set[int] = set()

    def build(self, value: Any, node: Optional[SchemaNode] = None, path: str = "$") -> SchemaNode:
        node = node if node is not None else SchemaNode()
        if isinstance(value, (list, tuple)):
            self._enter(value, path)
            try:
                self._build_array(value, node, path)
            finally:
                self._leave(value)
        elif isinstance(value, dict):
            self._enter(value, path)
            try:
                if is_schema_node(value):
                    self._build_fragment(value, node, path)
                else:
                    self._build_object(value, node, path)
            finally:
                self._leave(value)
        else:
            node.set("type", classify(value))
        return node

    # -- traversal guard --
    def _enter(self, container: Any, path: str) -> None:
        marker = id(container)
        if marker in self._on_path:
            raise CircularReferenceError("template", path)
        self._on_path.add(marker)

    def _leave(self, container: Any) -> None:
        self._on_path.discard(id(container))

    # -- node kinds --
    def _build_array(self, arr, node: SchemaNode, path: str) -> None:
        # only the first element is sampled
        node.set("type", "array")
        items = SchemaNode()
        if len(arr):
            self.build(arr[0], items, f"{path}[0]")
        node.set("items", items.to_dict())

    def _build_fragment(self, fragment: Dict[str, Any], node: SchemaNode, path: str) -> None:
        # a fragment "name" never replaces the canonical key set by the parent
        canonical = node.get("name")
        node.update(fragment)
        if canonical is not None:
            node.set("name", canonical)
        kind = fragment["type"]

        if kind == "object":
            node.discard("properties")
            if _given(fragment.get("properties")):
                declared = list(fragment.get("required") or [])
                self.build(fragment["properties"], node, f"{path}.properties")
                required = node.get("required") or []
                node.set("required", declared + [n for n in required if n not in declared])

        if kind == "array":
            items = SchemaNode()
            if _given(fragment.get("items")):
                self.build(fragment["items"], items, f"{path}.items")
            node.set("items", items.to_dict())

    def _build_object(self, obj: Dict[str, Any], node: SchemaNode, path: str) -> None:
        opts = self.options
        required: List[str] = []
        properties: Dict[str, Any] = {}
        node.set("type", "object")
        node.set("required", required)

        for key, value in obj.items():
            name = str(key)

            # alias first: "*uid@user_id" -> "*uid" / "user_id"
            alias = ""
            idx = name.find(opts.alias_sign)
            if idx != -1:
                alias = name[idx + len(opts.alias_sign):]
                name = name[:idx]

            marked = name.startswith(opts.required_sign)
            if marked:
                name = name[len(opts.required_sign):]
            if (marked or opts.all_required) and name not in required:
                required.append(name)

            child = SchemaNode()
            if alias:
                child.set("alias", alias)
            child.set("name", name)
            self.build(value, child, f"{path}.{name}")
            properties[name] = child.to_dict()

        node.set("properties", properties)


def build_schema(template: Any, options: Optional[SchemaOptions] = None, **overrides: Any) -> Dict[str, Any]:
    """
    Build a schema document from `template`.

    `overrides` are SchemaOptions fields (title, description, required_sign,
    alias_sign, all_required) applied on top of `options`.
    """
    opts = options or DEFAULT_SCHEMA_OPTIONS
    if overrides:
        opts = replace(opts, **overrides)

    root = SchemaBuilder(opts).build(template).to_dict()

    doc = dict(BASE_SCHEMA)
    doc["title"] = opts.title
    doc["description"] = opts.description
    doc.update(root)
    logger.debug(
        "built %s schema from %s template (%d top-level properties)",
        doc.get("type"), classify(template), len(doc.get("properties") or {}),
    )
    return doc
