# jsonconvert/config.py
"""
Immutable option values for schema building and conversion.

Both option classes are frozen; derive variants with ``dataclasses.replace``
or the keyword overrides accepted by ``build_schema``/``convert``. Mapping
fields are merged per type over the built-in registries and frozen.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from jsonschema import validate, ValidationError

from jsonconvert.convert.filters import DEFAULT_FILTERS, DEFAULT_VALUES, Filter
from jsonconvert.errors import OptionsError
from jsonconvert.schema.types import SUPPORTED_TYPES
from jsonconvert.utils.io import PathLike, load_any


@dataclass(frozen=True)
class SchemaOptions:
    """Options for build_schema."""
    title: str = ""
    description: str = ""
    required_sign: str = "*"   # "*id" marks id as required
    alias_sign: str = "@"      # "id@uid" reads id from input key uid
    all_required: bool = False

    def __post_init__(self):
        for name in ("required_sign", "alias_sign"):
            sign = getattr(self, name)
            if not isinstance(sign, str) or not sign:
                raise OptionsError(f"{name} must be a non-empty string, got {sign!r}")


@dataclass(frozen=True)
class ConvertOptions:
    """Options for convert."""
    redundancy: bool = False
    defaults: Mapping[str, Any] = field(default_factory=dict)
    filters: Mapping[str, Optional[Filter]] = field(default_factory=dict)
    remap_enums: bool = False

    def __post_init__(self):
        defaults: Dict[str, Any] = dict(DEFAULT_VALUES)
        defaults.update(self.defaults or {})

        filters: Dict[str, Optional[Filter]] = dict(DEFAULT_FILTERS)
        for type_name, fn in (self.filters or {}).items():
            if fn is not None and not callable(fn):
                raise OptionsError(f"filter for type '{type_name}' is not callable: {fn!r}")
            filters[type_name] = fn

        object.__setattr__(self, "defaults", MappingProxyType(defaults))
        object.__setattr__(self, "filters", MappingProxyType(filters))


DEFAULT_SCHEMA_OPTIONS = SchemaOptions()
DEFAULT_CONVERT_OPTIONS = ConvertOptions()


OPTIONS_FILE_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "schema": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "title": {"type": "string"},
                "description": {"type": "string"},
                "required_sign": {"type": "string", "minLength": 1},
                "alias_sign": {"type": "string", "minLength": 1},
                "all_required": {"type": "boolean"},
            },
        },
        "convert": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "redundancy": {"type": "boolean"},
                "remap_enums": {"type": "boolean"},
                "defaults": {
                    "type": "object",
                    "additionalProperties": False,
                    "properties": {t: {} for t in SUPPORTED_TYPES},
                },
            },
        },
    },
}


def load_options(path: PathLike) -> Tuple[SchemaOptions, ConvertOptions]:
    """
    Read a JSON/YAML options file:

        schema:
          required_sign: "!"
        convert:
          redundancy: true
          defaults: {number: -1}

    Filters are code and cannot be configured from a file.
    """
    data = load_any(path) or {}
    try:
        validate(instance=data, schema=OPTIONS_FILE_SCHEMA)
    except ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise OptionsError(f"invalid options file {path}: {where}: {e.message}") from e

    return SchemaOptions(**data.get("schema", {})), ConvertOptions(**data.get("convert", {}))
