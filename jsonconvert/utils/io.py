# jsonconvert/utils/io.py
from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Set, Union

import yaml

from jsonconvert.errors import CircularReferenceError

# -------- Path helpers --------
PathLike = Union[str, Path]


def to_path(p: PathLike) -> Path:
    """Convert string-like to pathlib.Path."""
    return p if isinstance(p, Path) else Path(p)


def ensure_parent(path: PathLike) -> Path:
    """Ensure parent directory exists for a file path."""
    p = to_path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


# -------- JSON / YAML --------
def read_json(path: PathLike) -> Any:
    """Load JSON file with UTF-8."""
    with to_path(path).open("r", encoding="utf-8") as f:
        return json.load(f)


def _finite(value: Any, on_path: Set[int], path: str) -> Any:
    """Copy of `value` with NaN / infinity replaced by None."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, (dict, list, tuple)):
        return value

    marker = id(value)
    if marker in on_path:
        raise CircularReferenceError("document", path)
    on_path.add(marker)
    try:
        if isinstance(value, dict):
            return {k: _finite(v, on_path, f"{path}.{k}") for k, v in value.items()}
        return [_finite(v, on_path, f"{path}[{i}]") for i, v in enumerate(value)]
    finally:
        on_path.discard(marker)


def dump_json(data: Any, indent: int | None = 2) -> str:
    """
    Serialize to strict JSON text: NaN / infinity are written as null,
    callables and other non-JSON values are rendered with repr().
    """
    return json.dumps(_finite(data, set(), "$"), ensure_ascii=False, indent=indent, default=repr, allow_nan=False)


def write_json(path: PathLike, data: Any, indent: int = 2) -> Path:
    """Write JSON atomically, pretty-formatted."""
    p = ensure_parent(path)
    tmp = p.with_suffix(p.suffix + ".tmp")
    tmp.write_text(dump_json(data, indent=indent) + "\n", encoding="utf-8")
    tmp.replace(p)
    return p


def read_yaml(path: PathLike) -> Any:
    """Load YAML with the safe loader."""
    with to_path(path).open("r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def write_yaml(path: PathLike, data: Any) -> Path:
    """Write YAML atomically, keeping key order."""
    p = ensure_parent(path)
    tmp = p.with_suffix(p.suffix + ".tmp")
    with tmp.open("w", encoding="utf-8") as f:
        yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True)
    tmp.replace(p)
    return p


# -------- Generic loader / writer --------
def load_any(path: PathLike) -> Any:
    """
    Load data by extension (templates, documents, option files):
      - .json -> JSON
      - .yaml/.yml -> YAML
    """
    p = to_path(path)
    suf = p.suffix.lower()
    if suf == ".json":
        return read_json(p)
    if suf in (".yaml", ".yml"):
        return read_yaml(p)
    raise ValueError(f"Unsupported extension: {suf} for {p}")


def write_any(path: PathLike, data: Any) -> Path:
    """Write data as YAML for .yaml/.yml paths, JSON otherwise."""
    p = to_path(path)
    if p.suffix.lower() in (".yaml", ".yml"):
        return write_yaml(p, data)
    return write_json(p, data)


# -------- JSON clone --------
_DROP = object()


def _key(k: Any) -> str:
    if isinstance(k, str):
        return k
    if k is None or isinstance(k, (bool, int, float)):
        return json.dumps(k)
    return str(k)


def _jsonable(value: Any, on_path: Set[int], path: str) -> Any:
    if value is None or isinstance(value, (bool, str, int)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, (dict, list, tuple)):
        return _DROP

    marker = id(value)
    if marker in on_path:
        raise CircularReferenceError("document", path)
    on_path.add(marker)
    try:
        if isinstance(value, dict):
            out: Any = {}
            for k, v in value.items():
                item = _jsonable(v, on_path, f"{path}.{k}")
                if item is not _DROP:
                    out[_key(k)] = item
        else:
            out = []
            for i, v in enumerate(value):
                item = _jsonable(v, on_path, f"{path}[{i}]")
                out.append(None if item is _DROP else item)
    finally:
        on_path.discard(marker)
    return out


def json_clone(data: Any) -> Any:
    """
    Deep copy with JSON round-trip semantics:
      - values JSON cannot represent (callables, sets, objects) are dropped
        from dicts and become None inside lists
      - NaN / infinity become None
      - keys become strings
    Returns None when `data` itself is not representable.
    """
    pruned = _jsonable(data, set(), "$")
    if pruned is _DROP:
        return None
    return json.loads(json.dumps(pruned))
