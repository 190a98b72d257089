import json
import math

import pytest

from jsonconvert.errors import CircularReferenceError
from jsonconvert.utils.io import dump_json, json_clone, load_any, read_json, write_any
from jsonconvert.utils.logger import get_logger


def test_json_clone_copies_deeply():
    data = {"a": [1, {"b": 2}], "c": "x", "d": None, "e": True}
    clone = json_clone(data)

    assert clone == data
    assert clone["a"] is not data["a"]
    assert clone["a"][1] is not data["a"][1]


def test_json_clone_drops_what_json_cannot_hold():
    data = {
        "fn": print,
        "s": {1, 2},
        "nan": math.nan,
        "inf": float("inf"),
        "list": [print, 1],
        "tuple": (1, 2),
        1: "int key",
    }

    assert json_clone(data) == {
        "nan": None,
        "inf": None,
        "list": [None, 1],
        "tuple": [1, 2],
        "1": "int key",
    }
    assert json_clone(print) is None


def test_json_clone_rejects_cycles():
    data = {"a": []}
    data["a"].append(data)

    with pytest.raises(CircularReferenceError):
        json_clone(data)


def test_write_and_load(tmp_path):
    data = {"b": 1, "a": [True, None]}

    write_any(tmp_path / "out.json", data)
    write_any(tmp_path / "out.yaml", data)

    assert read_json(tmp_path / "out.json") == data
    assert load_any(tmp_path / "out.yaml") == data
    with pytest.raises(ValueError):
        load_any(tmp_path / "out.txt")


def test_child_logger_name():
    assert get_logger("convert").name == "jsonconvert.convert"


def test_dump_json_is_strict():
    text = dump_json({"nan": math.nan, "inf": [float("-inf")], "n": 1.5, "fn": len})

    def reject(token):
        raise ValueError(token)

    data = json.loads(text, parse_constant=reject)
    assert data == {"nan": None, "inf": [None], "n": 1.5, "fn": repr(len)}


def test_write_json_is_strict(tmp_path):
    path = write_any(tmp_path / "out.json", {"n": math.nan})
    assert "NaN" not in path.read_text(encoding="utf-8")
    assert read_json(path) == {"n": None}
