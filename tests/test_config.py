import dataclasses

import pytest

from jsonconvert.config import (
    DEFAULT_CONVERT_OPTIONS,
    ConvertOptions,
    SchemaOptions,
    load_options,
)
from jsonconvert.convert.filters import to_string
from jsonconvert.errors import OptionsError


def test_schema_option_defaults():
    opts = SchemaOptions()
    assert (opts.required_sign, opts.alias_sign, opts.all_required) == ("*", "@", False)
    assert (opts.title, opts.description) == ("", "")


@pytest.mark.parametrize("field", ["required_sign", "alias_sign"])
def test_empty_sign_is_rejected(field):
    with pytest.raises(OptionsError):
        SchemaOptions(**{field: ""})
    with pytest.raises(ValueError):
        SchemaOptions(**{field: None})


def test_convert_options_merge_over_builtins():
    opts = ConvertOptions(defaults={"number": 1}, filters={"string": None})

    assert opts.defaults["number"] == 1
    assert opts.defaults["string"] == ""
    assert opts.filters["string"] is None
    assert callable(opts.filters["number"])
    assert DEFAULT_CONVERT_OPTIONS.filters["string"] is to_string


def test_options_are_immutable():
    opts = ConvertOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        opts.redundancy = True
    with pytest.raises(TypeError):
        opts.defaults["number"] = 5


def test_replace_keeps_merged_registries():
    opts = dataclasses.replace(ConvertOptions(defaults={"string": "?"}), redundancy=True)
    assert opts.redundancy is True
    assert opts.defaults["string"] == "?"


def test_non_callable_filter_is_rejected():
    with pytest.raises(OptionsError):
        ConvertOptions(filters={"string": "upper"})


def test_load_yaml_options(tmp_path):
    path = tmp_path / "opts.yaml"
    path.write_text(
        "schema:\n"
        "  title: Orders\n"
        "  required_sign: '!'\n"
        "convert:\n"
        "  redundancy: true\n"
        "  defaults:\n"
        "    number: -1\n",
        encoding="utf-8",
    )

    schema_opts, convert_opts = load_options(path)

    assert schema_opts.title == "Orders"
    assert schema_opts.required_sign == "!"
    assert schema_opts.alias_sign == "@"
    assert convert_opts.redundancy is True
    assert convert_opts.defaults["number"] == -1


def test_load_empty_options_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    schema_opts, convert_opts = load_options(path)
    assert schema_opts == SchemaOptions()
    assert convert_opts.redundancy is False


@pytest.mark.parametrize("content, where", [
    ('{"convert": {"redundancy": "yes"}}', "convert/redundancy"),
    ('{"schema": {"alias_sign": ""}}', "schema/alias_sign"),
    ('{"convert": {"defaults": {"integer": 0}}}', "convert/defaults"),
    ('{"unknown": 1}', "<root>"),
])
def test_invalid_options_file(tmp_path, content, where):
    path = tmp_path / "opts.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(OptionsError) as exc:
        load_options(path)
    assert where in str(exc.value)
