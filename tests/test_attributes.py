from jsonconvert.schema.attributes import (
    SchemaNode,
    get_attribute,
    has_attribute,
    namespace,
    set_attribute,
)
from jsonconvert.schema.types import classify, is_array_schema, is_object_schema, is_schema_node


def test_set_attribute_prefixes_extensions_only():
    node = {}
    assert set_attribute(node, "alias", "uid") is node
    set_attribute(node, "default", 3)
    set_attribute(node, "type", "number")

    assert node == {"@alias": "uid", "default": 3, "type": "number"}


def test_set_attribute_accepts_prefixed_names():
    node = set_attribute({}, "@alias", "uid")
    assert node == {"@alias": "uid"}


def test_get_attribute():
    def fn(value, *_):
        return value

    node = {"@filter": fn, "@name": "a", "type": "string"}

    assert get_attribute(node, "filter") is fn
    assert get_attribute(node, "@name") == "a"
    assert get_attribute(node, "type") == "string"
    assert get_attribute(node, "alias") is None
    assert get_attribute(node, "alias", "fallback") == "fallback"
    assert get_attribute(None, "alias") is None
    assert has_attribute(node, "name") and not has_attribute(node, "alias")


def test_namespace_is_idempotent():
    raw = {"type": "string", "name": "a", "@alias": "b", "minLength": 1}
    once = namespace(raw)

    assert once == {"type": "string", "@name": "a", "@alias": "b", "minLength": 1}
    assert namespace(once) == once
    # input untouched
    assert "name" in raw


def test_schema_node_keeps_groups_apart():
    node = SchemaNode()
    node.set("name", "a")
    node.set("@name", "b")
    node.set("required", ["a"])

    assert node.extensions == {"name": "b"}
    assert node.standard == {"required": ["a"]}
    assert node.get("@name") == "b"

    node.discard("name")
    assert node.to_dict() == {"required": ["a"]}
    assert SchemaNode.from_dict({"@x": 1, "type": "null"}).extensions == {"x": 1}


def test_classify():
    class Custom:
        pass

    assert classify(None) == "null"
    assert classify(True) == "boolean"
    assert classify(0) == "number"
    assert classify(1.5) == "number"
    assert classify("a") == "string"
    assert classify({}) == "object"
    assert classify([]) == "array"
    assert classify((1, 2)) == "array"
    assert classify(Custom()) == "string"


def test_is_schema_node():
    assert is_schema_node({"type": "object"})
    assert is_schema_node({"type": "null", "@name": "x"})
    assert not is_schema_node({"type": "integer"})
    assert not is_schema_node({"type": ["string", "null"]})
    assert not is_schema_node({"name": "x"})
    assert not is_schema_node([{"type": "string"}])
    assert not is_schema_node("string")


def test_container_schema_predicates():
    assert is_object_schema({"type": "object", "properties": {}})
    assert not is_object_schema({"type": "object"})
    assert is_array_schema({"type": "array", "items": {}})
    assert not is_array_schema({"type": "array"})
