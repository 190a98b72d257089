# jsonconvert/context.py
from typing import Any, Callable

from jsonconvert.schema.attributes import get_attribute, set_attribute
from jsonconvert.schema.builder import build_schema

VERSION = "1.1.0"


class ExecutionContext:
    """
    Handed to every filter call as its `context` argument, so a filter can
    build schemas or run nested conversions:

        def tags(value, data, node, ctx):
            return ctx.convert(value, ctx.schema(["x"]))

    One instance is created per top-level convert() call; it holds no
    conversion state.
    """
    version = VERSION
    get_attribute = staticmethod(get_attribute)
    set_attribute = staticmethod(set_attribute)

    def __init__(self, convert: Callable[..., Any]):
        self.schema = build_schema
        self.convert = convert
