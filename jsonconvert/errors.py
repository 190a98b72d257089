# jsonconvert/errors.py
"""Exceptions raised by jsonconvert.

Conversion itself never rejects wrong-shaped data; these cover the few
cases that cannot be coerced: cyclic templates/schemas/documents and
invalid options.
"""
from __future__ import annotations


class JsonConvertError(Exception):
    """Base class for all jsonconvert errors."""


class CircularReferenceError(JsonConvertError, RecursionError):
    """A container was reached again while it was still being traversed."""

    def __init__(self, where: str, path: str = "$"):
        self.where = where
        self.path = path
        super().__init__(f"circular reference in {where} at {path}")


class OptionsError(JsonConvertError, ValueError):
    """Invalid option value or options file."""
