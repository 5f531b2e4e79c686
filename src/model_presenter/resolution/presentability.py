"""Leaf classification, conversion and presentability checks.

A *presentable* value is the only legal output shape of a transformation:

    None, bool, int, float, str
    list / tuple / dict that is non-empty and whose members are all presentable

`value_kind` tags a value so the rules above are checked structurally rather
than through scattered isinstance probes. `convert_leaf` applies the rich-value
conversions (temporal formatting, string conversion) that run before the
presentability check.
"""
from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any

__all__ = [
    "ValueKind",
    "value_kind",
    "is_presentable",
    "is_stringable",
    "is_temporal",
    "format_temporal",
    "convert_leaf",
]


class ValueKind(str, Enum):
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


def value_kind(value: Any) -> ValueKind:
    """Classify ``value`` into the tagged union of output shapes.

    bool is tested before number because ``bool`` subclasses ``int``.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, dict):
        return ValueKind.MAPPING
    return ValueKind.OTHER


def is_presentable(value: Any) -> bool:
    """Return True when ``value`` may be emitted as-is."""
    kind = value_kind(value)
    if kind is ValueKind.SEQUENCE:
        return len(value) > 0 and all(is_presentable(v) for v in value)
    if kind is ValueKind.MAPPING:
        return len(value) > 0 and all(is_presentable(v) for v in value.values())
    return kind is not ValueKind.OTHER


def is_temporal(value: Any) -> bool:
    return isinstance(value, (datetime, date))


def format_temporal(value: date, fmt: str) -> str:
    return value.strftime(fmt)


def is_stringable(value: Any) -> bool:
    """True when the value's type defines its own ``__str__`` (not object's default).

    Bytes are excluded: their ``__str__`` is a repr, not a rendering.
    """
    if value is None or isinstance(
        value, (str, bytes, bytearray, bool, int, float, list, tuple, dict, type)
    ):
        return False
    return type(value).__str__ is not object.__str__


def convert_leaf(value: Any, datetime_format: str) -> Any:
    """Apply temporal formatting or string conversion to a rich leaf value."""
    if is_temporal(value):
        return format_temporal(value, datetime_format)
    if is_stringable(value):
        return str(value)
    return value
