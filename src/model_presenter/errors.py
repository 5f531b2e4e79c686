"""Error taxonomy for presenter transformations.

Every error raised by the engine derives from :class:`PresenterError` and also
from the closest builtin exception, so callers may catch either the library
base class or the familiar builtin (``TypeError``, ``ValueError``,
``RecursionError``).

Path misses are never errors: a missing key, unset attribute, or absent method
resolves to ``None`` and flows through as an ordinary value. Exceptions raised
from inside user-supplied callables propagate unchanged.
"""
from __future__ import annotations

from typing import Any

__all__ = [
    "PresenterError",
    "ConfigurationError",
    "SpecificationError",
    "UnpresentableValueError",
    "RecursionLimitError",
    "type_name",
]


def type_name(value: Any) -> str:
    """Return a readable type label for error messages (class name for objects)."""
    if value is None:
        return "NoneType"
    return type(value).__name__


class PresenterError(Exception):
    """Base class for all errors raised while binding or transforming."""


class ConfigurationError(PresenterError, TypeError):
    """The transformer is not a callable, mapping, sequence, or path string."""

    def __init__(self, transformer: Any):
        self.transformer = transformer
        super().__init__(
            "Transformer must be a callable, a mapping, a sequence, or a path string; "
            f'"{type_name(transformer)}" given.'
        )


class SpecificationError(PresenterError, ValueError):
    """A specification entry is ambiguous (no explicit key, no accessor prefix)."""

    def __init__(self, value: Any, message: str | None = None):
        self.value = value
        super().__init__(
            message
            or (
                "A transmogrifiable value must start with a percent sign (%) or a "
                "dollar sign ($). If the value is meant to be a literal string, a "
                f"string key is required; got {value!r}."
            )
        )


class UnpresentableValueError(PresenterError, TypeError):
    """A resolved value is not a scalar or a non-empty container of such values."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            "The context must transmogrify to a scalar or a non-empty list/mapping "
            f'of likewise values; received "{type_name(value)}".'
        )


class RecursionLimitError(PresenterError, RecursionError):
    """The transformation nested deeper than the configured maximum depth."""

    def __init__(self, max_depth: int, node: Any = None):
        self.max_depth = max_depth
        self.node = node
        super().__init__(
            f"Transformation exceeded the maximum depth of {max_depth}; "
            f"check for self-referencing aliases or accessors (last node: {node!r})."
        )
