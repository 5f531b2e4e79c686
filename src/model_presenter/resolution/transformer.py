"""Transformer binding and specification resolution.

A transformer is bound once and turned into a function of the context:

* a callable (function, method, invokable object) is kept as-is and receives
  the context on every transformation;
* a literal (path string, mapping, sequence, set or other iterable) becomes a
  constant function returning that literal. One-shot iterators are
  materialized at bind time so the literal survives repeated transformations.

Anything else is rejected with ConfigurationError at bind time. The shape of
what a callable returns is deliberately not checked here; the transmogrifier
validates it while walking (fail-fast, not fail-early).
"""
from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Callable

from ..errors import ConfigurationError

__all__ = ["BoundTransformer", "bind_transformer", "is_literal_transformer", "resolve_specification"]

BoundTransformer = Callable[[Any], Any]


def is_literal_transformer(transformer: Any) -> bool:
    """True for literal specification shapes (str, mapping, non-bytes iterable)."""
    if isinstance(transformer, (bytes, bytearray)):
        return False
    return isinstance(transformer, (str, Mapping)) or isinstance(transformer, Iterable)


def bind_transformer(transformer: Any) -> BoundTransformer:
    """Validate ``transformer`` and return it as a function of the context.

    Raises:
        ConfigurationError: If the transformer is neither callable nor a literal shape.
    """
    if not isinstance(transformer, str) and callable(transformer):
        return transformer
    if is_literal_transformer(transformer):
        literal = list(transformer) if isinstance(transformer, Iterator) else transformer

        def constant(context: Any) -> Any:
            return literal

        return constant
    raise ConfigurationError(transformer)


def resolve_specification(bound: BoundTransformer, context: Any) -> Any:
    """Produce the specification tree to walk for ``context`` (returned verbatim)."""
    return bound(context)
