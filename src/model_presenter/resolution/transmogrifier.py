"""Recursive transmogrification of specification trees into presentable data.

This is where a resolved specification meets the context. Both presenter
families share one recursion skeleton (`BaseTransmogrifier`) and differ only in
the per-node hooks:

`Transmogrifier` (structured, used by `Presenter` / `MutablePresenter`):
    * ``%path`` resolves against the presenter, ``$path`` against the context;
      the resolved value is transmogrified again (chained indirection)
    * unprefixed strings are literals
    * callables are invoked with the context and the result is treated as a leaf
    * None stays None
    * every emitted leaf and container must pass `is_presentable`

`PatternTransmogrifier` (used by `PatternPresenter` / `ModelPresenter`):
    * every string is a ``{{token}}`` pattern rendered against the context
    * callables are invoked with the context and their raw result returned
    * None renders as the empty string

Node policy order (both variants):
    1. string
    2. container (mapping, list, tuple, set, iterator): recurse, preserving order
    3. date/datetime: formatted with the configured pattern
    4. object overriding ``__str__``: converted to str
    5. callable: invoked with the context
    6. None
    7. bool / int / float: passed through
    8. anything else: UnpresentableValueError

Containers are walked in one of two modes. A *specification* node may carry
positional string entries that go through the Filter-Pair hook to obtain their
output key. A *resolved* node (data returned by a path) keeps its own keys and
is never reinterpreted as specification.

Recursion depth is counted per transformation. Passing ``max_depth`` raises
RecursionLimitError instead of overflowing the interpreter stack on
self-referencing aliases. A ``max_depth`` above what the interpreter stack can
hold still ends in RecursionLimitError.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Dict, Iterable, NamedTuple, Optional, Pattern, Tuple

from ..errors import RecursionLimitError, SpecificationError, UnpresentableValueError
from .accessor import CONTEXT_ACCESSOR, AccessorKind, is_bare_path, parse_accessor
from .aliases import AliasResolver
from .path_access import data_get
from .pattern import object_get, render_pattern
from .presentability import (
    convert_leaf,
    format_temporal,
    is_presentable,
    is_stringable,
    is_temporal,
)

logger = logging.getLogger(__name__)

__all__ = ["Pair", "BaseTransmogrifier", "Transmogrifier", "PatternTransmogrifier"]

_SEQUENCE_TYPES = (list, tuple, set, frozenset, range)


class Pair(NamedTuple):
    """Output of the Filter-Pair hook.

    ``is_spec`` is False when ``value`` is already data looked up from the
    context and must not be reinterpreted as specification.
    """

    key: Any
    value: Any
    is_spec: bool = True


def _is_container(node: Any) -> bool:
    return isinstance(node, Mapping) or isinstance(node, _SEQUENCE_TYPES) or isinstance(node, Iterator)


def _entries(node: Any) -> Iterable[Tuple[Any, Any]]:
    if isinstance(node, Mapping):
        return node.items()
    return enumerate(node)


class BaseTransmogrifier:
    """Shared recursion skeleton; subclasses supply the per-node hooks."""

    def __init__(
        self,
        *,
        max_depth: int,
        datetime_format: str,
        alias_resolver: Optional[AliasResolver] = None,
    ) -> None:
        self.max_depth = max_depth
        self.datetime_format = datetime_format
        self.alias_resolver = alias_resolver

    def transmogrify(self, node: Any, context: Any) -> Any:
        """Resolve a specification tree against ``context``.

        Raises:
            RecursionLimitError: Nesting deeper than ``max_depth``, or deeper
                than the interpreter stack allows when ``max_depth`` is larger.
        """
        try:
            return self._transmogrify(node, context, 0, True)
        except RecursionLimitError:
            raise
        except RecursionError as e:
            logger.debug("Interpreter stack exhausted before max_depth=%d", self.max_depth)
            raise RecursionLimitError(self.max_depth) from e

    # ------------------------------------------------------------------ skeleton
    def _transmogrify(self, node: Any, context: Any, depth: int, is_spec: bool) -> Any:
        if depth > self.max_depth:
            raise RecursionLimitError(self.max_depth, node)

        if isinstance(node, str):
            return self._string(node, context, depth)

        if _is_container(node):
            return self._container(node, context, depth, is_spec)

        return self._leaf(node, context, depth)

    def _container(self, node: Any, context: Any, depth: int, is_spec: bool) -> Any:
        results: Dict[Any, Any] = {}
        for key, value in _entries(node):
            value_is_spec = is_spec
            if is_spec and not isinstance(key, str) and isinstance(value, str):
                key, value, value_is_spec = self.filter_pair(key, value, context)
            results[key] = self._transmogrify(value, context, depth + 1, value_is_spec)

        output: Any = results if isinstance(node, Mapping) else list(results.values())
        # Promoted keys turn a positional sequence into a keyed mapping.
        if not isinstance(node, Mapping) and any(isinstance(k, str) for k in results):
            output = results
        return self._finish_container(output, node)

    def _alias(self, context: Any, name: str) -> Optional[Any]:
        if self.alias_resolver is None:
            return None
        return self.alias_resolver(context, name)

    # --------------------------------------------------------------------- hooks
    def filter_pair(self, key: Any, value: str, context: Any) -> Pair:
        """Turn a positional string entry into an explicit (key, value) pair."""
        raise NotImplementedError

    def _string(self, node: str, context: Any, depth: int) -> Any:
        raise NotImplementedError

    def _leaf(self, node: Any, context: Any, depth: int) -> Any:
        raise NotImplementedError

    def _finish_container(self, output: Any, node: Any) -> Any:
        return output


class Transmogrifier(BaseTransmogrifier):
    """Structured variant resolving ``%`` (presenter) and ``$`` (context) accessors."""

    def __init__(self, owner: Any, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.owner = owner

    def filter_pair(self, key: Any, value: str, context: Any) -> Pair:
        """Derive the output key for a positional entry.

        Precedence: alias declared by the context, accessor prefix (key is the
        path without its prefix), bare-path shorthand (``"display_date"`` reads
        as ``"$display_date"``). Anything else is ambiguous.
        """
        alias = self._alias(context, value)
        if alias is not None:
            return Pair(value, alias)

        accessor = parse_accessor(value)
        if accessor is not None:
            return Pair(accessor.path, value)

        if is_bare_path(value):
            return Pair(value, CONTEXT_ACCESSOR + value)

        raise SpecificationError(value)

    def _string(self, node: str, context: Any, depth: int) -> Any:
        accessor = parse_accessor(node)
        if accessor is None:
            return node
        target = self.owner if accessor.kind is AccessorKind.SELF else context
        value = data_get(target, accessor.segments)
        if value is None:
            logger.debug("Accessor %s resolved to nothing", accessor)
        return self._transmogrify(value, context, depth + 1, False)

    def _leaf(self, node: Any, context: Any, depth: int) -> Any:
        if is_temporal(node) or is_stringable(node):
            value = convert_leaf(node, self.datetime_format)
        elif callable(node):
            value = convert_leaf(node(context), self.datetime_format)
        else:
            value = node

        if not is_presentable(value):
            raise UnpresentableValueError(value)
        return value

    def _finish_container(self, output: Any, node: Any) -> Any:
        if not is_presentable(output):
            raise UnpresentableValueError(node)
        return output


class PatternTransmogrifier(BaseTransmogrifier):
    """Token-substitution variant: plain strings are ``{{name}}`` patterns."""

    def __init__(self, getter_pattern: Pattern[str], **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.getter_pattern = getter_pattern

    def filter_pair(self, key: Any, value: str, context: Any) -> Pair:
        """Positional entries are attribute names: key by name, value by lookup."""
        alias = self._alias(context, value)
        if alias is not None:
            return Pair(value, alias)
        return Pair(value, object_get(context, value), is_spec=False)

    def _lookup(self, context: Any, attr: str, depth: int) -> Any:
        alias = self._alias(context, attr)
        if alias is not None:
            return self._transmogrify(alias, context, depth + 1, True)
        return object_get(context, attr)

    def _string(self, node: str, context: Any, depth: int) -> Any:
        return render_pattern(
            node,
            context,
            self.getter_pattern,
            lookup=lambda ctx, attr: self._lookup(ctx, attr, depth),
            datetime_format=self.datetime_format,
        )

    def _leaf(self, node: Any, context: Any, depth: int) -> Any:
        if is_temporal(node):
            return format_temporal(node, self.datetime_format)
        if is_stringable(node):
            return self._string(str(node), context, depth)
        if callable(node):
            return node(context)
        if node is None:
            return ""
        if isinstance(node, (bool, int, float)):
            return node
        raise UnpresentableValueError(node)
