"""Dot-path and wildcard traversal over heterogeneous sources.

`data_get` walks a path one segment at a time. A non-wildcard segment is tried
against a fixed, ordered set of resolvers:

1. Keyed lookup: Mapping key presence (a digit segment also tries the int key),
   or an in-range non-negative index into a sequence
2. Member lookup, reading the public attribute once: a non-callable, non-None
   value is the hit; a method callable without arguments is invoked

The first resolver that hits replaces the current target. If none hits, the
whole path resolves to None; later segments are never retried.

A wildcard segment normalizes the current target into a plain container (see
`normalizer.to_plain_mapping`) and plucks the remaining path from every element,
collapsing one level when the remaining path holds another wildcard.

Design Invariants:
    - Sources are never mutated
    - "Exists" means presence, not truthiness (0, "" and False are hits)
    - Segments starting with an underscore are private and always miss
"""
from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, List, Optional, Sequence as SequenceT, Tuple, Union

from .accessor import ACCESSOR_WILDCARD, split_path
from .normalizer import accepts_no_arguments, to_plain_mapping

logger = logging.getLogger(__name__)

__all__ = [
    "MISSING",
    "data_get",
    "resolve_segment",
    "SEGMENT_RESOLVERS",
    "pluck",
    "collapse",
]


class _Missing:
    """Sentinel for a segment that did not resolve."""

    _instance: Optional["_Missing"] = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()

# Builtin containers and scalars expose methods (dict.items, str.upper) that
# must never be reachable through a path.
_NO_ATTRIBUTE_TYPES = (dict, list, tuple, set, frozenset, str, bytes, bytearray, int, float, bool)


def _digit_key(segment: str) -> Optional[int]:
    return int(segment) if segment.isdigit() else None


def _keyed(target: Any, segment: str) -> Any:
    if isinstance(target, Mapping):
        if segment in target:
            return target[segment]
        index = _digit_key(segment)
        if index is not None and index in target:
            return target[index]
        return MISSING
    if isinstance(target, Sequence) and not isinstance(target, (str, bytes, bytearray)):
        index = _digit_key(segment)
        if index is not None and index < len(target):
            return target[index]
        return MISSING
    # Objects implementing __getitem__ without the Mapping ABC
    if hasattr(target, "__getitem__") and hasattr(target, "__contains__"):
        try:
            if segment in target:
                return target[segment]
        except (TypeError, KeyError, IndexError):
            return MISSING
    return MISSING


def _public_attribute(target: Any, segment: str) -> Any:
    if segment.startswith("_") or isinstance(target, _NO_ATTRIBUTE_TYPES) or target is None:
        return MISSING
    try:
        return getattr(target, segment)
    except AttributeError:
        return MISSING


def _member(target: Any, segment: str) -> Any:
    # The attribute is read once; property getters never run twice.
    value = _public_attribute(target, segment)
    if value is MISSING or value is None:
        return MISSING
    if not callable(value):
        return value
    if inspect.isclass(value) or not accepts_no_arguments(value):
        return MISSING
    return value()


SEGMENT_RESOLVERS: Tuple[Callable[[Any, str], Any], ...] = (_keyed, _member)


def resolve_segment(target: Any, segment: str) -> Any:
    """Resolve one path segment against ``target``; MISSING when nothing hits."""
    for resolver in SEGMENT_RESOLVERS:
        value = resolver(target, segment)
        if value is not MISSING:
            return value
    return MISSING


def collapse(results: List[Any]) -> List[Any]:
    """Flatten one level: sequences are spliced in, other values are dropped."""
    flat: List[Any] = []
    for item in results:
        if isinstance(item, (list, tuple)):
            flat.extend(item)
    return flat


def pluck(container: Union[dict, list, tuple], segments: SequenceT[str]) -> List[Any]:
    """Resolve ``segments`` against every element of ``container`` (values for a dict)."""
    elements = container.values() if isinstance(container, dict) else container
    return [data_get(element, segments) for element in elements]


def data_get(target: Any, path: Union[str, SequenceT[str], None]) -> Any:
    """Retrieve a value from a nested mapping/object using dot notation.

    Args:
        target: Mapping, sequence, object or scalar to walk.
        path: Dot path (``"author.name"``, ``"items.*.title"``) or pre-split segments.

    Returns:
        The resolved value, or None when any segment misses.

    Examples:
        >>> data_get({"author": {"name": "Ada"}}, "author.name")
        'Ada'
        >>> data_get([{"name": "a"}, {"name": "b"}], "*.name")
        ['a', 'b']
        >>> data_get({"author": None}, "author.name") is None
        True
    """
    segments = split_path(path) if isinstance(path, str) or path is None else tuple(path)
    if not segments:
        return target

    for position, segment in enumerate(segments):
        if segment == ACCESSOR_WILDCARD:
            container = to_plain_mapping(target)
            if container is None:
                logger.debug("Wildcard over non-container %s", type(target).__name__)
                return None
            remaining = segments[position + 1 :]
            results = pluck(container, remaining)
            return collapse(results) if ACCESSOR_WILDCARD in remaining else results

        target = resolve_segment(target, segment)
        if target is MISSING:
            return None

    return target
