"""Accessor path parsing.

An accessor is a string whose first character selects the resolution target:

    %path   resolve against the presenter instance itself
    $path   resolve against the transforming context (the source)

The remainder is a dot-delimited path whose segments may be the wildcard ``*``.
Parsing happens once here so callers work with a tagged :class:`Accessor`
instead of re-checking sentinel characters.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

__all__ = [
    "ACCESSOR_SEPARATOR",
    "ACCESSOR_WILDCARD",
    "PRESENTER_ACCESSOR",
    "CONTEXT_ACCESSOR",
    "AccessorKind",
    "Accessor",
    "parse_accessor",
    "split_path",
    "is_bare_path",
]

ACCESSOR_SEPARATOR = "."
ACCESSOR_WILDCARD = "*"
PRESENTER_ACCESSOR = "%"
CONTEXT_ACCESSOR = "$"

# word characters (incl. digits for sequence indexes) or a lone wildcard
_BARE_PATH_RE = re.compile(r"(?:\w+|\*)(?:\.(?:\w+|\*))*")


class AccessorKind(str, Enum):
    SELF = PRESENTER_ACCESSOR
    CONTEXT = CONTEXT_ACCESSOR


@dataclass(frozen=True)
class Accessor:
    kind: AccessorKind
    path: str

    @property
    def segments(self) -> Tuple[str, ...]:
        return split_path(self.path)

    def __str__(self) -> str:
        return f"{self.kind.value}{self.path}"


def split_path(path: Optional[str]) -> Tuple[str, ...]:
    """Split a dot path into segments; blank paths have no segments."""
    if path is None or not path.strip():
        return ()
    return tuple(path.split(ACCESSOR_SEPARATOR))


def parse_accessor(value: object) -> Optional[Accessor]:
    """Return the Accessor encoded by ``value`` or None when it carries no prefix.

    Examples:
        >>> parse_accessor("$author.name")
        Accessor(kind=<AccessorKind.CONTEXT: '$'>, path='author.name')
        >>> parse_accessor("%url").kind
        <AccessorKind.SELF: '%'>
        >>> parse_accessor("plain text") is None
        True
    """
    if not isinstance(value, str) or not value:
        return None
    head = value[0]
    if head == PRESENTER_ACCESSOR:
        return Accessor(AccessorKind.SELF, value[1:])
    if head == CONTEXT_ACCESSOR:
        return Accessor(AccessorKind.CONTEXT, value[1:])
    return None


def is_bare_path(value: object) -> bool:
    """True for unprefixed dot paths usable as shorthand (``display_date``, ``author.name``)."""
    return isinstance(value, str) and bool(_BARE_PATH_RE.fullmatch(value))
