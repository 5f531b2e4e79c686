"""Token substitution for pattern presenters.

Pattern presenters treat every plain string as a template holding zero or more
``{{name}}`` tokens. Each token is a single accessor (no dots, no wildcards)
resolved against the context: key, then attribute, then zero-argument method.
A token that does not resolve renders as its own name, so missing data stays
visible in the output instead of silently disappearing.

Token values render as text: None as ``""``, booleans as ``true``/``false``
(as in JSON), dates with the configured format, anything else with ``str()``.
"""
from __future__ import annotations

import re
from typing import Any, Callable, Pattern, Union

from .path_access import MISSING, resolve_segment
from .presentability import format_temporal, is_temporal

__all__ = ["MACRO_PATTERN", "compile_pattern", "object_get", "render_pattern"]

MACRO_PATTERN = r"{{\s*(\w*?)\s*}}"


def compile_pattern(pattern: Union[str, Pattern[str]]) -> Pattern[str]:
    """Compile a getter pattern; it must contain exactly one capture group."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
    if compiled.groups != 1:
        raise ValueError(
            f"Getter pattern must have a single capture group; {compiled.pattern!r} has {compiled.groups}"
        )
    return compiled


def object_get(context: Any, attr: str) -> Any:
    """Return ``context``'s value for ``attr``, or ``attr`` itself when unresolved.

    A value of None counts as unresolved.
    """
    value = resolve_segment(context, attr)
    if value is MISSING or value is None:
        return attr
    return value


def _stringify(value: Any, datetime_format: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_temporal(value):
        return format_temporal(value, datetime_format)
    return str(value)


def render_pattern(
    pattern: str,
    context: Any,
    getter_pattern: Pattern[str],
    lookup: Callable[[Any, str], Any] = object_get,
    datetime_format: str = "%Y-%m-%d %H:%M:%S",
) -> str:
    """Replace every token in ``pattern`` with its value looked up on ``context``.

    Examples:
        >>> render_pattern("Hello, {{name}}!", {"name": "World"}, compile_pattern(MACRO_PATTERN))
        'Hello, World!'
        >>> render_pattern("{{missing}}", {}, compile_pattern(MACRO_PATTERN))
        'missing'
    """
    return getter_pattern.sub(
        lambda match: _stringify(lookup(context, match.group(1)), datetime_format),
        pattern,
    )
