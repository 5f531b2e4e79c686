"""Foreign container normalization for wildcard traversal.

Wildcard segments need something they can iterate uniformly. This module turns
third-party collections, configuration wrappers, pydantic models, and generic
iterables into a plain ``dict`` or ``list``.

Strategy order (first match wins):
    1. dict / list / tuple returned unchanged
    2. scalars (str, bytes, numbers, bool, None) are not containers -> None
    3. other Mapping implementations -> dict(value)
    4. pydantic models -> model_dump()
    5. collection wrapper ``all()`` returning a non-string iterable -> list
    6. ``to_dict()`` / ``as_dict()``
    7. ``to_json()`` returning JSON text -> json.loads
    8. JSON-serializable hooks ``__json__()`` / ``for_json()``
    9. any other iterable -> list (iteration order preserved)
   10. structural fallback: dataclass fields or public ``vars()``

The structural fallback is best effort. Properties, slots and computed values
are not captured, so information may be lost; it is a last resort, not a
guarantee. Objects with no enumerable structure yield None.
"""
from __future__ import annotations

import dataclasses
import inspect
import json
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import BaseModel

logger = logging.getLogger(__name__)

__all__ = ["to_plain_mapping", "accepts_no_arguments", "PlainContainer"]

PlainContainer = Union[Dict[Any, Any], List[Any], tuple]

_SCALARS = (str, bytes, bytearray, int, float, complex, bool)


def accepts_no_arguments(func: Callable[..., Any]) -> bool:
    """True when ``func`` can be called without arguments."""
    try:
        inspect.signature(func).bind()
    except TypeError:
        return False
    except ValueError:
        # No introspectable signature (some builtins); assume callable as-is.
        return True
    return True


def _call_capability(value: Any, name: str) -> Any:
    """Invoke a zero-argument method if ``value`` exposes one, else return None.

    Errors raised by the method itself propagate.
    """
    method = getattr(value, name, None)
    if method is None or not callable(method) or not accepts_no_arguments(method):
        return None
    return method()


def _is_iterable_result(result: Any) -> bool:
    return isinstance(result, Iterable) and not isinstance(result, _SCALARS)


def _structural(value: Any) -> Optional[Dict[str, Any]]:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    try:
        attrs = vars(value)
    except TypeError:
        return None
    return {k: v for k, v in attrs.items() if not k.startswith("_")}


def to_plain_mapping(value: Any) -> Optional[PlainContainer]:
    """Convert ``value`` into a plain dict/list suitable for wildcard plucking.

    Args:
        value: Any container-like object.

    Returns:
        A dict, list or tuple; None when ``value`` cannot be treated as a container.
    """
    if isinstance(value, (dict, list, tuple)):
        return value
    if value is None or isinstance(value, _SCALARS) or isinstance(value, type):
        return None

    if isinstance(value, Mapping):
        logger.debug("Normalizing %s via Mapping protocol", type(value).__name__)
        return dict(value)

    if isinstance(value, BaseModel):
        logger.debug("Normalizing %s via model_dump()", type(value).__name__)
        return value.model_dump()

    result = _call_capability(value, "all")
    if _is_iterable_result(result):
        logger.debug("Normalizing %s via all()", type(value).__name__)
        return result if isinstance(result, (dict, list)) else list(result)

    for name in ("to_dict", "as_dict"):
        result = _call_capability(value, name)
        if isinstance(result, (dict, list)):
            logger.debug("Normalizing %s via %s()", type(value).__name__, name)
            return result

    result = _call_capability(value, "to_json")
    if isinstance(result, (str, bytes, bytearray)):
        try:
            decoded = json.loads(result)
        except ValueError:
            logger.debug("to_json() of %s did not return valid JSON", type(value).__name__)
        else:
            if isinstance(decoded, (dict, list)):
                logger.debug("Normalizing %s via to_json()", type(value).__name__)
                return decoded

    for name in ("__json__", "for_json"):
        result = _call_capability(value, name)
        if isinstance(result, (dict, list)):
            logger.debug("Normalizing %s via %s()", type(value).__name__, name)
            return result

    if isinstance(value, Iterable):
        logger.debug("Normalizing %s via iteration", type(value).__name__)
        return list(value)

    structural = _structural(value)
    if structural is not None:
        logger.debug("Normalizing %s via structural fallback (lossy)", type(value).__name__)
    return structural
