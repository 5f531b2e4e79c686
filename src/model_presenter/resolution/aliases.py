"""Optional alias lookup capability.

An alias resolver is a collaborator passed to a presenter at construction. It
is asked, for an attribute name, whether the source defines a substitute
specification fragment. The transmogrifier consults it in the Filter-Pair step
(and, for pattern presenters, on every token lookup) before applying its
default policy.

`metadata_alias_resolver` is the stock implementation: it reads
``context.metadata()["presenters"]["aliases"]`` from any `PresentableModel`.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

from pydantic import BaseModel, ValidationError

from ..models.metadata import PresentableMetadata

logger = logging.getLogger(__name__)

__all__ = [
    "AliasResolver",
    "PresentableModel",
    "metadata_aliases",
    "metadata_alias_resolver",
]

AliasResolver = Callable[[Any, str], Optional[Any]]


@runtime_checkable
class PresentableModel(Protocol):
    """A describable model that can provide presenter aliases."""

    def metadata(self) -> Any:  # pragma: no cover - protocol
        ...


def metadata_aliases(context: Any) -> Mapping[str, Any]:
    """Return the alias table declared by ``context``; empty when none.

    Malformed metadata is logged and treated as declaring no aliases so a bad
    description never breaks an otherwise valid transformation.
    """
    if not isinstance(context, PresentableModel) or not callable(context.metadata):
        return {}
    raw = context.metadata()
    if isinstance(raw, BaseModel):
        raw = raw.model_dump()
    if raw is None:
        return {}
    try:
        parsed = PresentableMetadata.model_validate(raw)
    except ValidationError as e:
        logger.warning(
            "Ignoring malformed presenter metadata on %s: %s", type(context).__name__, e
        )
        return {}
    return parsed.presenters.aliases


def metadata_alias_resolver(context: Any, name: str) -> Optional[Any]:
    """AliasResolver reading aliases from the context's ``metadata()``."""
    aliases = metadata_aliases(context)
    if name in aliases:
        logger.debug("Alias hit for %r on %s", name, type(context).__name__)
        return aliases[name]
    return None
