"""Public facade for model-to-view transformations.

A presenter turns any data model (mapping, object, scalar) into plain view data
according to a *transformer*. All resolution logic lives in the
`model_presenter.resolution` package; this module binds transformers, wires the
configured defaults, and exposes the stable API.

Public Classes:
    AbstractPresenter: Base class; subclasses implement `transformer(context)`
    Presenter: Structured presenter with a transformer bound at construction
    MutablePresenter: Structured presenter whose transformer can be re-bound
    PatternPresenter: Token-substitution presenter (``"Hello, {{name}}!"``)
    ModelPresenter: PatternPresenter honouring model metadata aliases

Structured transformer syntax:
    * ``"$path"`` resolves against the context, ``"%path"`` against the presenter
    * paths use dot notation and may contain ``*`` wildcards (``"$tags.*.name"``)
    * positional entries derive their key from the path:
      ``["id", "$author.name"]`` -> ``{"id": ..., "author.name": ...}``
    * unprefixed strings under explicit keys are literals
    * callables receive the context

Example:
    >>> from datetime import datetime
    >>> p = MutablePresenter({"id": "$id", "name": "$name", "entry_date": "$display_date"})
    >>> p({"id": 1, "name": "World", "display_date": datetime(1970, 1, 1)})
    {'id': 1, 'name': 'World', 'entry_date': '1970-01-01 00:00:00'}
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, Pattern, Union

from .config import get_settings
from .errors import ConfigurationError
from .resolution.accessor import (
    ACCESSOR_SEPARATOR,
    ACCESSOR_WILDCARD,
    CONTEXT_ACCESSOR,
    PRESENTER_ACCESSOR,
)
from .resolution.aliases import AliasResolver, metadata_alias_resolver
from .resolution.pattern import MACRO_PATTERN, compile_pattern
from .resolution.transformer import BoundTransformer, bind_transformer, resolve_specification
from .resolution.transmogrifier import (
    BaseTransmogrifier,
    PatternTransmogrifier,
    Transmogrifier,
)

logger = logging.getLogger(__name__)

__all__ = [
    "AbstractPresenter",
    "Presenter",
    "MutablePresenter",
    "PatternPresenter",
    "ModelPresenter",
]


class AbstractPresenter(ABC):
    """Coordinates between the view and the model.

    Subclasses provide the presentation layer through `transformer(context)`.
    Public methods and attributes of a subclass are reachable from the
    transformer with the ``%`` accessor; names starting with an underscore
    are not.
    """

    ACCESSOR_SEPARATOR = ACCESSOR_SEPARATOR
    ACCESSOR_WILDCARD = ACCESSOR_WILDCARD
    PRESENTER_ACCESSOR = PRESENTER_ACCESSOR
    CONTEXT_ACCESSOR = CONTEXT_ACCESSOR

    def __init__(
        self,
        *,
        alias_resolver: Optional[AliasResolver] = None,
        max_depth: Optional[int] = None,
        datetime_format: Optional[str] = None,
    ) -> None:
        settings = get_settings()
        self._transmogrifier = self._build_transmogrifier(
            alias_resolver=alias_resolver,
            max_depth=max_depth if max_depth is not None else settings.PRESENTER_MAX_DEPTH,
            datetime_format=datetime_format or settings.PRESENTER_DATETIME_FORMAT,
        )

    def _build_transmogrifier(self, **options: Any) -> BaseTransmogrifier:
        return Transmogrifier(self, **options)

    def __call__(self, context: Any) -> Any:
        """Presenters can be called directly; see `transform`."""
        return self.transform(context)

    def transform(self, context: Any) -> Any:
        """Transmogrify the presentation layer against ``context``.

        The specification is resolved once, up front; re-binding a mutable
        transformer while this call runs does not affect its result.

        Raises:
            SpecificationError: An ambiguous positional entry.
            UnpresentableValueError: A value that cannot be emitted.
            RecursionLimitError: Nesting deeper than the configured maximum.
        """
        logger.debug("Transforming %s with %s", type(context).__name__, type(self).__name__)
        specification = self.transformer(context)
        return self._transmogrifier.transmogrify(specification, context)

    @abstractmethod
    def transformer(self, context: Any) -> Any:
        """Return the specification tree (presentation layer) for ``context``."""


class Presenter(AbstractPresenter):
    """Structured presenter with a transformer bound once at construction."""

    def __init__(self, transformer: Any, **options: Any) -> None:
        self._transformer: BoundTransformer = bind_transformer(transformer)
        super().__init__(**options)

    def transformer(self, context: Any) -> Any:
        return resolve_specification(self._transformer, context)


class MutablePresenter(AbstractPresenter):
    """Structured presenter whose transformer can be swapped between calls.

    The transformer accepts:
        * a literal path, e.g. ``"$display_date"``
        * a mapping or sequence, e.g. ``["id", "name", "$display_date"]``
        * a callable ``f(context) -> specification``
    """

    def __init__(self, transformer: Any = None, **options: Any) -> None:
        self._transformer: Optional[BoundTransformer] = None
        super().__init__(**options)
        if transformer is not None:
            self.set_transformer(transformer)

    def set_transformer(self, transformer: Any) -> "MutablePresenter":
        """Bind a new transformer; takes effect on the next `transform` call.

        Raises:
            ConfigurationError: If the transformer shape is not recognized.
        """
        self._transformer = bind_transformer(transformer)
        return self

    def transformer(self, context: Any) -> Any:
        bound = self._transformer
        if bound is None:
            raise ConfigurationError(None)
        return resolve_specification(bound, context)


class PatternPresenter(AbstractPresenter):
    """Presenter rendering ``{{name}}`` tokens in every plain string.

    Positional entries are attribute names (``["id", "name"]``). Tokens and
    names resolve against the context by key, attribute, or zero-argument
    method; unresolved names render as themselves. None renders as ``""``.
    """

    def __init__(
        self,
        transformer: Any,
        getter_pattern: Union[str, Pattern[str]] = MACRO_PATTERN,
        **options: Any,
    ) -> None:
        self._transformer: BoundTransformer = bind_transformer(transformer)
        self._getter_pattern = compile_pattern(getter_pattern)
        super().__init__(**options)

    def _build_transmogrifier(self, **options: Any) -> BaseTransmogrifier:
        return PatternTransmogrifier(self._getter_pattern, **options)

    def transformer(self, context: Any) -> Any:
        return resolve_specification(self._transformer, context)


class ModelPresenter(PatternPresenter):
    """PatternPresenter for describable models.

    Names and tokens are first looked up in the model's presenter aliases
    (``context.metadata()["presenters"]["aliases"]``); an alias is rendered
    in place of the attribute it names.
    """

    def __init__(
        self,
        transformer: Any,
        getter_pattern: Union[str, Pattern[str]] = MACRO_PATTERN,
        **options: Any,
    ) -> None:
        options.setdefault("alias_resolver", metadata_alias_resolver)
        super().__init__(transformer, getter_pattern, **options)
