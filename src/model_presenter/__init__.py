"""Package initialization for model-presenter.

Re-exports the public presenter classes and the error taxonomy so callers can
write ``from model_presenter import Presenter, SpecificationError``.
"""

from .errors import (
    ConfigurationError,
    PresenterError,
    RecursionLimitError,
    SpecificationError,
    UnpresentableValueError,
)
from .presenter import (
    AbstractPresenter,
    ModelPresenter,
    MutablePresenter,
    PatternPresenter,
    Presenter,
)
from .resolution.aliases import PresentableModel, metadata_alias_resolver

__all__ = [
    "AbstractPresenter",
    "Presenter",
    "MutablePresenter",
    "PatternPresenter",
    "ModelPresenter",
    "PresentableModel",
    "metadata_alias_resolver",
    "PresenterError",
    "ConfigurationError",
    "SpecificationError",
    "UnpresentableValueError",
    "RecursionLimitError",
]
