"""Resolution subpackage: the algorithms behind presenter transformations.

All functions and classes in this package are pure. They perform no I/O and
hold no state across calls, and they never mutate the context they read from.
The public API lives in `model_presenter.presenter`. Import from this package
directly only when composing a custom presenter or testing helpers.

Modules (dependency order, leaves first):
    accessor: Accessor prefix/path parsing (``%`` presenter, ``$`` context)
    normalizer: Foreign container to plain dict/list conversion
    path_access: Dot-path and wildcard traversal (`data_get`)
    presentability: Value classification, leaf conversion, presentability
    aliases: Optional alias lookup collaborator (model metadata)
    pattern: ``{{token}}`` substitution for pattern presenters
    transmogrifier: Recursive per-node resolution (structured and pattern)
    transformer: Transformer binding and specification resolution
"""
from __future__ import annotations

from .path_access import data_get
from .normalizer import to_plain_mapping
from .presentability import is_presentable

__all__ = ["data_get", "to_plain_mapping", "is_presentable"]
