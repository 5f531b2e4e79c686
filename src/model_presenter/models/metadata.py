"""Pydantic models for presenter metadata exposed by describable models.

A presentable model advertises presenter aliases through a ``metadata()``
method whose result contains a ``presenters`` block:

    {
        "presenters": {
            "aliases": {
                "title": "$name",
                "byline": {"author": "$author.name", "date": "$published_at"},
            }
        },
        ...  # any other model metadata, ignored here
    }

Each alias maps an attribute name to a substitute specification fragment (a
path string, a mapping, or a sequence). These models validate only the shape
of the block; fragments themselves are resolved later by the transmogrifier.
"""
from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class PresenterAliases(BaseModel):
    """The ``presenters`` block of a model's metadata."""

    model_config = ConfigDict(extra="ignore")

    aliases: Dict[str, Any] = Field(default_factory=dict)


class PresentableMetadata(BaseModel):
    """Top-level metadata container; unrelated metadata keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    presenters: PresenterAliases = Field(default_factory=PresenterAliases)
