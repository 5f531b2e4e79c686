"""Presenter configuration management using Pydantic Settings.

This module defines the `Settings` class, which loads the engine defaults from
environment variables and a `.env` file: the logging level used by the CLI,
the recursion depth guard, and the format applied to temporal leaves.

Explicit constructor arguments on a presenter always win over these values;
settings only supply the defaults.

The `get_settings` function provides a cached, singleton instance of the
configuration, ensuring consistent defaults throughout the application.
"""
from __future__ import annotations

from datetime import datetime
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict as _SettingsConfigDict


class Settings(BaseSettings):
    """Defines all presenter configuration parameters."""

    model_config = _SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Logging (applied by the CLI only; the library never configures handlers)
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # Transformation behavior
    PRESENTER_MAX_DEPTH: int = Field(
        default=64,
        ge=1,
        description=(
            "Maximum nesting depth of a single transformation before failing with "
            "RecursionLimitError (guards self-referencing alias chains)"
        ),
    )
    PRESENTER_DATETIME_FORMAT: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="strftime pattern applied to date/datetime leaves",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> str:
        """Trim and upper-case the level name; blank falls back to INFO."""
        if isinstance(v, str) and v.strip():
            return v.strip().upper()
        return "INFO"

    @field_validator("PRESENTER_DATETIME_FORMAT")
    @classmethod
    def check_datetime_format(cls, v: str) -> str:
        """Reject patterns strftime cannot apply."""
        if not v:
            raise ValueError("PRESENTER_DATETIME_FORMAT must not be empty")
        datetime(1970, 1, 1).strftime(v)
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:  # pragma: no cover - trivial
    """Return a cached, singleton instance of the presenter settings."""
    return Settings()


__all__ = ["Settings", "get_settings"]
