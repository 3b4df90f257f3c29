"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for key path
construction and copy-update behavior.

Usage:
    from composable.config import KeyPathSettings

    # Load from environment variables (COMPOSABLE_*)
    settings = KeyPathSettings()

    # Or override with explicit values
    lenient = KeyPathSettings(strict_fields=False)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class KeyPathSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for key paths and setters.

    Attributes:
        strict_fields: Validate field names against the declared fields of
            dataclasses, NamedTuples and pydantic models when a key path is built.
        warn_on_shallow_copy: Emit a RuntimeWarning when an update falls back
            to shallow-copying a plain object.

    Environment Variables:
        COMPOSABLE_STRICT_FIELDS
        COMPOSABLE_WARN_ON_SHALLOW_COPY
    """

    model_config = SettingsConfigDict(
        env_prefix="COMPOSABLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict_fields: bool = True
    warn_on_shallow_copy: bool = True
