"""Configuration module using Pydantic Settings.

Usage:
    from composable.config import KeyPathSettings

    settings = KeyPathSettings(strict_fields=False)
"""

from composable.config.settings import KeyPathSettings

__all__ = [
    "KeyPathSettings",
]
