"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from composable import KeyPathSettings


@pytest.fixture
def settings():
    """Strict settings with shallow-copy warnings enabled, independent of env."""
    return KeyPathSettings(strict_fields=True, warn_on_shallow_copy=True)


@pytest.fixture
def lenient_settings():
    """Settings that skip field validation."""
    return KeyPathSettings(strict_fields=False, warn_on_shallow_copy=True)


@pytest.fixture
def quiet_settings():
    """Settings with shallow-copy warnings disabled."""
    return KeyPathSettings(strict_fields=True, warn_on_shallow_copy=False)
