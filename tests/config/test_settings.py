"""Tests for key path configuration."""

from dataclasses import dataclass

import pytest

from composable import KeyPathSettings, attr, key_path


@dataclass(frozen=True)
class User:
    name: str
    age: int


class Label:
    def __init__(self, text):
        self.text = text


def test_defaults(monkeypatch):
    monkeypatch.delenv("COMPOSABLE_STRICT_FIELDS", raising=False)
    monkeypatch.delenv("COMPOSABLE_WARN_ON_SHALLOW_COPY", raising=False)

    settings = KeyPathSettings(_env_file=None)

    assert settings.strict_fields is True
    assert settings.warn_on_shallow_copy is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COMPOSABLE_STRICT_FIELDS", "false")
    monkeypatch.setenv("COMPOSABLE_WARN_ON_SHALLOW_COPY", "0")

    settings = KeyPathSettings(_env_file=None)

    assert settings.strict_fields is False
    assert settings.warn_on_shallow_copy is False


def test_explicit_values_override_environment(monkeypatch):
    monkeypatch.setenv("COMPOSABLE_STRICT_FIELDS", "false")

    assert KeyPathSettings(strict_fields=True).strict_fields is True


def test_key_path_reads_environment_when_no_settings_given(monkeypatch):
    monkeypatch.setenv("COMPOSABLE_STRICT_FIELDS", "false")

    # Lenient mode from the environment: unknown names are accepted
    assert key_path(User, "nickname").root is User


def test_warning_switch_applies_to_attr_paths(quiet_settings, recwarn):
    text = attr("text", settings=quiet_settings)

    updated = text.copy_with(Label("Hello"), "Bye")

    assert updated.text == "Bye"
    assert not [w for w in recwarn if issubclass(w.category, RuntimeWarning)]


def test_warning_enabled_for_attr_paths(settings):
    text = attr("text", settings=settings)

    with pytest.warns(RuntimeWarning):
        text.copy_with(Label("Hello"), "Bye")
