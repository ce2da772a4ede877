"""Unit tests for settings."""

from __future__ import annotations

import pytest

from shapeguard.config import Settings, get_settings, settings


def test_defaults() -> None:
    defaults = Settings(_env_file=None)

    assert defaults.LOG_LEVEL == "WARNING"
    assert defaults.LOG_JSON is False
    assert defaults.MAX_DISPLAYED_TYPES == 5
    assert defaults.MAX_INSPECTED_ITEMS == 3


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SHAPEGUARD_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SHAPEGUARD_LOG_JSON", "true")
    monkeypatch.setenv("SHAPEGUARD_MAX_DISPLAYED_TYPES", "7")

    configured = Settings(_env_file=None)

    assert configured.LOG_LEVEL == "DEBUG"
    assert configured.LOG_JSON is True
    assert configured.MAX_DISPLAYED_TYPES == 7


def test_settings_are_cached() -> None:
    assert get_settings() is settings
