"""Shared fixtures for the rune test suite."""

import pytest

from rune.config import get_settings


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Isolate every test from RUNE_* variables and the cached Settings."""
    for name in (
        "RUNE_DEFAULT_REQUIRED",
        "RUNE_DEFAULT_DISALLOW_UNDEFINED",
        "RUNE_DEFAULT_DISALLOW_NULL",
        "RUNE_DEFAULT_DISALLOW_NOKEY",
        "RUNE_DEFAULT_DISALLOW_UNDEFINED_KEYS",
        "RUNE_LOG_LEVEL",
        "RUNE_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
