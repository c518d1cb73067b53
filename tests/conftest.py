"""Shared fixtures for fixed-point-ema tests."""

import pytest

from fixed_ema.infrastructure.config import get_settings

ENV_VARS = (
    "FIXED_EMA_DEBUG",
    "FIXED_EMA_DEFAULT_SHIFT",
    "FIXED_EMA_DEFAULT_SAMPLE_TYPE",
    "FIXED_EMA_PRESETS_DIR",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Isolate every test from the caller's environment and cached settings."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
