"""
Global test fixtures for the tempfuzz project.
"""

from datetime import datetime

import pytest

from tempfuzz.config import clear_settings_cache


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """
    Isolate tests from the developer's environment and the settings cache.
    """
    for name in (
        "TEMPFUZZ_LOGGING_LEVEL",
        "TEMPFUZZ_LOGGING_DEBUG",
        "TEMPFUZZ_LOGGING_LOG_DIR",
        "TEMPFUZZ_TEMPORAL_TIMEZONE",
    ):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def specific_time():
    """A fixed point in time used across temporal tests."""
    return datetime(2022, 1, 1, 12, 0)
