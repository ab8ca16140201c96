"""Root conftest - shared test configuration."""

import os

import pytest

# Keep test logs readable and independent of a developer's .env
os.environ.setdefault("EVENTCLOCK_LOG_FORMAT", "text")
os.environ.setdefault("EVENTCLOCK_WARN_ON_TIMEZONE_FALLBACK", "true")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are lru_cached per process; tests that patch env need a fresh read."""
    from eventclock.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
