"""Shared test fixtures and configuration."""
from typing import Iterator

import pytest

from whispher.core.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Drop cached settings so env overrides in one test don't leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
