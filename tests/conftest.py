"""Shared test setup: every test starts and ends with freshly read settings."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from numscript_syntax.core.settings import load_settings


@pytest.fixture(autouse=True)  # type: ignore[misc]
def fresh_settings() -> Iterator[None]:
    """Drop the cached Settings so env overrides never leak between tests."""
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()
