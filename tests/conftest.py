"""Test configuration and fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from hx.settings import HXSettings, get_settings


@dataclass
class HeaderBag:
    """Plain dict-backed header sink."""

    headers: dict[str, str] = field(default_factory=dict)


@pytest.fixture
def sink() -> HeaderBag:
    """Provide an empty header sink."""
    return HeaderBag()


@pytest.fixture
def settings() -> HXSettings:
    """Provide default settings, independent of the environment."""
    return HXSettings()


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
