"""Shared fixtures for the dessert clicker tests."""

import pytest

from clicker.catalog import build_catalog, DEFAULT_DESSERTS
from utils.config_loader import reset_config_cache
from utils.display import DisplaySurface


class FakeClock:
    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def small_catalog():
    """Three desserts: A from 0 sold, B from 2, C from 4."""
    return build_catalog([("A", 5, 0), ("B", 10, 2), ("C", 15, 4)])


@pytest.fixture
def full_catalog():
    return build_catalog(DEFAULT_DESSERTS)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def display(clock):
    return DisplaySurface(width=480, height=720, image_size=320, clock=clock)


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """Point the config loader at a temporary settings.yaml."""
    import utils.config_loader as config_loader

    path = tmp_path / "settings.yaml"
    monkeypatch.setattr(config_loader, "CONFIG_PATH", path)
    reset_config_cache()
    yield path
    reset_config_cache()
