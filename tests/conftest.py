"""Shared fixtures: small hand-sized grids and seeded randomness."""

import os
import random

# Keep pygame headless and quiet
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from dataclasses import replace

import pytest

from honeycomb.geometry import GridConfig
from honeycomb.grid import CellGrid
from honeycomb.scheduler import Scheduler
from honeycomb.settings import DEFAULT_SETTINGS, SETTINGS_ENV


def _make_config(rows=5, cols=5, width=500, height=400, cell_width=100.0, cell_height=110.0):
    return GridConfig(
        width=width,
        height=height,
        cell_width=cell_width,
        cell_height=cell_height,
        spacing_x=cell_width + 4,
        spacing_y=cell_height + 8,
        rows=rows,
        cols=cols,
    )


@pytest.fixture
def make_config():
    return _make_config


@pytest.fixture
def config():
    return _make_config()


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def grid(config, scheduler):
    return CellGrid(config, scheduler)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def quiet_settings():
    """No interval ripples, so only what a test triggers happens."""
    return replace(DEFAULT_SETTINGS, max_active_ripples=0)


@pytest.fixture(autouse=True)
def _no_settings_env(monkeypatch):
    monkeypatch.delenv(SETTINGS_ENV, raising=False)
