from datetime import datetime, timedelta, timezone

import pytest

from pixel_design.config import Settings
from pixel_design.main import create_app
from pixel_design.store import DesignStore


class FixedClock:
    """Clock returning a fixed start time, advanced one second per call."""

    def __init__(self, start=datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        self.now = self.now + timedelta(seconds=1)
        return self.now


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def store(settings):
    return DesignStore(grid_size=settings.DEFAULT_GRID_SIZE, color=settings.EMPTY_COLOR)


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def app(settings, store):
    return create_app(settings, store)
