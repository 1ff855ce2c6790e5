from __future__ import annotations

import pytest

from advisory.health import HealthRegistry
from factories import TimeController


@pytest.fixture
def health() -> HealthRegistry:
    return HealthRegistry()


@pytest.fixture
def time_controller() -> TimeController:
    return TimeController()
