"""
Shared fixtures for the Pong tests
"""

import pytest
from src.pong.physics import PhysicsState
from src.models.pong import Config, GameState
from tests.helpers import FakeClock


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def state() -> GameState:
    return GameState.new(Config(width=1024, height=768))


@pytest.fixture
def physics(state, clock) -> PhysicsState:
    return PhysicsState(state, clock)
