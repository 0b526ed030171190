import pytest
from pydantic import ValidationError
from src.pong import constants
from src.models.pong import (
    Config,
    GameState,
    PaddleDirection,
    Vector2,
    direction_sign,
)


def test_config_defaults_to_1024_by_768():
    config = Config()
    assert (config.width, config.height) == (1024, 768)


@pytest.mark.parametrize("width", [-1, 2**32])
def test_config_rejects_values_outside_unsigned_32_bits(width):
    with pytest.raises(ValidationError):
        Config(width=width, height=768)


def test_new_state_matches_session_start():
    state = GameState.new(Config(width=800, height=600))
    assert state.ticks_count == 0
    assert state.is_running
    assert state.dir_paddle == PaddleDirection.STOP
    assert state.pos_paddle == Vector2(x=10, y=300)
    assert state.pos_ball == Vector2(x=400, y=300)
    assert state.vel_ball == Vector2(x=-200, y=235)


def test_window_size_is_fixed_for_the_session(state):
    with pytest.raises(ValidationError):
        state.window_width = 640


def test_direction_signs():
    assert direction_sign(PaddleDirection.UP) == -1.0
    assert direction_sign(PaddleDirection.DOWN) == 1.0
    assert direction_sign(PaddleDirection.STOP) == 0.0


def test_paddle_bounds(state):
    lower_bound, upper_bound = state.paddle_bounds()
    assert lower_bound == constants.PADDLE_HEIGHT / 2 + constants.THICKNESS == 65
    assert upper_bound == 768 - 50 - 15
