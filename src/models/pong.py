# pylint: disable=missing-class-docstring
"""
Models related to the Pong game
"""
from enum import Enum
from typing import Dict, Tuple
from pydantic import BaseModel, Field
from src.pong import constants


class Vector2(BaseModel):

    x: float
    y: float


class PaddleDirection(Enum):
    STOP = "stop"
    UP = "up"
    DOWN = "down"


_DIRECTION_SIGNS: Dict[PaddleDirection, float] = {
    PaddleDirection.STOP: 0.0,
    PaddleDirection.UP: -1.0,
    PaddleDirection.DOWN: 1.0,
}


def direction_sign(direction: PaddleDirection) -> float:
    """
    Vertical multiplier for a paddle direction (screen y grows downwards)
    """
    return _DIRECTION_SIGNS[direction]


class Config(BaseModel):
    """
    Playfield dimensions in pixels, fixed for the whole session
    """

    width: int = Field(default=constants.DEFAULT_WIDTH, ge=0, le=constants.U32_MAX)
    height: int = Field(
        default=constants.DEFAULT_HEIGHT, ge=0, le=constants.U32_MAX
    )


class GameState(BaseModel):
    """
    Everything the loop mutates between frames
    """

    ticks_count: int = 0
    is_running: bool = True
    window_width: int = Field(frozen=True)
    window_height: int = Field(frozen=True)
    dir_paddle: PaddleDirection = PaddleDirection.STOP
    pos_paddle: Vector2
    pos_ball: Vector2
    vel_ball: Vector2

    @staticmethod
    def new(config: Config) -> "GameState":
        """
        Create the state for a fresh session: paddle at the left edge,
        ball in the middle heading towards the paddle
        """
        return GameState(
            window_width=config.width,
            window_height=config.height,
            pos_paddle=Vector2(x=constants.PADDLE_X, y=config.height / 2),
            pos_ball=Vector2(x=config.width / 2, y=config.height / 2),
            vel_ball=Vector2(
                x=constants.BALL_INITIAL_VELOCITY_X,
                y=constants.BALL_INITIAL_VELOCITY_Y,
            ),
        )

    def paddle_bounds(self) -> Tuple[float, float]:
        """Lowest and highest allowed paddle centre y."""
        lower_bound = constants.PADDLE_HEIGHT / 2 + constants.THICKNESS
        upper_bound = (
            self.window_height - constants.PADDLE_HEIGHT / 2 - constants.THICKNESS
        )
        return lower_bound, upper_bound

