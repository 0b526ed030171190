# pylint: disable=no-member
"""
Maps the game state to rectangles and draws them with pygame
"""

from typing import Callable, List
import pygame
from src.pong import constants
from src.pong.errors import ConversionError, RenderError
from src.models.pong import GameState, Vector2


def to_coordinate(value: int) -> int:
    """
    Check that a pixel offset fits a signed 32-bit coordinate
    """
    if not 0 <= value <= constants.I32_MAX:
        raise ConversionError(f"{value} does not fit a signed 32-bit coordinate")
    return value


def wall_rects(window_width: int, window_height: int) -> List[pygame.Rect]:
    """
    Top, bottom and right walls. The left edge is left open.
    """
    if (
        window_width < 2 * constants.THICKNESS
        or window_height < 2 * constants.THICKNESS
    ):
        raise ConversionError(
            f"window {window_width}x{window_height} is smaller than twice "
            f"the wall thickness ({constants.THICKNESS}px)"
        )
    bottom_wall_y = to_coordinate(window_height - constants.THICKNESS)
    right_wall_x = to_coordinate(window_width - constants.THICKNESS)
    return [
        pygame.Rect(0, 0, window_width, constants.THICKNESS),
        pygame.Rect(0, bottom_wall_y, window_width, constants.THICKNESS),
        pygame.Rect(right_wall_x, 0, constants.THICKNESS, window_height),
    ]


def paddle_rect(pos_paddle: Vector2) -> pygame.Rect:
    # int() truncates towards zero
    return pygame.Rect(
        int(pos_paddle.x - constants.THICKNESS / 2),
        int(pos_paddle.y - constants.PADDLE_HEIGHT / 2),
        constants.THICKNESS,
        int(constants.PADDLE_HEIGHT),
    )


def ball_rect(pos_ball: Vector2) -> pygame.Rect:
    return pygame.Rect(
        int(pos_ball.x - constants.THICKNESS / 2),
        int(pos_ball.y - constants.THICKNESS / 2),
        constants.THICKNESS,
        constants.THICKNESS,
    )


class PygameRenderer:
    """
    Draws walls, paddle and ball on a surface and presents the frame
    """

    def __init__(
        self,
        screen: pygame.Surface,
        present: Callable[[], None] = pygame.display.flip,
    ):
        self.screen = screen
        self.present = present

    def draw(self, state: GameState):
        """Render the current game state."""
        walls = wall_rects(state.window_width, state.window_height)
        try:
            self.screen.fill(constants.BACKGROUND_COLOR)
            for wall in walls:
                pygame.draw.rect(self.screen, constants.WALL_COLOR, wall)
            pygame.draw.rect(
                self.screen, constants.PADDLE_COLOR, paddle_rect(state.pos_paddle)
            )
            pygame.draw.rect(self.screen, constants.BALL_COLOR, ball_rect(state.pos_ball))
            self.present()
        except pygame.error as e:
            raise RenderError(str(e)) from e
