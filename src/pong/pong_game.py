# pylint: disable=no-member
"""
Functionality for combining the various parts of the Pong game
"""
from typing import Callable, Iterable, Optional
import pygame
from src.pong import constants
from src.pong.base_game import BaseGame
from src.pong.clock import BaseClock, PygameClock
from src.pong.errors import SetupError
from src.pong.input_sampler import InputSampler
from src.pong.physics import PhysicsState
from src.pong.renderer import PygameRenderer
from src.models.pong import Config, GameState, PaddleDirection
from src.logger.logger import logger


def _present_nothing():
    pass


class PongGame(BaseGame):
    """
    Single paddle against three walls. The game ends when the ball gets
    past the paddle or the player quits.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        headless: bool = False,
        clock: Optional[BaseClock] = None,
        poll_events: Optional[Callable[[], Iterable[pygame.event.Event]]] = None,
        renderer: Optional[PygameRenderer] = None,
    ):
        self.config = config or Config()
        self.headless = headless
        try:
            if not headless:
                pygame.init()
                self.screen = pygame.display.set_mode(
                    (self.config.width, self.config.height)
                )
                pygame.display.set_caption(constants.SCREEN_CAPTION)
                present = pygame.display.flip
            else:
                # Off-screen surface, nothing is presented
                self.screen = pygame.Surface((self.config.width, self.config.height))
                present = _present_nothing
            if poll_events is None:
                # pygame.event.get needs the display subsystem, even off-screen
                pygame.display.init()
                pygame.event.pump()
        except pygame.error as e:
            pygame.quit()
            raise SetupError(str(e)) from e

        self.state = GameState.new(self.config)
        self.clock = clock or PygameClock()
        self.input_sampler = InputSampler(poll_events or pygame.event.get)
        self.physics = PhysicsState(self.state, self.clock)
        self.renderer = renderer or PygameRenderer(self.screen, present)
        self.frames = 0

        logger.info(
            f"Initialized {self.config.width}x{self.config.height} "
            f"{'headless ' if headless else ''}game"
        )

    def process_input(self):
        self.input_sampler.sample(self.state)

    def update(self):
        self.physics.update()

    def render(self):
        self.renderer.draw(self.state)

    def close(self):
        """Close the Pygame window."""
        logger.info(f"Shutting down after {self.frames} frames")
        pygame.quit()

    def run(self):
        """Main game loop for human play."""
        while self.state.is_running:
            self.state.dir_paddle = PaddleDirection.STOP
            self.process_input()
            self.update()
            # The frame that ends the game is still drawn
            self.render()
            self.frames += 1
            self.clock.sleep(constants.FRAME_INTERVAL_SECONDS)
