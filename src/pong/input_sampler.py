# pylint: disable=no-member
"""
Turns pending pygame events into paddle and quit intents
"""

from enum import Enum
from typing import Callable, Iterable, Optional
import pygame
from src.models.pong import GameState, PaddleDirection
from src.logger.logger import logger

KEY_UP = pygame.K_w
KEY_DOWN = pygame.K_s
KEY_QUIT = pygame.K_ESCAPE


class Intent(Enum):
    QUIT = "quit"
    PADDLE_UP = "paddle_up"
    PADDLE_DOWN = "paddle_down"


def translate(event: pygame.event.Event) -> Optional[Intent]:
    """
    Map a single event to an intent, or None for events the game ignores
    """
    if event.type == pygame.QUIT:
        return Intent.QUIT
    if event.type != pygame.KEYDOWN:
        return None
    if event.key == KEY_QUIT:
        return Intent.QUIT
    if event.key == KEY_UP:
        return Intent.PADDLE_UP
    if event.key == KEY_DOWN:
        return Intent.PADDLE_DOWN
    return None


class InputSampler:
    """
    Drains the event queue once per frame and applies what it finds
    to the game state in arrival order
    """

    def __init__(
        self,
        poll_events: Callable[[], Iterable[pygame.event.Event]] = pygame.event.get,
    ):
        self.poll_events = poll_events

    def sample(self, state: GameState):
        """Apply every pending event to the state. Never blocks."""
        for event in self.poll_events():
            intent = translate(event)
            if intent is None:
                continue
            apply_intent(state, intent)


def apply_intent(state: GameState, intent: Intent):
    """
    Later paddle intents in the same frame overwrite earlier ones
    """
    match intent:
        case Intent.QUIT:
            if state.is_running:
                logger.info("Quit requested")
            state.is_running = False
        case Intent.PADDLE_UP:
            state.dir_paddle = PaddleDirection.UP
        case Intent.PADDLE_DOWN:
            state.dir_paddle = PaddleDirection.DOWN
