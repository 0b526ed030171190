"""
Millisecond clocks driving the game loop
"""

import time
from abc import ABC, abstractmethod
import pygame
from src.pong import constants

_TICKS_MODULUS = constants.U32_MAX + 1
_HALF_TICKS_MODULUS = _TICKS_MODULUS // 2


def ticks_elapsed(now: int, then: int) -> int:
    """
    Milliseconds from `then` to `now` on a wrapping 32-bit counter.

    A reading taken after the counter wrapped gives a small positive value,
    a reading behind `then` gives a negative one.
    """
    return (now - then + _HALF_TICKS_MODULUS) % _TICKS_MODULUS - _HALF_TICKS_MODULUS


class BaseClock(ABC):
    """
    Interface implemented by all clocks
    """

    @abstractmethod
    def ticks(self) -> int:
        """Current monotonic reading in milliseconds, wrapped to 32 bits."""

    @abstractmethod
    def wait(self, milliseconds: int):
        """Block for a short slice while waiting for the physics step."""

    @abstractmethod
    def sleep(self, seconds: float):
        """Block for the visual frame interval."""


class PygameClock(BaseClock):
    """
    Clock backed by pygame's millisecond timer
    """

    def ticks(self) -> int:
        return pygame.time.get_ticks() % _TICKS_MODULUS

    def wait(self, milliseconds: int):
        pygame.time.wait(milliseconds)

    def sleep(self, seconds: float):
        time.sleep(seconds)
