"""
Common methods implemented by all games
"""

from abc import ABC, abstractmethod


class BaseGame(ABC):
    """
    Interface implemented by all games
    """

    @abstractmethod
    def process_input(self):
        """Apply pending input events to the game state."""

    @abstractmethod
    def update(self):
        """Update game state."""

    @abstractmethod
    def render(self):
        """Render the current game state."""

    @abstractmethod
    def close(self):
        """Release the window and shut pygame down."""

    @abstractmethod
    def run(self):
        """Main game loop for human play"""
