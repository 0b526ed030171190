"""
Game factory to get the game based on its title
"""

from src.pong.base_game import BaseGame
from src.pong.pong_game import PongGame
from src.pong import constants


def get_game(title: str) -> type[BaseGame]:
    """
    Get the game class based on the title, ignoring case
    """
    match (title.lower()):
        case constants.GAME_PONG:
            return PongGame
        case _:
            raise ValueError(f"Invalid game title: {title}")
