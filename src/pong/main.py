"""
Starting point of the game when it is played by a human
"""

import argparse
import sys
from typing import List, Optional
from src.pong.errors import GameError
from src.pong.game_factory import get_game
from src.pong import constants
from src.models.pong import Config
from src.logger.logger import logger


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments
    """
    parser = argparse.ArgumentParser(description="Play a game")

    parser.add_argument(
        "-g",
        f"--{constants.ARG_GAME}",
        type=str.lower,
        default=constants.GAME_PONG,
        choices=constants.GAME_TITLES,
        help="Title of the game to play (case-insensitive)",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Starting point of the game
    """
    args = parse_args(argv)
    config = Config(
        width=constants.DEFAULT_WIDTH, height=constants.DEFAULT_HEIGHT
    )
    try:
        game = get_game(args.game)(config)
    except GameError as e:
        logger.error(f"Could not start {args.game}: {e}")
        return 1

    try:
        game.run()
    except GameError as e:
        logger.error(f"{args.game} stopped: {e}")
        return 1
    finally:
        game.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
