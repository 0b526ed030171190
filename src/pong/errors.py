"""
Errors raised by the Pong game. All of them end the game.
"""


class GameError(Exception):
    """
    Base class for every failure the game reports to its caller
    """

    label = "game error"

    def __str__(self):
        return f"{self.label}: {super().__str__()}"


class SetupError(GameError):
    """
    The window, drawing surface or event source could not be acquired
    """

    label = "setup error"


class RenderError(GameError):
    """
    Drawing or presenting a frame failed
    """

    label = "render error"


class ConversionError(GameError):
    """
    A window dimension could not be turned into a drawable coordinate
    """

    label = "conversion error"
