"""Common type aliases and enumerations.

``Gfx`` is the display attribute carried by every occupied cell; renderers map
it to colours. ``PlayerState`` is the terminal marker checked by the reducer.
"""

from enum import StrEnum, auto


class Gfx(StrEnum):
    """Display attribute of a cell (reflected in rendered output)."""

    DEFAULT = auto()
    CYAN = auto()
    BLUE = auto()
    ORANGE = auto()
    YELLOW = auto()
    GREEN = auto()
    PURPLE = auto()
    RED = auto()
    GHOST = auto()
    BORDER = auto()
    DANGER = auto()


class PlayerState(StrEnum):
    """General state of the player. ``DEAD`` is terminal."""

    ALIVE = auto()
    DEAD = auto()


PieceRotation = int
