"""Value components.

Re-exports the immutable building blocks shared by grids, pieces and the game
state: :class:`Position` for placement and :class:`Pixel` for cell contents.
"""

from .pixel import EMPTY_PIXEL, Pixel, is_empty
from .position import ORIGIN, Position

__all__ = [
    "EMPTY_PIXEL",
    "ORIGIN",
    "Pixel",
    "Position",
    "is_empty",
]
