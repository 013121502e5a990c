"""Pixel (cell) component.

A pixel is either the empty cell or an occupied cell carrying a glyph and a
display attribute. Grids, pieces and the world are all built from pixels.
"""

from dataclasses import dataclass

from blockfall.types import Gfx


@dataclass(frozen=True)
class Pixel:
    """Single grid cell.

    Attributes:
        value: Glyph used by text renderers.
        gfx: Display attribute (colour) used by image renderers.
    """

    value: str
    gfx: Gfx = Gfx.DEFAULT


EMPTY_PIXEL = Pixel(" ")


def is_empty(pixel: Pixel) -> bool:
    """Return True if ``pixel`` is the empty cell."""
    return pixel == EMPTY_PIXEL
