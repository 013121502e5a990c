"""Raster rendering of the composite grid with NumPy + Pillow.

Each composite cell becomes a ``cell_size x cell_size`` square coloured by its
:class:`Gfx`. Dead states are drawn at half brightness.
"""

from typing import Dict, Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image

from blockfall.components import Pixel, is_empty
from blockfall.grid import Grid
from blockfall.renderer.composite import renderable_composite
from blockfall.state import State
from blockfall.types import Gfx

UInt8Array = npt.NDArray[np.uint8]
RGBA = Tuple[int, int, int, int]

DEFAULT_CELL_SIZE = 16
DEAD_DIM = 0.5

EMPTY_COLOR: RGBA = (16, 16, 24, 255)

GFX_COLORS: Dict[Gfx, RGBA] = {
    Gfx.DEFAULT: (200, 200, 200, 255),
    Gfx.CYAN: (102, 224, 255, 255),
    Gfx.BLUE: (106, 119, 255, 255),
    Gfx.ORANGE: (255, 158, 94, 255),
    Gfx.YELLOW: (255, 224, 102, 255),
    Gfx.GREEN: (94, 224, 142, 255),
    Gfx.PURPLE: (200, 119, 255, 255),
    Gfx.RED: (255, 102, 119, 255),
    Gfx.GHOST: (90, 90, 110, 255),
    Gfx.BORDER: (128, 128, 128, 255),
    Gfx.DANGER: (60, 24, 28, 255),
}


def pixel_color(pixel: Pixel) -> RGBA:
    if is_empty(pixel):
        return EMPTY_COLOR
    return GFX_COLORS.get(pixel.gfx, GFX_COLORS[Gfx.DEFAULT])


def grid_to_array(grid: Grid) -> UInt8Array:
    """Return an ``(height, width, 4)`` RGBA array with one entry per cell."""
    colors = [[pixel_color(pixel) for pixel in row] for row in grid.cells]
    return np.array(colors, dtype=np.uint8).reshape(grid.height, grid.width, 4)


def render(state: State, cell_size: int = DEFAULT_CELL_SIZE) -> Image.Image:
    """Render ``state`` as an RGBA PIL image."""
    arr = grid_to_array(renderable_composite(state))
    if state.is_dead:
        arr[..., :3] = (arr[..., :3] * DEAD_DIM).astype(np.uint8)
    arr = np.repeat(np.repeat(arr, cell_size, axis=0), cell_size, axis=1)
    return Image.fromarray(arr)


class ImageRenderer:
    cell_size: int

    def __init__(self, cell_size: int = DEFAULT_CELL_SIZE):
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")
        self.cell_size = cell_size

    def render(self, state: State) -> Image.Image:
        return render(state, cell_size=self.cell_size)
