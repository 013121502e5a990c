"""Composite grid for renderers.

:func:`renderable_composite` layers, in order:

1. the border outline around the playfield,
2. the next block in the side panel,
3. the death zone band over the top ``death_zone_height`` rows,
4. the locked world (empty cells leave the band visible),
5. the active block,
6. the ghost block at the hard-drop resting position, over everything else.

The playfield sits at offset ``(1, 1)`` inside the border. Cells of the active
block above row 0 land on the border row or are clipped.
"""

from blockfall.components import ORIGIN, Pixel, Position, is_empty
from blockfall.grid import Grid, draw_grid, draw_rect, draw_rect_outline, empty_grid, fmap
from blockfall.playfield import drop_position
from blockfall.state import State
from blockfall.types import Gfx

PANEL_WIDTH = 10
PLAYFIELD_ORIGIN = Position(1, 1)

BORDER_PIXEL = Pixel("+", Gfx.BORDER)
DEATH_ZONE_PIXEL = Pixel("-", Gfx.DANGER)
GHOST_PIXEL = Pixel("~", Gfx.GHOST)


def to_ghost_pixel(pixel: Pixel) -> Pixel:
    return pixel if is_empty(pixel) else GHOST_PIXEL


def ghost_piece(shape: Grid) -> Grid:
    """Recolour every occupied cell of ``shape`` as a ghost cell."""
    return fmap(to_ghost_pixel, shape)


def ghost_position(state: State) -> Position:
    """Where the active block would rest after a hard drop."""
    return drop_position(state.position, state.block.pieces, state.world)


def next_block_origin(state: State) -> Position:
    """Top-left of the next-block preview in the side panel."""
    return Position(state.world.width + 4, 2)


def renderable_composite(state: State) -> Grid:
    """Build the full display grid for ``state``."""
    world = state.world
    outer_width, outer_height = world.width + 2, world.height + 2

    buffer = empty_grid(outer_width + PANEL_WIDTH, outer_height)
    buffer = draw_rect_outline(ORIGIN, outer_width, outer_height, BORDER_PIXEL, buffer)
    buffer = draw_grid(next_block_origin(state), state.next_block.pieces, buffer)
    buffer = draw_rect(
        PLAYFIELD_ORIGIN,
        world.width,
        state.config.death_zone_height,
        DEATH_ZONE_PIXEL,
        buffer,
    )
    buffer = draw_grid(PLAYFIELD_ORIGIN, world, buffer)
    buffer = draw_grid(
        PLAYFIELD_ORIGIN.add(state.position), state.block.pieces, buffer
    )
    buffer = draw_grid(
        PLAYFIELD_ORIGIN.add(ghost_position(state)),
        ghost_piece(state.block.pieces),
        buffer,
    )
    return buffer
