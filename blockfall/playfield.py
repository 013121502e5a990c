"""Playfield collision, drop and lock helpers.

The world is a :class:`Grid` of locked cells. Functions here are pure and
operate on a shape (a piece's bounding grid) placed at a position.

Collision is asymmetric: cells above the top row never collide, so
pieces may spawn and rotate partially above the visible playfield. Only the
side walls, the floor and occupied world cells block.
"""

from typing import List, Sequence

from pyrsistent import pvector

from blockfall.components import EMPTY_PIXEL, Position, is_empty
from blockfall.grid import Grid, draw_grid, empty_grid, is_occupied, occupied_cells

World = Grid

DOWN = Position(0, 1)


def initial_world(width: int, height: int) -> World:
    """Create an empty world."""
    return empty_grid(width, height)


def is_colliding(position: Position, shape: Grid, world: World) -> bool:
    """Return True if ``shape`` placed at ``position`` overlaps walls, floor or cells."""
    for offset, _ in occupied_cells(shape):
        pos = position.add(offset)
        if pos.x < 0 or pos.x >= world.width or pos.y >= world.height:
            return True
        if pos.y < 0:
            continue
        if is_occupied(world, pos):
            return True
    return False


def drop_position(position: Position, shape: Grid, world: World) -> Position:
    """Return the lowest position reachable by moving ``shape`` straight down.

    The result is the last non-colliding row: one more row down collides. An
    empty shape never collides and is returned where it is.
    """
    if next(occupied_cells(shape), None) is None:
        return position
    while not is_colliding(position.add(DOWN), shape, world):
        position = position.add(DOWN)
    return position


def lock_piece(position: Position, shape: Grid, world: World) -> World:
    """Merge ``shape`` into ``world`` at ``position``."""
    return draw_grid(position, shape, world)


def full_rows(world: World) -> List[int]:
    """Indices of rows with no empty cell, top to bottom."""
    return [
        y
        for y, row in enumerate(world.cells)
        if all(not is_empty(pixel) for pixel in row)
    ]


def clear_rows(world: World, rows: Sequence[int]) -> World:
    """Remove ``rows`` and shift everything above them down."""
    if not rows:
        return world
    removed = set(rows)
    kept = [row for y, row in enumerate(world.cells) if y not in removed]
    blank = pvector([EMPTY_PIXEL] * world.width)
    return Grid(world.width, world.height, pvector([blank] * len(removed) + kept))


def has_cells_above(world: World, row: int) -> bool:
    """Return True if any locked cell lies in rows ``0 .. row - 1``."""
    return any(pos.y < row for pos, _ in occupied_cells(world))
