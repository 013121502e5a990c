from dataclasses import replace
from typing import Optional, Sequence, Tuple

from blockfall.components import Position
from blockfall.config import GameConfig
from blockfall.levels import state_from_rows
from blockfall.pieces import Piece, PieceKind, spawn_piece
from blockfall.state import State


def empty_rows(width: int = 10, height: int = 20) -> list[str]:
    return ["." * width] * height


def make_state(
    rows: Optional[Sequence[str]] = None,
    block: Optional[Piece] = None,
    kind: Optional[PieceKind] = None,
    pos: Optional[Tuple[int, int]] = None,
    config: Optional[GameConfig] = None,
) -> State:
    """State over ``rows`` with an optional explicit block and position."""
    state = state_from_rows(rows or empty_rows(), config=config)
    if kind is not None:
        block = spawn_piece(kind)
    if block is not None:
        state = replace(state, block=block)
    if pos is not None:
        state = replace(state, position=Position(*pos))
    return state


def block_cells(state: State) -> set[Tuple[int, int]]:
    """World coordinates covered by the active block."""
    cells: set[Tuple[int, int]] = set()
    for y, row in enumerate(state.block.pieces.cells):
        for x, pixel in enumerate(row):
            if pixel.value != " ":
                cells.add((state.position.x + x, state.position.y + y))
    return cells


def world_cells(state: State) -> set[Tuple[int, int]]:
    """Coordinates of locked cells in the world."""
    return {
        (x, y)
        for y, row in enumerate(state.world.cells)
        for x, pixel in enumerate(row)
        if pixel.value != " "
    }
