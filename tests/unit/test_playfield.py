import pytest

from blockfall.components import Position
from blockfall.grid import empty_grid, grid_from_rows, occupied_cells, to_strings
from blockfall.pieces import PieceKind, spawn_piece
from blockfall.playfield import (
    DOWN,
    clear_rows,
    drop_position,
    full_rows,
    has_cells_above,
    initial_world,
    is_colliding,
    lock_piece,
)

O_SHAPE = spawn_piece(PieceKind.O).pieces
T_SHAPE = spawn_piece(PieceKind.T).pieces  # ".X." / "XXX"


@pytest.mark.parametrize(
    "pos, expected",
    [
        ((0, 0), False),
        ((8, 18), False),
        ((-1, 5), True),  # left wall
        ((9, 5), True),  # right wall
        ((4, 19), True),  # floor
        ((4, -1), False),  # partially above the top
        ((4, -10), False),  # entirely above the top
        ((-1, -10), True),  # above the top but outside a side wall
    ],
)
def test_collision_against_bounds(pos: tuple[int, int], expected: bool) -> None:
    world = initial_world(10, 20)
    assert is_colliding(Position(*pos), O_SHAPE, world) is expected


def test_collision_with_occupied_cell() -> None:
    world = grid_from_rows(["....", "..X.", "....", "...."])
    assert is_colliding(Position(1, 0), O_SHAPE, world)
    assert not is_colliding(Position(0, 2), O_SHAPE, world)


def test_empty_bounding_cell_over_occupied_cell_does_not_collide() -> None:
    world = grid_from_rows(["X...", "....", "....", "...."])
    # T's top-left cell is empty.
    assert not is_colliding(Position(0, 0), T_SHAPE, world)
    assert is_colliding(Position(-1, 0), T_SHAPE, world)


def test_drop_position_reaches_floor() -> None:
    world = initial_world(10, 20)
    rest = drop_position(Position(4, 0), O_SHAPE, world)
    assert rest == Position(4, 18)
    assert is_colliding(rest.add(DOWN), O_SHAPE, world)


def test_drop_position_stops_on_stack() -> None:
    world = grid_from_rows(["....", "....", "....", "....", ".X..", "XXXX"])
    rest = drop_position(Position(0, 0), O_SHAPE, world)
    assert rest == Position(0, 2)
    assert not is_colliding(rest, O_SHAPE, world)
    assert is_colliding(rest.add(DOWN), O_SHAPE, world)


def test_drop_position_when_already_resting() -> None:
    world = initial_world(4, 4)
    assert drop_position(Position(0, 2), O_SHAPE, world) == Position(0, 2)


def test_drop_position_of_empty_shape_terminates() -> None:
    world = initial_world(4, 4)
    assert drop_position(Position(1, 1), empty_grid(2, 2), world) == Position(1, 1)


def test_lock_piece_merges_cells() -> None:
    world = grid_from_rows(["....", "....", "X..."])
    locked = lock_piece(Position(1, 1), O_SHAPE, world)
    assert to_strings(locked) == ["    ", " ## ", "X## "]
    assert to_strings(world) == ["    ", "    ", "X   "]


def test_full_rows_and_clear() -> None:
    world = grid_from_rows(["X...", "XXXX", ".X..", "XXXX"])
    assert full_rows(world) == [1, 3]
    cleared = clear_rows(world, full_rows(world))
    assert to_strings(cleared) == ["    ", "    ", "X   ", " X  "]
    assert (cleared.width, cleared.height) == (world.width, world.height)


def test_clear_rows_without_rows_is_noop() -> None:
    world = grid_from_rows(["X...", "...."])
    assert clear_rows(world, []) is world


def test_has_cells_above() -> None:
    world = grid_from_rows(["....", "..X.", "...."])
    assert has_cells_above(world, 2)
    assert not has_cells_above(world, 1)
    assert not has_cells_above(grid_from_rows(["....", "....", "X..."]), 2)
    assert not has_cells_above(initial_world(4, 4), 4)


def test_locked_shape_occupies_world() -> None:
    world = lock_piece(Position(2, 2), O_SHAPE, initial_world(6, 6))
    assert {pos for pos, _ in occupied_cells(world)} == {
        Position(2, 2),
        Position(3, 2),
        Position(2, 3),
        Position(3, 3),
    }
