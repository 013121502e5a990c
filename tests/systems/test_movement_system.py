from dataclasses import replace

import pytest

from blockfall.actions import Input
from blockfall.components import Position
from blockfall.pieces import PieceKind, spawn_piece
from blockfall.systems.movement import move_block, movement_system
from tests.test_utils import make_state


@pytest.mark.parametrize(
    "action, expected",
    [
        (Input.LEFT, (3, 5)),
        (Input.RIGHT, (5, 5)),
    ],
)
def test_shift_moves_block(action: Input, expected: tuple[int, int]) -> None:
    state = make_state(kind=PieceKind.T, pos=(4, 5))
    assert movement_system(state, action).position == Position(*expected)


def test_shift_into_wall_is_rejected() -> None:
    state = make_state(kind=PieceKind.T, pos=(0, 5))
    assert movement_system(state, Input.LEFT) is state


def test_shift_into_locked_cell_is_rejected() -> None:
    rows = ["." * 10] * 19 + ["......X..."]
    state = make_state(rows, kind=PieceKind.O, pos=(4, 18))
    assert movement_system(state, Input.RIGHT) is state
    assert movement_system(state, Input.LEFT).position == Position(3, 18)


@pytest.mark.parametrize(
    "action, turn",
    [
        (Input.RROT, 1),
        (Input.LROT, 3),
    ],
)
def test_rotation_keeps_position(action: Input, turn: int) -> None:
    state = make_state(kind=PieceKind.L, pos=(4, 5))
    moved = movement_system(state, action)
    assert moved.position == state.position
    assert moved.block.rotation == turn


def test_rotation_into_wall_is_rejected() -> None:
    vertical_i = spawn_piece(PieceKind.I).rotate_cw
    state = make_state(block=vertical_i, pos=(9, 5))
    assert movement_system(state, Input.RROT) is state


def test_other_input_does_nothing() -> None:
    state = make_state(kind=PieceKind.S, pos=(4, 5))
    assert movement_system(state, Input.OTHER) is state
    assert move_block(state, Input.OTHER) is state


def test_move_block_does_not_check_collisions() -> None:
    state = make_state(kind=PieceKind.O, pos=(0, 5))
    assert move_block(state, Input.LEFT).position == Position(-1, 5)


def test_successful_move_resets_delay() -> None:
    state = replace(make_state(kind=PieceKind.O, pos=(4, 18)), delay=1)
    assert movement_system(state, Input.LEFT).delay == 0
