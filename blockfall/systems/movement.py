"""Player movement system.

Shifts or rotates the active block in response to an :class:`Input`. The move
is all-or-nothing: the candidate state is built without any checks and is
only adopted when the block does not collide there. Rotation keeps the
top-left position of the bounding grid.

Returns the original ``State`` when the move is rejected; otherwise a new
``State`` with the lock-delay counter reset.
"""

from dataclasses import replace

from blockfall.actions import MOVE_INPUTS, Input
from blockfall.components import Position
from blockfall.playfield import is_colliding
from blockfall.state import State

SHIFT_OFFSETS = {
    Input.LEFT: Position(-1, 0),
    Input.RIGHT: Position(1, 0),
}


def move_block(state: State, action: Input) -> State:
    """Apply ``action`` to the active block without checking for collisions."""
    if action in SHIFT_OFFSETS:
        return replace(state, position=state.position.add(SHIFT_OFFSETS[action]))
    if action == Input.RROT:
        return replace(state, block=state.block.rotate_cw)
    if action == Input.LROT:
        return replace(state, block=state.block.rotate_ccw)
    return state


def movement_system(state: State, action: Input) -> State:
    """Move the active block if the result does not collide.

    Args:
        state (State): Current state.
        action (Input): Shift or rotation input; other inputs are ignored.

    Returns:
        State: Same state if rejected, otherwise the moved state.
    """
    if action not in MOVE_INPUTS:
        return state

    moved = move_block(state, action)
    if is_colliding(moved.position, moved.block.pieces, moved.world):
        return state

    return replace(moved, delay=0)
