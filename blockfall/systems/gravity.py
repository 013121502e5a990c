"""Gravity systems.

``gravity_system`` moves the active block down one row per step. A grounded
block stays where it is (soft landing); it only locks here when
``config.lock_delay`` is set and the block has been grounded for that many
further steps. ``hard_drop_system`` moves the block straight to its resting
row without locking it.
"""

from dataclasses import replace

from blockfall.playfield import DOWN, drop_position, is_colliding
from blockfall.state import State
from blockfall.systems.lock import lock_system


def gravity_system(state: State) -> State:
    """Move the block down one row, or keep it in place if that collides."""
    below = state.position.add(DOWN)
    if not is_colliding(below, state.block.pieces, state.world):
        return replace(state, position=below, delay=0)
    return lock_delay_system(state)


def lock_delay_system(state: State) -> State:
    """Count grounded steps and lock once ``config.lock_delay`` is exceeded."""
    lock_delay = state.config.lock_delay
    if lock_delay is None:
        return state
    if state.delay >= lock_delay:
        return lock_system(state)
    return replace(state, delay=state.delay + 1)


def hard_drop_system(state: State) -> State:
    """Move the block to the lowest row it can reach."""
    position = drop_position(state.position, state.block.pieces, state.world)
    if position == state.position:
        return state
    return replace(state, position=position)
