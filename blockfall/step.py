"""State reducer and step orchestration.

This module wires the systems together to implement a single *step* given an
:class:`Input`. The exported :func:`step` is the only public transition entry
point and is pure: it returns a *new* :class:`blockfall.state.State`.

Ordering (high level):

1. A dead state is returned unchanged.
2. ``UP`` hard-drops: the block falls to its resting row, locks, and the next
   block spawns. Gravity does not run afterwards. A block that already
   overlaps the stack locks where it is.
3. Shift and rotation inputs are resolved first (``movement_system``); a
   colliding move is silently rejected.
4. Gravity runs once (``gravity_system``), for every input other than ``UP``.

Because movement is resolved before gravity, a rotate-then-fall can succeed
even where falling first would have blocked the rotation.
"""

from blockfall.actions import MOVE_INPUTS, Input
from blockfall.state import State
from blockfall.systems.gravity import gravity_system, hard_drop_system
from blockfall.systems.lock import lock_system
from blockfall.systems.movement import movement_system
from blockfall.utils.terminal import is_terminal_state


def step(state: State, action: Input) -> State:
    """Advance the game by one input.

    Args:
        state (State): Previous immutable game state.
        action (Input): Player input for this step.

    Returns:
        State: Next state. A dead input state is returned as is.
    """
    if is_terminal_state(state):
        return state

    if action == Input.UP:
        return _step_hard_drop(state)

    if action in MOVE_INPUTS:
        state = movement_system(state, action)

    return _after_step(state)


def _step_hard_drop(state: State) -> State:
    """Drop the block to its resting row, lock it and spawn the next one."""
    state = hard_drop_system(state)
    return lock_system(state)


def _after_step(state: State) -> State:
    """Apply gravity (and lock delay) once."""
    return gravity_system(state)
