"""Terminal condition helper predicates."""

from blockfall.playfield import is_colliding
from blockfall.state import State
from blockfall.types import PlayerState


def is_valid_state(state: State) -> bool:
    """Return True if the active block does not overlap the world or walls."""
    return not is_colliding(state.position, state.block.pieces, state.world)


def is_terminal_state(state: State) -> bool:
    """Return True if the player is dead."""
    return state.player_state == PlayerState.DEAD
