"""Terminal condition systems.

``top_out_system`` sets ``player_state`` to ``DEAD`` exactly once, right after
a new block spawns, when ``config.detect_top_out`` is enabled and either

* the spawned block already collides at its spawn position, or
* a locked cell lies inside the death zone (the top ``death_zone_height`` rows).

With the flag off the game never ends.
"""

from dataclasses import replace

from blockfall.playfield import has_cells_above
from blockfall.state import State
from blockfall.types import PlayerState
from blockfall.utils.terminal import is_terminal_state, is_valid_state

DEATH_MESSAGE = "You Are Dead"


def top_out_system(state: State) -> State:
    """Mark the player dead if the spawn is blocked or the death zone is reached."""
    if not state.config.detect_top_out or is_terminal_state(state):
        return state

    blocked = not is_valid_state(state)
    if blocked or has_cells_above(state.world, state.config.death_zone_height):
        return replace(state, player_state=PlayerState.DEAD, message=DEATH_MESSAGE)
    return state
