"""Lock system.

Merges the active block into the world at its current position, then runs
the post-lock systems in order: line clearing, spawning the next block and
top-out detection.
"""

from dataclasses import replace

from blockfall.playfield import lock_piece
from blockfall.state import State
from blockfall.systems.lines import line_clear_system
from blockfall.systems.spawn import spawn_system
from blockfall.systems.terminal import top_out_system


def lock_system(state: State) -> State:
    """Lock the active block and spawn the next one."""
    world = lock_piece(state.position, state.block.pieces, state.world)
    state = replace(state, world=world)
    state = line_clear_system(state)
    state = spawn_system(state)
    state = top_out_system(state)
    return state
