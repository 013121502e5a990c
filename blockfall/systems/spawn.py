"""Spawn system.

Advances the block generator and places the new active block horizontally
centred on row 0. Used both for the very first piece and after every lock.
"""

from dataclasses import replace

from blockfall.components import Position
from blockfall.pieces import Piece
from blockfall.playfield import World
from blockfall.state import State


def spawn_position(world: World, block: Piece) -> Position:
    """Centred spawn position of ``block`` on the top row."""
    return Position(world.width // 2 - block.width // 2, 0)


def spawn_system(state: State) -> State:
    """Replace the active block with the next generated piece.

    The generator moves forward by exactly one; the lock-delay counter resets.
    """
    generator = state.generator.next
    block = generator.value
    return replace(
        state,
        generator=generator,
        block=block,
        position=spawn_position(state.world, block),
        delay=0,
    )
