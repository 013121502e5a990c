"""Initial state construction.

:func:`initial_state` builds the deterministic starting state for a
:class:`GameConfig`: an empty world, a generator seeded from the config and
the first piece centred on the top row. :func:`state_from_rows` does the same
over a pre-filled world, which is handy for puzzles and tests.
"""

from dataclasses import replace
from typing import Optional, Sequence

from blockfall.components import ORIGIN, Pixel
from blockfall.config import DEFAULT_CONFIG, GameConfig
from blockfall.grid import grid_from_rows
from blockfall.playfield import World, initial_world
from blockfall.rng import block_generator
from blockfall.state import State
from blockfall.systems.spawn import spawn_system


def initial_state(config: GameConfig = DEFAULT_CONFIG) -> State:
    """Create the starting state for ``config``."""
    return _place_first_piece(initial_world(config.width, config.height), config)


def state_from_rows(
    rows: Sequence[str],
    config: Optional[GameConfig] = None,
    pixel: Optional[Pixel] = None,
) -> State:
    """Create a starting state whose world is given as row strings.

    The world size overrides ``config.width`` / ``config.height``.

    Raises:
        ValueError: If the rows are ragged or the size is not a valid world.
    """
    world = grid_from_rows(rows, pixel)
    config = replace(config or DEFAULT_CONFIG, width=world.width, height=world.height)
    return _place_first_piece(world, config)


def _place_first_piece(world: World, config: GameConfig) -> State:
    generator = block_generator(config.seed)
    state = State(
        world=world,
        position=ORIGIN,
        block=generator.value,
        generator=generator,
        config=config,
    )
    return spawn_system(state)
