"""Core immutable game ``State`` dataclass.

This module defines the frozen :class:`State` object that represents the whole
game at a single step. Every system is a pure function that takes a ``State``
and returns a *new* ``State``; nothing is mutated in place. Previous states
can therefore be retained for replay, inspection or testing at no cost.

Design notes:

* ``generator.value`` is always the active ``block``; :attr:`State.next_block`
  peeks one position further without advancing anything. The piece shown as
  "next" is exactly the piece spawned on the following lock.
* ``delay`` counts consecutive grounded gravity steps and is only consulted
  when ``config.lock_delay`` is set.
* ``player_state`` is the terminal marker. The reducer short-circuits on
  ``DEAD`` so a dead state never changes again.

See :mod:`blockfall.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass, fields
from typing import Any, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from blockfall.components import Position
from blockfall.config import DEFAULT_CONFIG, GameConfig
from blockfall.grid import to_strings
from blockfall.pieces import Piece
from blockfall.playfield import World
from blockfall.rng import BlockGenerator
from blockfall.types import PlayerState


@dataclass(frozen=True)
class State:
    """Immutable game state.

    Attributes:
        world (World): Grid of locked cells.
        position (Position): Top-left of the active block's bounding grid.
        block (Piece): Active falling piece.
        generator (BlockGenerator): Block stream positioned at the active block.
        config (GameConfig): Settings fixed for the game's lifetime.
        player_state (PlayerState): ``ALIVE`` or terminal ``DEAD``.
        score (int): Accumulated score; never decreases.
        delay (int): Consecutive grounded gravity steps.
        message (str | None): Optional status message (set on death).
    """

    world: World
    position: Position
    block: Piece
    generator: BlockGenerator
    config: GameConfig = DEFAULT_CONFIG

    # Status
    player_state: PlayerState = PlayerState.ALIVE
    score: int = 0
    delay: int = 0
    message: Optional[str] = None

    @property
    def next_block(self) -> Piece:
        """Piece that spawns after the active one locks."""
        return self.generator.next.value

    @property
    def is_dead(self) -> bool:
        return self.player_state == PlayerState.DEAD

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of non-default fields.

        Fields equal to their dataclass default are skipped to keep debug
        output short; the world is reported as rows of glyphs.

        Returns:
            PMap[str, Any]: Persistent map of field name to value.
        """
        description: PMap[str, Any] = pmap()
        for field in fields(self):
            value = getattr(self, field.name)
            if value == field.default:
                continue
            if field.name == "world":
                value = tuple(to_strings(value))
            description = description.set(field.name, value)
        return description
