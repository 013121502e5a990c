"""Game configuration.

All tunable numbers live here as named constants and are bundled into the
frozen :class:`GameConfig` carried by every :class:`blockfall.state.State`.

The optional rules (``lock_delay``, ``detect_top_out``, ``clear_lines``) are
off in :data:`DEFAULT_CONFIG`, which reproduces the core game exactly: pieces
only lock on hard drop, the player never dies and the score stays at zero.
The ``"classic"`` preset in :data:`CONFIG_REGISTRY` turns them all on.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from blockfall.rng import INITIAL_SEED

WORLD_WIDTH = 10
WORLD_HEIGHT = 20
DEATH_ZONE_HEIGHT = 2

# Minimum world size that fits every piece orientation.
MIN_WORLD_SIZE = 4

STANDARD_DELAY = 1
"""Grounded steps allowed before a piece locks automatically. Movement resets the delay."""

# Score for clearing 1, 2, 3 or 4 rows at once.
LINE_CLEAR_SCORES: Tuple[int, ...] = (0, 40, 100, 300, 1200)


@dataclass(frozen=True)
class GameConfig:
    """Immutable game settings.

    Attributes:
        width (int): World width in cells.
        height (int): World height in cells.
        seed (int): Initial block generator seed.
        death_zone_height (int): Rows at the top of the world forming the death zone.
        lock_delay (int | None): Grounded steps before auto-lock; ``None`` disables auto-lock.
        detect_top_out (bool): Enter ``DEAD`` on a blocked spawn or cells locked in the death zone.
        clear_lines (bool): Remove full rows after locking and award score.
    """

    width: int = WORLD_WIDTH
    height: int = WORLD_HEIGHT
    seed: int = INITIAL_SEED
    death_zone_height: int = DEATH_ZONE_HEIGHT
    lock_delay: Optional[int] = None
    detect_top_out: bool = False
    clear_lines: bool = False

    def __post_init__(self) -> None:
        if self.width < MIN_WORLD_SIZE or self.height < MIN_WORLD_SIZE:
            raise ValueError(
                f"World must be at least {MIN_WORLD_SIZE}x{MIN_WORLD_SIZE}, "
                f"got {self.width}x{self.height}"
            )
        if not 0 <= self.death_zone_height < self.height:
            raise ValueError(
                f"death_zone_height must be in [0, {self.height}), got {self.death_zone_height}"
            )
        if self.lock_delay is not None and self.lock_delay < 0:
            raise ValueError(f"lock_delay must be non-negative, got {self.lock_delay}")


DEFAULT_CONFIG = GameConfig()

CLASSIC_CONFIG = GameConfig(
    lock_delay=STANDARD_DELAY,
    detect_top_out=True,
    clear_lines=True,
)

CONFIG_REGISTRY: Dict[str, GameConfig] = {
    "default": DEFAULT_CONFIG,
    "classic": CLASSIC_CONFIG,
}
"""Named configuration presets. Callers may add their own entries."""


def get_config(name: str) -> GameConfig:
    """Look up a preset by name.

    Raises:
        ValueError: If ``name`` is not registered.
    """
    if name not in CONFIG_REGISTRY:
        raise ValueError(
            f"Unknown config '{name}', expected one of {sorted(CONFIG_REGISTRY)}"
        )
    return CONFIG_REGISTRY[name]
