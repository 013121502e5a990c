"""Position component.

Immutable integer grid coordinates used for piece placement and grid
offsets. Row 0 is the top of the playfield; negative rows lie above it.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def add(self, other: "Position") -> "Position":
        """Return the component-wise sum of two positions."""
        return Position(self.x + other.x, self.y + other.y)

    def __add__(self, other: "Position") -> "Position":
        return self.add(other)


ORIGIN = Position(0, 0)
