"""Piece catalog and rotation.

Every piece is one rotation state of one of the seven tetromino kinds, stored
as a tight bounding :class:`Grid`. The catalog holds all ``7 x 4`` states and
rotation simply looks up the neighbouring state, so rotation is total, pure
and closed over the catalog:

* ``piece.rotate_cw.rotate_ccw == piece``
* four quarter turns in either direction return ``piece``

Because bounding boxes are tight, a rotation may change width and height; the
rotated shape keeps the same top-left position when applied in-game.
"""

from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Dict, List, Sequence, Tuple

from pyrsistent import pmap
from pyrsistent.typing import PMap

from blockfall.components import Pixel
from blockfall.grid import Grid, grid_from_rows
from blockfall.types import Gfx, PieceRotation

ROTATIONS = 4


class PieceKind(StrEnum):
    """The seven tetromino kinds."""

    I = auto()  # noqa: E741
    J = auto()
    L = auto()
    O = auto()  # noqa: E741
    S = auto()
    T = auto()
    Z = auto()


# Spawn orientation of each kind.
BASE_SHAPES: Dict[PieceKind, Tuple[str, ...]] = {
    PieceKind.I: ("XXXX",),
    PieceKind.J: ("X..", "XXX"),
    PieceKind.L: ("..X", "XXX"),
    PieceKind.O: ("XX", "XX"),
    PieceKind.S: (".XX", "XX."),
    PieceKind.T: (".X.", "XXX"),
    PieceKind.Z: ("XX.", ".XX"),
}

PIECE_GFX: Dict[PieceKind, Gfx] = {
    PieceKind.I: Gfx.CYAN,
    PieceKind.J: Gfx.BLUE,
    PieceKind.L: Gfx.ORANGE,
    PieceKind.O: Gfx.YELLOW,
    PieceKind.S: Gfx.GREEN,
    PieceKind.T: Gfx.PURPLE,
    PieceKind.Z: Gfx.RED,
}

BLOCK_GLYPH = "#"


@dataclass(frozen=True)
class Piece:
    """One rotation state of a piece kind.

    Attributes:
        kind: Piece kind.
        rotation: Quarter turns clockwise from the spawn orientation (0-3).
        pieces: Tight bounding grid of the shape.
    """

    kind: PieceKind
    rotation: PieceRotation
    pieces: Grid

    @property
    def width(self) -> int:
        return self.pieces.width

    @property
    def height(self) -> int:
        return self.pieces.height

    @property
    def rotate_cw(self) -> "Piece":
        """Catalog member one quarter turn clockwise."""
        return PIECE_CATALOG[(self.kind, (self.rotation + 1) % ROTATIONS)]

    @property
    def rotate_ccw(self) -> "Piece":
        """Catalog member one quarter turn counter-clockwise."""
        return PIECE_CATALOG[(self.kind, (self.rotation - 1) % ROTATIONS)]


def rotate_rows_cw(rows: Sequence[str]) -> Tuple[str, ...]:
    """Rotate a row-string shape a quarter turn clockwise."""
    return tuple("".join(column) for column in zip(*reversed(rows)))


def _build_catalog() -> PMap[Tuple[PieceKind, PieceRotation], Piece]:
    catalog: Dict[Tuple[PieceKind, PieceRotation], Piece] = {}
    for kind, rows in BASE_SHAPES.items():
        pixel = Pixel(BLOCK_GLYPH, PIECE_GFX[kind])
        for rotation in range(ROTATIONS):
            catalog[(kind, rotation)] = Piece(
                kind=kind, rotation=rotation, pieces=grid_from_rows(rows, pixel)
            )
            rows = rotate_rows_cw(rows)
    return pmap(catalog)


PIECE_CATALOG: PMap[Tuple[PieceKind, PieceRotation], Piece] = _build_catalog()
"""Every piece state keyed by ``(kind, rotation)``."""

# Index order used to map generator values to kinds.
SPAWN_ORDER: Tuple[PieceKind, ...] = tuple(PieceKind)


def spawn_piece(kind: PieceKind) -> Piece:
    """Return the spawn orientation of ``kind``."""
    return PIECE_CATALOG[(kind, 0)]


def piece_for_value(value: int) -> Piece:
    """Map a generator value to a spawn piece.

    Only the high 16 bits of the 32-bit value select the kind.
    """
    return spawn_piece(SPAWN_ORDER[(value >> 16) % len(SPAWN_ORDER)])


def all_pieces() -> List[Piece]:
    """All catalog members in kind/rotation order."""
    return [PIECE_CATALOG[(kind, r)] for kind in SPAWN_ORDER for r in range(ROTATIONS)]
