"""Immutable fixed-size cell grid.

A :class:`Grid` is a ``width x height`` buffer of :class:`Pixel` values stored
as a persistent vector of row vectors. Grids are value objects: every drawing
helper in this module returns a *new* grid and leaves its inputs untouched, so
pieces, the world and render buffers can be shared freely between states.

Coordinates follow :class:`Position`: ``x`` is the column, ``y`` the row, with
``(0, 0)`` at the top-left.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from blockfall.components import EMPTY_PIXEL, Pixel, Position, is_empty

EMPTY_CHARS = (" ", ".")

# Lookups outside a grid report this occupied cell.
OUT_OF_BOUNDS_PIXEL = Pixel("#")

PixelFn = Callable[[Pixel], Pixel]


@dataclass(frozen=True)
class Grid:
    """Rectangular cell buffer.

    Attributes:
        width (int): Number of columns.
        height (int): Number of rows.
        cells (PVector[PVector[Pixel]]): Rows of cells, ``cells[y][x]``.
    """

    width: int
    height: int
    cells: PVector[PVector[Pixel]]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Grid size must be non-negative: {self.width}x{self.height}")
        if len(self.cells) != self.height or any(
            len(row) != self.width for row in self.cells
        ):
            raise ValueError(
                f"Grid cells do not match declared size {self.width}x{self.height}"
            )

    def in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the grid rectangle."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, pos: Position) -> Optional[Pixel]:
        """Return the cell at ``pos`` or ``None`` when outside the grid."""
        if not self.in_bounds(pos):
            return None
        return self.cells[pos.y][pos.x]


def empty_grid(width: int, height: int, fill: Pixel = EMPTY_PIXEL) -> Grid:
    """Create a grid with every cell set to ``fill``."""
    row = pvector([fill] * max(width, 0))
    return Grid(width, height, pvector([row] * max(height, 0)))


def grid_from_rows(rows: Sequence[str], pixel: Optional[Pixel] = None) -> Grid:
    """Build a grid from equal-length strings.

    ``.`` and space are empty cells. Any other character is occupied: it maps
    to ``pixel`` if given, otherwise to ``Pixel(char)``.

    Raises:
        ValueError: If the rows are not all the same length.
    """
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("All grid rows must have the same length")
    cells = pvector(
        pvector(
            EMPTY_PIXEL if char in EMPTY_CHARS else (pixel or Pixel(char))
            for char in row
        )
        for row in rows
    )
    return Grid(width, len(rows), cells)


def cell_at(grid: Grid, pos: Position) -> Pixel:
    """Return the cell at ``pos``; positions outside the grid are occupied."""
    pixel = grid.get(pos)
    return OUT_OF_BOUNDS_PIXEL if pixel is None else pixel


def is_occupied(grid: Grid, pos: Position) -> bool:
    """Return True if the cell at ``pos`` is non-empty or out of bounds."""
    return not is_empty(cell_at(grid, pos))


def occupied_cells(grid: Grid) -> Iterator[Tuple[Position, Pixel]]:
    """Yield ``(position, pixel)`` for every non-empty cell, row-major."""
    for y, row in enumerate(grid.cells):
        for x, pixel in enumerate(row):
            if not is_empty(pixel):
                yield Position(x, y), pixel


def _rows(grid: Grid) -> List[List[Pixel]]:
    return [list(row) for row in grid.cells]


def _from_rows(grid: Grid, rows: List[List[Pixel]]) -> Grid:
    return Grid(grid.width, grid.height, pvector(pvector(row) for row in rows))


def draw_grid(origin: Position, source: Grid, target: Grid) -> Grid:
    """Overlay the non-empty cells of ``source`` onto ``target`` at ``origin``.

    Empty source cells are transparent. Cells landing outside ``target`` are
    clipped.
    """
    rows = _rows(target)
    changed = False
    for offset, pixel in occupied_cells(source):
        pos = origin.add(offset)
        if target.in_bounds(pos):
            rows[pos.y][pos.x] = pixel
            changed = True
    return _from_rows(target, rows) if changed else target


def draw_rect(
    origin: Position, width: int, height: int, pixel: Pixel, target: Grid
) -> Grid:
    """Fill a ``width x height`` rectangle at ``origin`` with ``pixel`` (clipped)."""
    rows = _rows(target)
    for y in range(origin.y, origin.y + height):
        for x in range(origin.x, origin.x + width):
            if target.in_bounds(Position(x, y)):
                rows[y][x] = pixel
    return _from_rows(target, rows)


def draw_rect_outline(
    origin: Position, width: int, height: int, pixel: Pixel, target: Grid
) -> Grid:
    """Draw only the border of a ``width x height`` rectangle (clipped)."""
    rows = _rows(target)
    right = origin.x + width - 1
    bottom = origin.y + height - 1
    for y in range(origin.y, origin.y + height):
        for x in range(origin.x, origin.x + width):
            on_border = x in (origin.x, right) or y in (origin.y, bottom)
            if on_border and target.in_bounds(Position(x, y)):
                rows[y][x] = pixel
    return _from_rows(target, rows)


def fmap(fn: PixelFn, grid: Grid) -> Grid:
    """Apply ``fn`` to every cell, preserving dimensions."""
    return _from_rows(grid, [[fn(pixel) for pixel in row] for row in grid.cells])


def to_strings(grid: Grid) -> List[str]:
    """Return the grid as rows of glyphs (debug aid and text rendering)."""
    return ["".join(pixel.value for pixel in row) for row in grid.cells]
