"""Grid / map system."""

from __future__ import annotations

from typing import Iterable, Iterator

from kutulu_bot.core.enums import CELL_CHARS, CELL_SYMBOLS, CellKind
from kutulu_bot.core.models import Vector2
from kutulu_bot.errors import MapParseError


class Grid:
    """2D cell grid backed by a flat list, read-only once loaded."""

    __slots__ = ("width", "height", "_cells")

    def __init__(self, width: int, height: int, default: CellKind = CellKind.WALL) -> None:
        if width < 0 or height < 0:
            raise MapParseError(f"invalid map size {width}x{height}")
        self.width = width
        self.height = height
        self._cells: list[CellKind] = [default] * (width * height)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Grid:
        """Build a grid from map lines, sized by the first line."""
        rows = list(rows)
        width = len(rows[0]) if rows else 0
        grid = build_walls(width, len(rows))
        for index, line in enumerate(rows):
            load_row(grid, index, line)
        return grid

    # -- access --

    def in_bounds(self, pos: Vector2) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def cell(self, pos: Vector2) -> CellKind:
        if not self.in_bounds(pos):
            return CellKind.WALL
        return self._cells[pos.y * self.width + pos.x]

    def is_empty(self, pos: Vector2) -> bool:
        return self.cell(pos) == CellKind.EMPTY

    def rows(self) -> list[str]:
        return [
            "".join(CELL_SYMBOLS[c] for c in self._cells[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        ]

    def render(self) -> str:
        return "\n".join(self.rows())


def build_walls(width: int, height: int) -> Grid:
    """Return a *width* x *height* grid where every cell is a wall."""
    return Grid(width, height, default=CellKind.WALL)


def load_row(grid: Grid, row_index: int, characters: str) -> None:
    """Fill row *row_index* of *grid* from one map line.

    Raises MapParseError on an unknown character or a row that does not
    match the grid's dimensions.
    """
    if not 0 <= row_index < grid.height:
        raise MapParseError(f"row {row_index} outside map of height {grid.height}")
    if len(characters) != grid.width:
        raise MapParseError(
            f"row {row_index} has {len(characters)} cells, expected {grid.width}"
        )
    offset = row_index * grid.width
    for x, char in enumerate(characters):
        kind = CELL_CHARS.get(char)
        if kind is None:
            raise MapParseError(f"unrecognized cell {char!r} at ({x}, {row_index})")
        grid._cells[offset + x] = kind


def empty_cells(grid: Grid) -> Iterator[Vector2]:
    """Yield every EMPTY coordinate in row-major order."""
    width = grid.width
    for index, kind in enumerate(grid._cells):
        if kind == CellKind.EMPTY:
            yield Vector2(index % width, index // width)


def empty_cells_within(grid: Grid, origin: Vector2, radius: int) -> Iterator[Vector2]:
    """Yield EMPTY coordinates at Manhattan distance <= *radius* from *origin*."""
    for pos in empty_cells(grid):
        if origin.manhattan(pos) <= radius:
            yield pos
