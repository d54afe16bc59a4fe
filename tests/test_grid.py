"""Tests for the grid model: loading, empty-cell queries, rendering."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from kutulu_bot.core.enums import CellKind
from kutulu_bot.core.grid import Grid, build_walls, empty_cells, empty_cells_within, load_row
from kutulu_bot.core.models import Vector2
from kutulu_bot.errors import MapParseError

MAP = [
    "#####",
    "#..w#",
    "#.#.#",
    "#...#",
    "#####",
]


def _grid(rows=MAP) -> Grid:
    return Grid.from_rows(rows)


class TestLoading:
    def test_build_walls_is_all_walls(self):
        g = build_walls(4, 3)
        assert (g.width, g.height) == (4, 3)
        for y in range(3):
            for x in range(4):
                assert g.cell(Vector2(x, y)) == CellKind.WALL

    def test_load_row_maps_every_character(self):
        g = build_walls(3, 1)
        load_row(g, 0, "#w.")
        assert g.cell(Vector2(0, 0)) == CellKind.WALL
        assert g.cell(Vector2(1, 0)) == CellKind.SPAWN
        assert g.cell(Vector2(2, 0)) == CellKind.EMPTY

    def test_unknown_character_is_fatal(self):
        g = build_walls(3, 1)
        with pytest.raises(MapParseError, match="unrecognized cell"):
            load_row(g, 0, "#x.")

    def test_short_row_is_rejected(self):
        g = build_walls(3, 2)
        with pytest.raises(MapParseError):
            load_row(g, 1, "..")

    def test_row_index_out_of_range(self):
        g = build_walls(2, 2)
        with pytest.raises(MapParseError):
            load_row(g, 2, "..")

    def test_out_of_bounds_reads_as_wall(self):
        g = _grid()
        assert g.cell(Vector2(-1, 0)) == CellKind.WALL
        assert g.cell(Vector2(5, 5)) == CellKind.WALL

    def test_render_round_trips_map_text(self):
        assert _grid().render() == "\n".join(MAP)


class TestEmptyCells:
    def test_returns_every_empty_cell_exactly_once(self):
        g = _grid()
        cells = list(empty_cells(g))
        expected = [
            Vector2(x, y)
            for y in range(g.height)
            for x in range(g.width)
            if g.cell(Vector2(x, y)) == CellKind.EMPTY
        ]
        assert cells == expected
        assert len(set(cells)) == len(cells)

    def test_spawn_points_are_not_empty(self):
        assert Vector2(3, 1) not in set(empty_cells(_grid()))

    def test_row_major_order(self):
        cells = list(empty_cells(_grid()))
        assert cells[:3] == [Vector2(1, 1), Vector2(2, 1), Vector2(1, 2)]

    def test_all_wall_grid_has_no_empty_cells(self):
        assert list(empty_cells(build_walls(3, 3))) == []

    def test_within_radius_filters_by_manhattan(self):
        g = _grid()
        origin = Vector2(1, 1)
        cells = list(empty_cells_within(g, origin, 2))
        assert cells == [Vector2(1, 1), Vector2(2, 1), Vector2(1, 2), Vector2(1, 3)]
        assert all(origin.manhattan(c) <= 2 for c in cells)

    def test_within_radius_is_repeatable(self):
        g = _grid()
        first = list(empty_cells_within(g, Vector2(2, 3), 4))
        second = list(empty_cells_within(g, Vector2(2, 3), 4))
        assert first == second

    def test_within_zero_radius_only_origin(self):
        g = _grid()
        assert list(empty_cells_within(g, Vector2(1, 1), 0)) == [Vector2(1, 1)]
        assert list(empty_cells_within(g, Vector2(0, 0), 0)) == []
