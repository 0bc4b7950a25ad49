"""Tests for the Grid module."""

import numpy as np
import pytest

from snake_game.grid import CellType, Grid, Position


class TestPosition:
    def test_fields(self):
        pos = Position(3, 7)
        assert pos.x == 3
        assert pos.y == 7

    def test_equals_plain_tuple(self):
        assert Position(1, 2) == (1, 2)

    def test_shifted(self):
        assert Position(5, 5).shifted(1, 0) == Position(6, 5)
        assert Position(5, 5).shifted(0, -1) == Position(5, 4)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Position(0, 0).x = 1


class TestGridInit:
    def test_default_dimensions(self):
        grid = Grid()
        assert grid.size == 20
        assert grid.cells.shape == (20, 20)

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 4"):
            Grid(size=3)

    def test_all_cells_start_empty(self):
        grid = Grid(size=5)
        assert np.all(grid.cells == CellType.EMPTY)


class TestGridOperations:
    def test_set_and_get(self):
        grid = Grid(size=5)
        grid.set(Position(3, 1), CellType.SNAKE)
        assert grid.get(Position(3, 1)) == CellType.SNAKE
        # Row-major: y selects the row.
        assert grid.cells[1, 3] == CellType.SNAKE

    def test_in_bounds(self):
        grid = Grid(size=5)
        assert grid.in_bounds(Position(0, 0))
        assert grid.in_bounds(Position(4, 4))
        assert not grid.in_bounds(Position(-1, 0))
        assert not grid.in_bounds(Position(0, 5))
        assert not grid.in_bounds(Position(5, 0))

    def test_paint(self):
        grid = Grid(size=5)
        grid.set(Position(0, 0), CellType.FOOD)
        grid.paint([Position(2, 2), Position(1, 2)], Position(4, 4))
        assert grid.get(Position(0, 0)) == CellType.EMPTY
        assert grid.get(Position(2, 2)) == CellType.SNAKE
        assert grid.get(Position(1, 2)) == CellType.SNAKE
        assert grid.get(Position(4, 4)) == CellType.FOOD

    def test_paint_without_food(self):
        grid = Grid(size=4)
        grid.paint([Position(0, 0)], None)
        assert int(np.count_nonzero(grid.cells == CellType.FOOD)) == 0


class TestGridSerialization:
    def test_to_dict_structure(self):
        grid = Grid(size=5)
        d = grid.to_dict()
        assert d["width"] == 5
        assert d["height"] == 5
        assert len(d["cells"]) == 5
        assert len(d["cells"][0]) == 5

    def test_to_dict_reflects_state(self):
        grid = Grid(size=4)
        grid.set(Position(2, 1), CellType.FOOD)
        d = grid.to_dict()
        assert d["cells"][1][2] == CellType.FOOD
