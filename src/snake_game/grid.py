"""Grid coordinates and the painted cell board used for snapshots."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

GRID_SIZE = 20


class Position(NamedTuple):
    """An immutable ``(x, y)`` grid coordinate."""

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> Position:
        """Return the position offset by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2


class Grid:
    """NumPy-backed square board.

    Cells are indexed ``cells[y, x]`` so that each row of the array is one
    horizontal line of the board.
    """

    def __init__(self, size: int = GRID_SIZE) -> None:
        if size < 4:
            raise ValueError("Grid size must be at least 4.")
        self.size = size
        self.cells = np.zeros((size, size), dtype=np.int8)

    def clear(self) -> None:
        """Reset all cells to empty."""
        self.cells[:] = CellType.EMPTY

    def in_bounds(self, pos: Position) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def get(self, pos: Position) -> CellType:
        return CellType(self.cells[pos.y, pos.x])

    def set(self, pos: Position, cell_type: CellType) -> None:
        self.cells[pos.y, pos.x] = cell_type

    def paint(self, snake: Iterable[Position], food: Position | None) -> None:
        """Redraw the board from a snake body and a food cell."""
        self.clear()
        if food is not None:
            self.set(food, CellType.FOOD)
        for seg in snake:
            self.set(seg, CellType.SNAKE)

    def to_dict(self) -> dict:
        """Serialize grid state to a dictionary."""
        return {
            "width": self.size,
            "height": self.size,
            "cells": self.cells.tolist(),
        }
