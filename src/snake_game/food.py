"""Food placement by rejection sampling."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np

from snake_game.grid import GRID_SIZE, Position

logger = logging.getLogger(__name__)


class GridFullError(RuntimeError):
    """Raised when no empty cell is left for the food."""


class FoodPlacer:
    """Picks a uniformly random unoccupied cell.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    Candidates are drawn independently over the whole board and rejected
    while they land on the snake.
    """

    def __init__(
        self,
        grid_size: int = GRID_SIZE,
        rng: np.random.Generator | None = None,
    ) -> None:
        if grid_size < 1:
            raise ValueError("grid_size must be at least 1.")
        self.grid_size = grid_size
        self.rng = rng if rng is not None else np.random.default_rng()

    def place(self, occupied: Iterable[Position]) -> Position:
        """Return a cell that is not in *occupied*.

        Raises :class:`GridFullError` when every cell is taken.
        """
        taken = {Position(x, y) for x, y in occupied}
        size = self.grid_size
        filled = sum(
            1 for p in taken if 0 <= p.x < size and 0 <= p.y < size
        )
        if filled >= size * size:
            logger.info("Grid is full; no cell left for food.")
            raise GridFullError("No empty cell available for food.")

        while True:
            x, y = self.rng.integers(0, size, size=2)
            candidate = Position(int(x), int(y))
            if candidate not in taken:
                return candidate
