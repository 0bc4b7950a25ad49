"""Fixed-step game engine composing grid, snake, and food logic."""

from __future__ import annotations

import enum
import logging

import numpy as np

from snake_game.config import GameConfig
from snake_game.food import FoodPlacer, GridFullError
from snake_game.grid import Grid, Position
from snake_game.snake import Direction, Snake

logger = logging.getLogger(__name__)


class Collision(enum.Enum):
    """Why a game ended."""

    BOUNDARY = "boundary"
    SELF = "self"
    GRID_FULL = "grid_full"


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine is the authoritative game state. Each call to :meth:`tick`
    advances the game by one cell and returns the updated state dictionary.
    The direction may be overwritten at any time between ticks; the value
    held when :meth:`tick` starts is the one applied.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(
            self.config.seed,
        )
        self.grid = Grid(self.config.grid_size)
        self.food_placer = FoodPlacer(self.config.grid_size, rng=self.rng)
        self.reset()

    def reset(self) -> dict:
        """Restore the initial snake, direction, food, and score."""
        self.snake = Snake(self.config.initial_snake, self.config.direction)
        self.food: Position = Position(*self.config.initial_food)
        self.score = 0
        self.tick_count = 0
        self.game_over = False
        self.collision: Collision | None = None
        logger.debug("Game reset.")
        return self.get_state()

    @property
    def direction(self) -> Direction:
        return self.snake.direction

    def set_direction(self, direction: Direction) -> None:
        """Overwrite the direction used by the next tick.

        No reversal check happens here; turning back into the body is
        resolved by the tick as a self-collision.
        """
        self.snake.direction = direction

    def tick(self) -> dict:
        """Advance the game by one cell.

        Returns the full game state as a serializable dict.
        """
        if self.game_over:
            return self.get_state()

        new_head = self.snake.next_head()

        if not self.grid.in_bounds(new_head):
            self._end(Collision.BOUNDARY)
            return self.get_state()

        # The current tail still counts: it has not moved away yet.
        if self.snake.occupies(new_head):
            self._end(Collision.SELF)
            return self.get_state()

        ate = new_head == self.food
        self.snake.advance(new_head, grow=ate)
        self.tick_count += 1

        if ate:
            self.score += 1
            try:
                self.food = self.food_placer.place(self.snake.body)
            except GridFullError:
                self._end(Collision.GRID_FULL)

        return self.get_state()

    @property
    def won(self) -> bool:
        return self.collision == Collision.GRID_FULL

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        self.grid.paint(self.snake.body, None if self.won else self.food)
        return {
            "tick": self.tick_count,
            "score": self.score,
            "game_over": self.game_over,
            "collision": self.collision.value if self.collision else None,
            "direction": list(self.snake.direction.value),
            "snake": self.snake.to_list(),
            "food": None if self.won else [self.food.x, self.food.y],
            "grid": self.grid.to_dict(),
        }

    def _end(self, collision: Collision) -> None:
        """Freeze the game with the given outcome."""
        self.game_over = True
        self.collision = collision
        if collision == Collision.GRID_FULL:
            logger.info(
                "Board filled at tick %d with score %d.",
                self.tick_count, self.score,
            )
        else:
            # The failed move is not committed but still uses up the tick.
            self.tick_count += 1
            logger.info(
                "Snake hit %s at tick %d with score %d.",
                collision.value, self.tick_count, self.score,
            )
