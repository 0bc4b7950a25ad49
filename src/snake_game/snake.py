"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable

from snake_game.grid import Position


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``y`` grows downward, so ``UP`` decrements it.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


class Snake:
    """A snake represented as an ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The snake does not
    filter reversals: a move back into the neck is caught by the engine as
    a self-collision.
    """

    def __init__(
        self,
        segments: Iterable[tuple[int, int]],
        direction: Direction = Direction.RIGHT,
    ) -> None:
        self.body: deque[Position] = deque(Position(x, y) for x, y in segments)
        if not self.body:
            raise ValueError("Snake length must be at least 1.")
        self.direction = direction

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Position:
        return self.body[-1]

    def next_head(self) -> Position:
        """Compute the next head position without moving."""
        dx, dy = self.direction.value
        return self.head.shifted(dx, dy)

    def advance(self, new_head: Position, grow: bool = False) -> Position | None:
        """Push *new_head* onto the body.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(new_head)
        if grow:
            return None
        return self.body.pop()

    def occupies(self, pos: Position) -> bool:
        """Check whether the snake occupies a given cell."""
        return pos in self.body

    def to_list(self) -> list[list[int]]:
        return [[seg.x, seg.y] for seg in self.body]
