"""Game configuration with JSON round-tripping."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snake_game.grid import GRID_SIZE
from snake_game.snake import Direction

logger = logging.getLogger(__name__)

GAME_SPEED_MS = 150
_MIN_TICK_INTERVAL_MS = 10


@dataclass(frozen=True)
class GameConfig:
    """Board size, timer period, and the literal initial game state."""

    grid_size: int = GRID_SIZE
    tick_interval_ms: int = GAME_SPEED_MS
    initial_snake: tuple[tuple[int, int], ...] = ((10, 10),)
    initial_direction: str = "right"
    initial_food: tuple[int, int] = (15, 15)
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_size < 4:
            raise ValueError("grid_size must be at least 4.")
        if self.tick_interval_ms < _MIN_TICK_INTERVAL_MS:
            raise ValueError(
                f"tick_interval_ms must be at least {_MIN_TICK_INTERVAL_MS}."
            )
        if not self.initial_snake:
            raise ValueError("initial_snake must contain at least one segment.")
        Direction.from_name(self.initial_direction)

        seen: set[tuple[int, int]] = set()
        for seg in self.initial_snake:
            if not self._fits(seg):
                raise ValueError(f"initial_snake segment {seg} is off the grid.")
            if seg in seen:
                raise ValueError("initial_snake overlaps itself.")
            seen.add(seg)

        if not self._fits(self.initial_food):
            raise ValueError("initial_food is off the grid.")
        if self.initial_food in seen:
            raise ValueError("initial_food overlaps initial_snake.")

    def _fits(self, pos: tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    @property
    def direction(self) -> Direction:
        return Direction.from_name(self.initial_direction)

    @property
    def tick_interval(self) -> float:
        """Timer period in seconds."""
        return self.tick_interval_ms / 1000.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        d = asdict(self)
        d["initial_snake"] = [list(seg) for seg in self.initial_snake]
        d["initial_food"] = list(self.initial_food)
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        data = dict(raw)
        if "initial_snake" in data:
            data["initial_snake"] = tuple(
                (int(x), int(y)) for x, y in data["initial_snake"]
            )
        if "initial_food" in data:
            x, y = data["initial_food"]
            data["initial_food"] = (int(x), int(y))
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
