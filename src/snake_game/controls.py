"""Translation of key presses into movement commands."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

from snake_game.snake import Direction

if TYPE_CHECKING:
    from snake_game.engine import GameEngine

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    """Platform-independent movement commands."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"

    @property
    def direction(self) -> Direction:
        return _COMMAND_DIRECTIONS[self]


_COMMAND_DIRECTIONS: dict[Command, Direction] = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}

# Browser ``KeyboardEvent.key`` values.
KEY_BINDINGS: dict[str, Command] = {
    "ArrowUp": Command.MOVE_UP,
    "ArrowDown": Command.MOVE_DOWN,
    "ArrowLeft": Command.MOVE_LEFT,
    "ArrowRight": Command.MOVE_RIGHT,
}


def translate_key(key: str) -> Command | None:
    """Return the command bound to *key*, or ``None`` for any other key."""
    return KEY_BINDINGS.get(key)


def parse_command(name: str) -> Command | None:
    """Look up a command by its value, e.g. ``"move_up"``."""
    try:
        return Command(name.lower())
    except ValueError:
        return None


class InputMapper:
    """Writes the direction of translated key presses into an engine."""

    def __init__(self, engine: GameEngine) -> None:
        self.engine = engine

    def apply(self, command: Command) -> None:
        """Overwrite the pending direction; the latest call before a tick wins."""
        self.engine.set_direction(command.direction)

    def press(self, key: str) -> Command | None:
        """Handle a key press. Returns the applied command, if any."""
        command = translate_key(key)
        if command is None:
            logger.debug("Ignoring key %r.", key)
            return None
        self.apply(command)
        return command
