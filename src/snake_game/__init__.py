"""Snake Game: grid snake engine with a timed tick loop."""

from snake_game.config import GameConfig
from snake_game.controller import GameController
from snake_game.controls import Command, InputMapper, translate_key
from snake_game.engine import Collision, GameEngine
from snake_game.food import FoodPlacer, GridFullError
from snake_game.grid import GRID_SIZE, Grid, Position
from snake_game.snake import Direction, Snake

__all__ = [
    "GRID_SIZE",
    "Collision",
    "Command",
    "Direction",
    "FoodPlacer",
    "GameConfig",
    "GameController",
    "GameEngine",
    "Grid",
    "GridFullError",
    "InputMapper",
    "Position",
    "Snake",
    "translate_key",
]
