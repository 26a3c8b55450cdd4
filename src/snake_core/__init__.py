"""snake-core: deterministic simulation core of a grid snake game."""

from snake_core.config import GameConfig, Palette
from snake_core.controls import InputFrame, direction_from_axes
from snake_core.engine import GameState, Score
from snake_core.free_cells import FreeCellSet
from snake_core.grid import Cell, Grid
from snake_core.models import GameOverReason, GamePhase, GameSnapshot
from snake_core.snake import Direction, Snake

__all__ = [
    "Cell",
    "Direction",
    "FreeCellSet",
    "GameConfig",
    "GameOverReason",
    "GamePhase",
    "GameSnapshot",
    "GameState",
    "Grid",
    "InputFrame",
    "Palette",
    "Score",
    "Snake",
    "direction_from_axes",
]
