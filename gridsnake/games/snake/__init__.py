"""
Snake game module for gridsnake.

The pygame renderer lives in gridsnake.games.snake.renderer and is not
imported here, so the engine can run headless.
"""

from .grid import Cell, GridModel
from .engine import SnakeEngine, GameSession, GameSnapshot, Direction, GameOverReason
from .config import SnakeConfig
from .controller import GameController

__all__ = [
    'Cell',
    'GridModel',
    'SnakeEngine',
    'GameSession',
    'GameSnapshot',
    'Direction',
    'GameOverReason',
    'SnakeConfig',
    'GameController',
]
