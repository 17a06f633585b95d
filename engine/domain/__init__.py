"""
Domain entities for the snake arcade engine.

This module contains the core game entities that are independent of
the display and input surface (pygame window, fonts, event polling).
"""

from .constants import UP, DOWN, LEFT, RIGHT, ZERO, VALID_MOVES, Vector2
from .errors import GameError, StartupError, ConfigError, ResourceNotFoundError
from .shapes import Bounds, Square, Circle
from .history import DirectionHistory
from .snake import Snake
from .food import FoodCollection, RandomSource
from .game_state import GameState, GameStatus

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'ZERO', 'VALID_MOVES', 'Vector2',
    'GameError', 'StartupError', 'ConfigError', 'ResourceNotFoundError',
    'Bounds', 'Square', 'Circle',
    'DirectionHistory',
    'Snake',
    'FoodCollection', 'RandomSource',
    'GameState', 'GameStatus',
]
