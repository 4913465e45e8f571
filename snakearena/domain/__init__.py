"""
Domain entities for the SnakeArena simulation core.

This module contains the value types and entities that are independent of
the session, the AI and any presentation layer.
"""

from .constants import (
    DEFAULT_GRID_SIZE,
    INITIAL_LENGTH,
    MAX_FOOD_ATTEMPTS,
    PLAYER_ID,
    AI_ID,
)
from .grid import (
    Direction,
    Grid,
    GridPosition,
    WrapPolicy,
    toroidal_distance,
    wrap,
)
from .snake import Snake
from .game_state import GameState

__all__ = [
    'DEFAULT_GRID_SIZE', 'INITIAL_LENGTH', 'MAX_FOOD_ATTEMPTS', 'PLAYER_ID', 'AI_ID',
    'Direction',
    'Grid',
    'GridPosition',
    'WrapPolicy',
    'toroidal_distance',
    'wrap',
    'Snake',
    'GameState',
]
