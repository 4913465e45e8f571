"""
Player implementations for SnakeArena.

This module contains the player abstractions and implementations
that choose directions for computer-controlled snakes.
"""

from .base import Player
from .heuristic_player import HeuristicPlayer, decide
from .difficulty_registry import (
    AVAILABLE_DIFFICULTIES,
    DEFAULT_DIFFICULTY,
    DifficultyPreset,
    get_preset,
    list_presets,
)

__all__ = [
    'Player',
    'HeuristicPlayer',
    'decide',
    'AVAILABLE_DIFFICULTIES',
    'DEFAULT_DIFFICULTY',
    'DifficultyPreset',
    'get_preset',
    'list_presets',
]
