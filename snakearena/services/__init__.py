"""
Services used by the session: food placement and high score stores.
"""

from .food_spawner import FoodSpawner
from .high_score_store import HighScoreStore, InMemoryHighScoreStore, JsonFileHighScoreStore

__all__ = [
    'FoodSpawner',
    'HighScoreStore',
    'InMemoryHighScoreStore',
    'JsonFileHighScoreStore',
]
