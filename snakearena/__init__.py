"""
SnakeArena - simulation core for a grid snake game with an optional AI opponent.
"""

from snakearena.config import GameConfig, load_config
from snakearena.domain import Direction, GameState, Grid, GridPosition, Snake, WrapPolicy, wrap
from snakearena.engine import MoveResult, collision_reason, move, set_pending_direction
from snakearena.players import HeuristicPlayer, decide, get_preset
from snakearena.services import FoodSpawner, HighScoreStore, InMemoryHighScoreStore
from snakearena.session import GameMode, Session, SessionState

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "FoodSpawner",
    "GameConfig",
    "GameMode",
    "GameState",
    "Grid",
    "GridPosition",
    "HeuristicPlayer",
    "HighScoreStore",
    "InMemoryHighScoreStore",
    "MoveResult",
    "Session",
    "SessionState",
    "Snake",
    "WrapPolicy",
    "collision_reason",
    "decide",
    "get_preset",
    "load_config",
    "move",
    "set_pending_direction",
    "wrap",
]
