"""
Configuration for a SnakeArena session.

Settings are layered, later layers winning:
  1) GameConfig defaults
  2) an optional YAML file (top-level keys or a ``game:`` section)
  3) environment variables, including a ``.env`` file loaded by python-dotenv

Environment variables:
  SNAKE_GRID_SIZE, SNAKE_WRAP_POLICY, SNAKE_HUMAN_INTERVAL, SNAKE_AI_INTERVAL,
  SNAKE_DIFFICULTY, SNAKE_INITIAL_LENGTH, SNAKE_SEED
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

from snakearena.domain.constants import (
    AI_MOVE_INTERVAL,
    DEFAULT_GRID_SIZE,
    INITIAL_LENGTH,
    MAX_FOOD_ATTEMPTS,
    MIN_GRID_SIZE,
    MIN_MOVE_INTERVAL,
    PLAYER_MOVE_INTERVAL,
    SPEEDUP_STEP,
)
from snakearena.domain.grid import Grid, WrapPolicy
from snakearena.players.difficulty_registry import DEFAULT_DIFFICULTY, get_preset

logger = logging.getLogger(__name__)

ENV_VARS = {
    "SNAKE_GRID_SIZE": ("grid_size", int),
    "SNAKE_WRAP_POLICY": ("wrap_policy", str),
    "SNAKE_HUMAN_INTERVAL": ("human_move_interval", float),
    "SNAKE_AI_INTERVAL": ("ai_move_interval", float),
    "SNAKE_DIFFICULTY": ("difficulty", str),
    "SNAKE_INITIAL_LENGTH": ("initial_length", int),
    "SNAKE_SEED": ("seed", int),
}


@dataclass(frozen=True)
class GameConfig:
    grid_size: int = DEFAULT_GRID_SIZE
    wrap_policy: WrapPolicy = WrapPolicy.WRAP
    human_move_interval: float = PLAYER_MOVE_INTERVAL
    ai_move_interval: float = AI_MOVE_INTERVAL
    difficulty: str = DEFAULT_DIFFICULTY
    initial_length: int = INITIAL_LENGTH
    max_food_attempts: int = MAX_FOOD_ATTEMPTS
    # 0 disables the speed-up rule
    speedup_every: int = 0
    speedup_step: float = SPEEDUP_STEP
    min_move_interval: float = MIN_MOVE_INTERVAL
    seed: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.wrap_policy, WrapPolicy):
            object.__setattr__(self, "wrap_policy", WrapPolicy.from_str(self.wrap_policy))

    @property
    def grid(self) -> Grid:
        return Grid(self.grid_size, self.wrap_policy)

    @property
    def effective_initial_length(self) -> int:
        """Initial body length, capped so the two start bodies never overlap."""
        return max(1, min(self.initial_length, self.grid_size // 4 + 1))

    def validate(self) -> "GameConfig":
        """
        Check every setting.

        Returns:
            self, so calls can be chained.

        Raises:
            ValueError: If a setting is out of range.
        """
        if self.grid_size < MIN_GRID_SIZE:
            raise ValueError(f"grid_size must be at least {MIN_GRID_SIZE}, got {self.grid_size}")
        if self.human_move_interval <= 0:
            raise ValueError("human_move_interval must be positive")
        if self.ai_move_interval <= 0:
            raise ValueError("ai_move_interval must be positive")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1")
        if self.max_food_attempts < 1:
            raise ValueError("max_food_attempts must be at least 1")
        if self.speedup_every < 0:
            raise ValueError("speedup_every cannot be negative")
        if self.speedup_step < 0:
            raise ValueError("speedup_step cannot be negative")
        if self.min_move_interval <= 0:
            raise ValueError("min_move_interval must be positive")
        get_preset(self.difficulty)
        return self

    def with_overrides(self, **overrides: Any) -> "GameConfig":
        """Return a copy with the non-None overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def _load_yaml_settings(path: Union[str, Path]) -> Dict[str, Any]:
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping")

    settings = data.get("game", data)
    known = {f.name for f in fields(GameConfig)}
    unknown = set(settings) - known
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(sorted(unknown))}")
    return dict(settings)


def _load_env_settings() -> Dict[str, Any]:
    settings: Dict[str, Any] = {}
    for env_name, (field_name, cast) in ENV_VARS.items():
        raw = os.getenv(env_name)
        if raw is None or raw.strip() == "":
            continue
        try:
            settings[field_name] = cast(raw.strip())
        except ValueError as e:
            raise ValueError(f"Invalid value for {env_name}: {raw!r}") from e
    return settings


def load_config(path: Optional[Union[str, Path]] = None, use_env: bool = True) -> GameConfig:
    """
    Build a validated GameConfig from defaults, an optional YAML file and the environment.

    Args:
        path: Optional YAML file to read.
        use_env: Whether to apply ``.env`` / environment variable overrides.

    Returns:
        A validated GameConfig.
    """
    settings: Dict[str, Any] = {}

    if path is not None:
        settings.update(_load_yaml_settings(path))
        logger.debug("Loaded config file %s", path)

    if use_env:
        load_dotenv()
        settings.update(_load_env_settings())

    return GameConfig(**settings).validate()
