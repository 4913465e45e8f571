"""
Tests for config.py - GameConfig validation and layered loading.
"""

import pytest

from snakearena.config import GameConfig, load_config
from snakearena.domain.grid import WrapPolicy


class TestGameConfig:
    """Tests for the GameConfig dataclass."""

    def test_defaults(self):
        """Defaults match the classic game."""
        config = GameConfig()
        assert config.grid_size == 20
        assert config.wrap_policy is WrapPolicy.WRAP
        assert config.human_move_interval == pytest.approx(0.12)
        assert config.ai_move_interval == pytest.approx(0.15)
        assert config.difficulty == "medium"
        assert config.initial_length == 5
        assert config.max_food_attempts == 100
        assert config.speedup_every == 0
        assert config.seed is None
        assert config.validate() is config

    def test_wrap_policy_from_string(self):
        """A string wrap policy is converted to the enum."""
        assert GameConfig(wrap_policy="bounded").wrap_policy is WrapPolicy.BOUNDED
        assert GameConfig(wrap_policy="bounded").grid.wrap_policy is WrapPolicy.BOUNDED

    def test_unknown_wrap_policy(self):
        """Unknown wrap policies are rejected on construction."""
        with pytest.raises(ValueError, match="Unknown wrap policy"):
            GameConfig(wrap_policy="mirror")

    @pytest.mark.parametrize("overrides,message", [
        ({"grid_size": 4}, "grid_size"),
        ({"human_move_interval": 0}, "human_move_interval"),
        ({"ai_move_interval": -1.0}, "ai_move_interval"),
        ({"initial_length": 0}, "initial_length"),
        ({"max_food_attempts": 0}, "max_food_attempts"),
        ({"speedup_every": -1}, "speedup_every"),
        ({"min_move_interval": 0}, "min_move_interval"),
        ({"difficulty": "nightmare"}, "Unknown difficulty"),
    ])
    def test_validation_errors(self, overrides, message):
        """Out-of-range settings raise ValueError naming the setting."""
        with pytest.raises(ValueError, match=message):
            GameConfig(**overrides).validate()

    def test_effective_initial_length(self):
        """The start length is capped on small grids."""
        assert GameConfig().effective_initial_length == 5
        assert GameConfig(grid_size=5).effective_initial_length == 2
        assert GameConfig(grid_size=12, initial_length=3).effective_initial_length == 3

    def test_with_overrides_skips_none(self):
        """None overrides leave the field untouched."""
        config = GameConfig(grid_size=15)
        updated = config.with_overrides(grid_size=None, seed=9, difficulty="hard")
        assert updated.grid_size == 15
        assert updated.seed == 9
        assert updated.difficulty == "hard"
        assert config.seed is None


class TestLoadConfig:
    """Tests for load_config()."""

    def test_no_sources(self):
        """Without a file or environment the defaults are returned."""
        assert load_config(use_env=False) == GameConfig()

    def test_yaml_game_section(self, tmp_path):
        """Settings can live under a game: section."""
        path = tmp_path / "snake.yaml"
        path.write_text("game:\n  grid_size: 30\n  wrap_policy: bounded\n  seed: 4\n")

        config = load_config(path, use_env=False)

        assert config.grid_size == 30
        assert config.wrap_policy is WrapPolicy.BOUNDED
        assert config.seed == 4

    def test_yaml_top_level_keys(self, tmp_path):
        """Settings can also be top-level keys."""
        path = tmp_path / "snake.yaml"
        path.write_text("difficulty: easy\nhuman_move_interval: 0.2\n")

        config = load_config(path, use_env=False)

        assert config.difficulty == "easy"
        assert config.human_move_interval == pytest.approx(0.2)

    def test_empty_yaml(self, tmp_path):
        """An empty file changes nothing."""
        path = tmp_path / "snake.yaml"
        path.write_text("")
        assert load_config(path, use_env=False) == GameConfig()

    def test_unknown_yaml_key(self, tmp_path):
        """Typos in the config file are reported."""
        path = tmp_path / "snake.yaml"
        path.write_text("grid_sise: 30\n")
        with pytest.raises(ValueError, match="grid_sise"):
            load_config(path, use_env=False)

    def test_yaml_must_be_mapping(self, tmp_path):
        """A YAML list is not a config."""
        path = tmp_path / "snake.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path, use_env=False)

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        """Environment variables win over the file."""
        monkeypatch.chdir(tmp_path)
        path = tmp_path / "snake.yaml"
        path.write_text("game:\n  grid_size: 30\n  difficulty: easy\n")
        monkeypatch.setenv("SNAKE_GRID_SIZE", "25")
        monkeypatch.setenv("SNAKE_AI_INTERVAL", "0.3")
        monkeypatch.setenv("SNAKE_SEED", "11")

        config = load_config(path)

        assert config.grid_size == 25
        assert config.difficulty == "easy"
        assert config.ai_move_interval == pytest.approx(0.3)
        assert config.seed == 11

    def test_blank_env_ignored(self, tmp_path, monkeypatch):
        """Empty environment values are skipped."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SNAKE_GRID_SIZE", "  ")
        assert load_config().grid_size == 20

    def test_bad_env_value(self, tmp_path, monkeypatch):
        """Unparseable environment values name the variable."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SNAKE_GRID_SIZE", "huge")
        with pytest.raises(ValueError, match="SNAKE_GRID_SIZE"):
            load_config()

    def test_env_ignored_when_disabled(self, monkeypatch):
        """use_env=False skips the environment entirely."""
        monkeypatch.setenv("SNAKE_GRID_SIZE", "25")
        assert load_config(use_env=False).grid_size == 20

    def test_loaded_config_is_validated(self, tmp_path):
        """Invalid values from the file fail validation."""
        path = tmp_path / "snake.yaml"
        path.write_text("grid_size: 3\n")
        with pytest.raises(ValueError, match="grid_size"):
            load_config(path, use_env=False)
