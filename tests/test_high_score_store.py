"""
Tests for the high score stores.
"""

import json
import logging

import pytest

from snakearena.services.high_score_store import (
    HighScoreStore,
    InMemoryHighScoreStore,
    JsonFileHighScoreStore,
)


class TestHighScoreStores:
    """Tests for the store interface and its adapters."""

    def test_base_is_abstract(self):
        """The base store raises NotImplementedError."""
        store = HighScoreStore()
        with pytest.raises(NotImplementedError):
            store.load_high_score()
        with pytest.raises(NotImplementedError):
            store.save_high_score(1)

    def test_in_memory(self):
        """The in-memory store keeps the last saved score."""
        store = InMemoryHighScoreStore()
        assert store.load_high_score() == 0
        store.save_high_score(7)
        assert store.load_high_score() == 7

    def test_json_missing_file(self, tmp_path):
        """A missing file reads as 0."""
        store = JsonFileHighScoreStore(tmp_path / "scores.json")
        assert store.load_high_score() == 0

    def test_json_save_and_load(self, tmp_path):
        """Saving writes a JSON object and creates parent directories."""
        path = tmp_path / "nested" / "scores.json"
        store = JsonFileHighScoreStore(path)

        store.save_high_score(12)

        with open(path) as f:
            assert json.load(f) == {"high_score": 12}
        assert JsonFileHighScoreStore(str(path)).load_high_score() == 12

    @pytest.mark.parametrize("content", ["not json", "[1, 2]", '{"high_score": "lots"}'])
    def test_json_corrupt_file(self, tmp_path, caplog, content):
        """A malformed file reads as 0 and logs a warning."""
        path = tmp_path / "scores.json"
        path.write_text(content)

        with caplog.at_level(logging.WARNING):
            assert JsonFileHighScoreStore(path).load_high_score() == 0

        assert "Could not read high score" in caplog.text
