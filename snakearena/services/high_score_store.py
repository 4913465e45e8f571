"""
High score stores.

The session only talks to the ``HighScoreStore`` interface. Two adapters
ship with the package: an in-memory store (the default) and a small JSON
file store used by the headless runner.
"""

import json
import logging
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class HighScoreStore:
    """
    Base class/interface for high score persistence.
    """

    def load_high_score(self) -> int:
        """
        Return the best score recorded so far (0 when nothing is stored).
        """
        raise NotImplementedError

    def save_high_score(self, score: int) -> None:
        """
        Record ``score`` as the new best score.
        """
        raise NotImplementedError


class InMemoryHighScoreStore(HighScoreStore):

    def __init__(self, high_score: int = 0):
        self.high_score = high_score

    def load_high_score(self) -> int:
        return self.high_score

    def save_high_score(self, score: int) -> None:
        self.high_score = score


class JsonFileHighScoreStore(HighScoreStore):
    """
    Stores the high score as ``{"high_score": n}`` in a JSON file.

    A missing file reads as 0. An unreadable or malformed file also reads
    as 0 and is logged; the next save overwrites it.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load_high_score(self) -> int:
        if not self.path.exists():
            return 0
        try:
            with open(self.path, "r") as f:
                data = json.load(f)
            return int(data.get("high_score", 0))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Could not read high score from %s: %s", self.path, e)
            return 0

    def save_high_score(self, score: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump({"high_score": int(score)}, f, indent=2)
        logger.debug("Saved high score %d to %s", score, self.path)
