"""
Shared fixtures for the SnakeArena tests.
"""

import os
import sys

import pytest

# Add the project root to the path so the package imports without installation
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from snakearena.config import ENV_VARS  # noqa: E402


class ScriptedRandom:
    """
    Random source that replays fixed values.

    ``random()`` pops from ``floats`` and ``randrange(n)`` pops from ``ints``.
    """

    def __init__(self, floats=(), ints=()):
        self.floats = list(floats)
        self.ints = list(ints)
        self.randrange_calls = 0

    def random(self):
        return self.floats.pop(0)

    def randrange(self, n):
        self.randrange_calls += 1
        value = self.ints.pop(0)
        assert 0 <= value < n, f"scripted value {value} outside range({n})"
        return value


@pytest.fixture
def scripted_random():
    return ScriptedRandom


@pytest.fixture(autouse=True)
def clean_snake_env(monkeypatch):
    """Keep SNAKE_* variables from the developer's shell out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
