"""
Tests for FoodSpawner - bounded rejection sampling.
"""

import random

import pytest

from snakearena.services.food_spawner import FoodSpawner


class CountingRandom(random.Random):
    def __init__(self, seed=None):
        super().__init__(seed)
        self.draws = 0

    def randrange(self, *args, **kwargs):
        self.draws += 1
        return super().randrange(*args, **kwargs)


class TestFoodSpawner:
    """Tests for FoodSpawner.place()."""

    def test_rejects_occupied_draws(self, scripted_random):
        """Occupied draws are skipped until a free cell comes up."""
        rng = scripted_random(ints=[0, 0, 1, 2])
        spawner = FoodSpawner(rng=rng)

        assert spawner.place(10, {(0, 0)}) == (1, 2)
        assert rng.randrange_calls == 4

    def test_accepts_last_draw_after_max_attempts(self, scripted_random):
        """After max_attempts rejections the last draw is used anyway."""
        rng = scripted_random(ints=[0, 0, 1, 1, 2, 2])
        spawner = FoodSpawner(rng=rng, max_attempts=3)

        assert spawner.place(10, {(0, 0), (1, 1), (2, 2)}) == (2, 2)
        assert rng.ints == []

    def test_full_board_never_blocks(self):
        """A completely occupied board still yields a position after 100 attempts."""
        rng = CountingRandom(1)
        spawner = FoodSpawner(rng=rng)
        occupied = {(x, y) for x in range(5) for y in range(5)}

        pos = spawner.place(5, occupied)

        assert pos in occupied
        assert rng.draws == 200

    def test_positions_stay_on_board(self):
        """Every placement is inside the grid."""
        spawner = FoodSpawner(rng=random.Random(3))
        for _ in range(200):
            x, y = spawner.place(7, set())
            assert 0 <= x < 7
            assert 0 <= y < 7

    def test_never_returns_occupied_when_free_cell_exists(self):
        """With a single free cell and plenty of attempts, that cell is found."""
        spawner = FoodSpawner(rng=random.Random(5), max_attempts=10_000)
        occupied = {(x, y) for x in range(5) for y in range(5)} - {(3, 4)}
        assert spawner.place(5, occupied) == (3, 4)

    def test_same_seed_same_sequence(self):
        """Two spawners with the same seed place food identically."""
        a = FoodSpawner(rng=random.Random(42))
        b = FoodSpawner(rng=random.Random(42))
        assert [a.place(20, set()) for _ in range(10)] == [b.place(20, set()) for _ in range(10)]

    def test_invalid_max_attempts(self):
        """max_attempts must allow at least one draw."""
        with pytest.raises(ValueError):
            FoodSpawner(max_attempts=0)
