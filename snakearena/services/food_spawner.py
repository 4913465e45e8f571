"""
Food placement by bounded rejection sampling.
"""

import logging
import random
from typing import Collection, Optional, Tuple

from snakearena.domain.constants import MAX_FOOD_ATTEMPTS
from snakearena.domain.grid import GridPosition

logger = logging.getLogger(__name__)


class FoodSpawner:
    """
    Picks a random cell for the food, avoiding occupied cells.

    Draws are uniform over the whole board. After ``max_attempts`` rejected
    draws the last draw is accepted even if it is occupied, so placement
    always returns.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_FOOD_ATTEMPTS,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts

    def place(self, grid_size: int, occupied: Collection[Tuple[int, int]]) -> GridPosition:
        position = None
        for _ in range(self.max_attempts):
            position = GridPosition(
                self.rng.randrange(grid_size),
                self.rng.randrange(grid_size),
            )
            if position not in occupied:
                return position

        logger.debug(
            "No free cell found in %d draws; accepting occupied cell %s",
            self.max_attempts, tuple(position),
        )
        return position
