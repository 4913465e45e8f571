"""
Base player interface for the game engine.
"""

from typing import Iterable, Optional, Sequence, Tuple

from snakearena.domain.grid import Direction, Grid
from snakearena.domain.snake import Snake


class Player:
    """
    Base class/interface for computer-controlled snake logic.

    Each player is responsible for returning a direction for its snake given
    the food, the board and the other snakes' bodies.
    """

    def __init__(self, snake_id: str):
        self.snake_id = snake_id

    def decide(
        self,
        snake: Snake,
        food: Optional[Tuple[int, int]],
        grid: Grid,
        other_bodies: Iterable[Sequence[Tuple[int, int]]] = (),
    ) -> Direction:
        """
        Return the direction to queue for the snake's next move.

        Args:
            snake: The snake this player controls (read-only)
            food: Current food position
            grid: Board size and wrap policy
            other_bodies: Full bodies of the other live snakes

        Returns:
            One of the four Direction members
        """
        raise NotImplementedError
