"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, List, Optional, Tuple

from .grid import Direction, GridPosition


class Snake:
    """
    Represents a snake on the board.

    Attributes:
        snake_id: "player" or "ai"
        positions: deque of GridPosition from head at index 0 to tail at the end
        current_direction: the direction applied by the last move
        pending_direction: the direction the next move will apply
        alive: whether this snake is still alive
        death_reason: e.g., 'wall', 'self', 'opponent'
    """

    def __init__(
        self,
        positions: Iterable[Tuple[int, int]],
        direction: Direction = Direction.RIGHT,
        snake_id: str = "player",
    ):
        self.positions = deque(GridPosition(*p) for p in positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")
        self.snake_id = snake_id
        self.current_direction = direction
        self.pending_direction = direction
        self.alive = True
        self.death_reason: Optional[str] = None

    @property
    def head(self) -> GridPosition:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> GridPosition:
        return self.positions[-1]

    def body(self) -> List[GridPosition]:
        """A copy of the body, head first."""
        return list(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return (
            f"<Snake {self.snake_id} head={tuple(self.head)} len={len(self)} "
            f"dir={self.current_direction.value} alive={self.alive}>"
        )
