"""
Snake movement, growth and collision rules.

All functions take the grid, the food and the other snakes' bodies as
explicit arguments; a snake never looks anything up on its own.

Move order for one snake:
  1) Apply the pending direction
  2) Compute the new head (wall check first under the bounded policy)
  3) Check collisions: own body minus the current tail, other bodies in full
  4) Push the new head
  5) Keep the tail when the food was eaten, drop it otherwise
"""

import logging
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from snakearena.domain.constants import OPPONENT, SELF, WALL
from snakearena.domain.grid import Direction, Grid
from snakearena.domain.snake import Snake

logger = logging.getLogger(__name__)


class MoveResult(Enum):
    MOVED = "moved"
    ATE_FOOD = "ate_food"
    COLLIDED = "collided"


def set_pending_direction(snake: Snake, direction: Direction) -> bool:
    """
    Queue ``direction`` for the snake's next move.

    A 180 degree reversal of the queued direction is dropped, and so is a
    reversal of the direction the last move applied, so two consecutive
    moves never go opposite ways.

    Returns:
        True if the direction was queued, False if it was ignored.
    """
    if direction is snake.pending_direction.opposite or direction is snake.current_direction.opposite:
        logger.debug("Ignoring reversal %s for snake %s", direction.value, snake.snake_id)
        return False
    snake.pending_direction = direction
    return True


def collides(
    snake: Snake,
    position: Tuple[int, int],
    other_bodies: Iterable[Sequence[Tuple[int, int]]],
) -> Optional[str]:
    """
    Check ``position`` against the snake's body minus its tail and against
    every other body in full. Returns 'self', 'opponent' or None.
    """
    body = snake.positions
    # The tail is assumed to vacate this tick, even when the move eats food.
    for i in range(len(body) - 1):
        if body[i] == position:
            return SELF

    for other in other_bodies:
        if position in other:
            return OPPONENT

    return None


def collision_reason(
    snake: Snake,
    grid: Grid,
    other_bodies: Iterable[Sequence[Tuple[int, int]]] = (),
    direction: Optional[Direction] = None,
) -> Optional[str]:
    """
    Return why moving ``snake`` one step in ``direction`` (default: its
    current direction) would kill it: 'wall', 'self', 'opponent' or None.
    """
    new_head, hit_wall = grid.step(snake.head, direction or snake.current_direction)
    if hit_wall:
        return WALL
    return collides(snake, new_head, other_bodies)


def move(
    snake: Snake,
    grid: Grid,
    food: Optional[Tuple[int, int]],
    other_bodies: Iterable[Sequence[Tuple[int, int]]] = (),
) -> MoveResult:
    """
    Advance the snake one cell.

    Args:
        snake: the snake to move; its body is only mutated when the move succeeds
        grid: board size and wrap policy
        food: current food position (None if there is none)
        other_bodies: full bodies of the other live snakes

    Returns:
        MoveResult.COLLIDED, MoveResult.ATE_FOOD or MoveResult.MOVED
    """
    snake.current_direction = snake.pending_direction

    reason = collision_reason(snake, grid, other_bodies)
    if reason is not None:
        logger.debug("Snake %s collided (%s) at %s", snake.snake_id, reason, tuple(snake.head))
        return MoveResult.COLLIDED

    new_head, _ = grid.step(snake.head, snake.current_direction)
    tail_position = snake.tail

    snake.positions.appendleft(new_head)

    if food is not None and new_head == food:
        # Growth: the tail stays where it was, so the new segment sits on tail_position
        logger.debug(
            "Snake %s ate food at %s, grew at %s",
            snake.snake_id, tuple(new_head), tuple(tail_position),
        )
        return MoveResult.ATE_FOOD

    snake.positions.pop()
    return MoveResult.MOVED
