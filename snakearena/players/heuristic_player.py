"""
Heuristic AI player - scores each legal direction and picks one at random,
weighted toward the best scores.

Scoring, per candidate direction:
  - start from 50
  - a move into a wall, its own body (tail excluded) or the other snake
    scores -1000 and is not scored further
  - moving closer to the food adds 30 * aggressiveness, moving away
    subtracts 15 * aggressiveness
  - every free neighbour of the new cell adds 10 * caution, and a cell with
    at most one free neighbour costs another 50 * caution

Selection: 40% best, 40% second best, 20% any candidate. The last branch
can pick a -1000 move; that is how the AI makes mistakes.
"""

import logging
import random
from typing import Iterable, List, Optional, Sequence, Tuple

from snakearena.domain.constants import AI_ID
from snakearena.domain.grid import Direction, Grid
from snakearena.domain.snake import Snake
from snakearena.engine import collision_reason
from .base import Player
from .difficulty_registry import get_preset

logger = logging.getLogger(__name__)

BASE_SCORE = 50.0
AVOID_SCORE = -1000.0
APPROACH_BONUS = 30.0
RETREAT_PENALTY = 15.0
ESCAPE_ROUTE_BONUS = 10.0
DEAD_END_PENALTY = 50.0

BEST_CHANCE = 0.4
SECOND_BEST_CHANCE = 0.8


def candidate_directions(snake: Snake) -> List[Direction]:
    """Every direction except the reversal, in Direction order."""
    reverse = snake.current_direction.opposite
    return [d for d in Direction if d is not reverse]


def count_escape_routes(
    position: Tuple[int, int],
    snake: Snake,
    grid: Grid,
    other_bodies: Sequence[Sequence[Tuple[int, int]]],
) -> int:
    """Count the neighbours of ``position`` not covered by any snake or wall."""
    count = 0
    for direction in Direction:
        check_pos, hit_wall = grid.step(position, direction)
        if hit_wall or check_pos in snake.positions:
            continue
        if any(check_pos in body for body in other_bodies):
            continue
        count += 1
    return count


def score_direction(
    direction: Direction,
    snake: Snake,
    food: Optional[Tuple[int, int]],
    grid: Grid,
    other_bodies: Sequence[Sequence[Tuple[int, int]]],
    aggressiveness: float,
    caution: float,
) -> float:
    if collision_reason(snake, grid, other_bodies, direction) is not None:
        return AVOID_SCORE

    score = BASE_SCORE
    head = snake.head
    next_pos, _ = grid.step(head, direction)

    if food is not None:
        current_dist = grid.distance(head, food)
        new_dist = grid.distance(next_pos, food)
        if new_dist < current_dist:
            score += APPROACH_BONUS * aggressiveness
        elif new_dist > current_dist:
            score -= RETREAT_PENALTY * aggressiveness

    escape_routes = count_escape_routes(next_pos, snake, grid, other_bodies)
    score += ESCAPE_ROUTE_BONUS * caution * escape_routes
    if escape_routes <= 1:
        score -= DEAD_END_PENALTY * caution

    return score


def rank_directions(
    snake: Snake,
    food: Optional[Tuple[int, int]],
    grid: Grid,
    other_bodies: Iterable[Sequence[Tuple[int, int]]],
    aggressiveness: float,
    caution: float,
) -> List[Tuple[Direction, float]]:
    """Score every candidate and sort best first (ties keep Direction order)."""
    other_bodies = [list(body) for body in other_bodies]
    scored = [
        (d, score_direction(d, snake, food, grid, other_bodies, aggressiveness, caution))
        for d in candidate_directions(snake)
    ]
    return sorted(scored, key=lambda item: item[1], reverse=True)


def decide(
    snake: Snake,
    food: Optional[Tuple[int, int]],
    grid: Grid,
    other_bodies: Iterable[Sequence[Tuple[int, int]]],
    rng: random.Random,
    aggressiveness: float,
    caution: float,
) -> Direction:
    """
    Pick the next direction for an AI snake.

    Args:
        snake: the AI snake (read-only)
        food: current food position
        grid: board size and wrap policy
        other_bodies: full bodies of the other live snakes
        rng: anything with ``random()`` and ``randrange(n)``
        aggressiveness: weight of moving toward the food
        caution: weight of keeping open space around the head

    Returns:
        A direction that is never the reversal of ``snake.current_direction``.
    """
    ranked = rank_directions(snake, food, grid, other_bodies, aggressiveness, caution)

    r = rng.random()
    if r < BEST_CHANCE:
        choice = ranked[0]
    elif r < SECOND_BEST_CHANCE and len(ranked) > 1:
        choice = ranked[1]
    else:
        choice = ranked[rng.randrange(len(ranked))]

    logger.debug(
        "Snake %s scores %s -> %s",
        snake.snake_id,
        ", ".join(f"{d.value}={s:.1f}" for d, s in ranked),
        choice[0].value,
    )
    return choice[0]


class HeuristicPlayer(Player):
    """
    AI player driven by ``decide`` with its own random sequence.

    Either pass a difficulty preset key or explicit weights; explicit
    weights win over the preset.
    """

    def __init__(
        self,
        snake_id: str = AI_ID,
        difficulty: Optional[str] = None,
        aggressiveness: Optional[float] = None,
        caution: Optional[float] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        super().__init__(snake_id)
        preset = get_preset(difficulty)
        self.difficulty = preset.key
        self.aggressiveness = preset.aggressiveness if aggressiveness is None else aggressiveness
        self.caution = preset.caution if caution is None else caution
        self.rng = rng or random.Random(seed)

    def decide(
        self,
        snake: Snake,
        food: Optional[Tuple[int, int]],
        grid: Grid,
        other_bodies: Iterable[Sequence[Tuple[int, int]]] = (),
    ) -> Direction:
        return decide(
            snake, food, grid, other_bodies, self.rng, self.aggressiveness, self.caution
        )

    def __repr__(self):
        return (
            f"<HeuristicPlayer {self.snake_id} difficulty={self.difficulty} "
            f"aggressiveness={self.aggressiveness} caution={self.caution}>"
        )
