"""
GameState entity - a read-only snapshot of a session at a point in time.
"""

from typing import Dict, List, Optional, Tuple


class GameState:
    """
    A snapshot of the session handed to renderers and other collaborators.

    Attributes:
        state: session state value ("MENU", "PLAYING", "PAUSED", "GAME_OVER")
        mode: game mode value ("CLASSIC" or "VERSUS_AI")
        snake_positions: dict of snake_id -> list of (x, y), head first
        alive: dict of snake_id -> bool
        scores: dict of snake_id -> int
        grid_size: board width and height
        food: (x, y) of the food, or None before the first round
        high_score: best human score known to the session
    """

    def __init__(
        self,
        state: str,
        mode: str,
        snake_positions: Dict[str, List[Tuple[int, int]]],
        alive: Dict[str, bool],
        scores: Dict[str, int],
        grid_size: int,
        food: Optional[Tuple[int, int]],
        high_score: int = 0,
    ):
        self.state = state
        self.mode = mode
        self.snake_positions = snake_positions
        self.alive = alive
        self.scores = scores
        self.grid_size = grid_size
        self.food = food
        self.high_score = high_score

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = food
        T = snake body
        0,1 = snake head (in snake_positions order)
        (0,0) is at the bottom left with x-axis labels at the bottom.
        """
        size = self.grid_size
        board = [['.' for _ in range(size)] for _ in range(size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'A'

        for i, (snake_id, positions) in enumerate(self.snake_positions.items()):
            if not self.alive.get(snake_id, False):
                continue
            # Draw the tail first so the head wins when they overlap
            for pos_idx in range(len(positions) - 1, -1, -1):
                x, y = positions[pos_idx]
                board[y][x] = str(i) if pos_idx == 0 else 'T'

        result = []
        for y in range(size - 1, -1, -1):
            result.append(f"{y:2d} {' '.join(board[y])}")
        result.append("   " + " ".join(str(i % 10) for i in range(size)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState state={self.state}, mode={self.mode}, food={self.food}, "
            f"snakes={len(self.snake_positions)}, scores={self.scores}>"
        )
