"""
Session state machine.

Manages:
  - Session state (Menu, Playing, Paused, GameOver) and its transition table
  - The human snake and the optional AI snake
  - Food
  - Scores and the high score
  - Per-actor move timing

The caller owns the clock: it calls ``update(dt)`` once per frame with the
elapsed seconds. Each actor has its own accumulator and moves when that
accumulator reaches the actor's move interval, so the two snakes are not
synchronized to a shared tick.
"""

import logging
import random
from enum import Enum
from typing import Callable, Dict, List, Optional

from snakearena.config import GameConfig
from snakearena.domain.constants import AI_ID, PLAYER_ID
from snakearena.domain.game_state import GameState
from snakearena.domain.grid import Direction, GridPosition
from snakearena.domain.snake import Snake
from snakearena.engine import MoveResult, collision_reason, move, set_pending_direction
from snakearena.players.base import Player
from snakearena.players.heuristic_player import HeuristicPlayer
from snakearena.services.food_spawner import FoodSpawner
from snakearena.services.high_score_store import HighScoreStore, InMemoryHighScoreStore

logger = logging.getLogger(__name__)


class GameMode(Enum):
    CLASSIC = "CLASSIC"
    VERSUS_AI = "VERSUS_AI"


class SessionState(Enum):
    MENU = "MENU"
    PLAYING = "PLAYING"
    PAUSED = "PAUSED"
    GAME_OVER = "GAME_OVER"


TRANSITIONS: Dict[SessionState, frozenset] = {
    SessionState.MENU: frozenset({SessionState.PLAYING}),
    SessionState.PLAYING: frozenset({SessionState.PAUSED, SessionState.GAME_OVER}),
    SessionState.PAUSED: frozenset({SessionState.PLAYING, SessionState.MENU}),
    SessionState.GAME_OVER: frozenset({SessionState.PLAYING, SessionState.MENU}),
}


def can_transition(current: SessionState, target: SessionState) -> bool:
    return target in TRANSITIONS[current]


ScoreListener = Callable[[int, int], None]
GameOverListener = Callable[[int, bool], None]


class Session:
    """
    One game session: a human snake, optionally an AI snake, and the food
    they compete for.

    Commands that are not legal in the current state (pausing from the
    menu, resuming a finished game...) are ignored and return False.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        mode: GameMode = GameMode.CLASSIC,
        high_score_store: Optional[HighScoreStore] = None,
        ai_player: Optional[Player] = None,
        food_spawner: Optional[FoodSpawner] = None,
        on_score_changed: Optional[ScoreListener] = None,
        on_game_over: Optional[GameOverListener] = None,
    ):
        self.config = (config or GameConfig()).validate()
        self.grid = self.config.grid
        self.mode = mode

        seed = self.config.seed
        self.food_spawner = food_spawner or FoodSpawner(
            rng=random.Random(seed),
            max_attempts=self.config.max_food_attempts,
        )
        self.ai_player = ai_player or HeuristicPlayer(
            AI_ID,
            difficulty=self.config.difficulty,
            seed=None if seed is None else seed + 1,
        )

        self.high_score_store = high_score_store or InMemoryHighScoreStore()
        self.high_score = self.high_score_store.load_high_score()

        self.on_score_changed = on_score_changed
        self.on_game_over = on_game_over

        self.state = SessionState.MENU
        self.player_snake: Optional[Snake] = None
        self.ai_snake: Optional[Snake] = None
        self.food: Optional[GridPosition] = None
        self.scores: Dict[str, int] = {PLAYER_ID: 0, AI_ID: 0}
        self.game_result: Optional[Dict[str, str]] = None

        self.human_move_interval = self.config.human_move_interval
        self.ai_move_interval = self.config.ai_move_interval
        self.player_accumulator = 0.0
        self.ai_accumulator = 0.0
        self.moves: Dict[str, int] = {PLAYER_ID: 0, AI_ID: 0}

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start(self, mode: Optional[GameMode] = None) -> bool:
        """Menu -> Playing. Optionally switch the game mode first."""
        if self.state is not SessionState.MENU:
            logger.debug("Ignoring start while %s", self.state.value)
            return False
        if mode is not None:
            self.mode = mode
        return self._transition(SessionState.PLAYING)

    def pause(self) -> bool:
        return self._transition(SessionState.PAUSED)

    def resume(self) -> bool:
        if self.state is not SessionState.PAUSED:
            logger.debug("Ignoring resume while %s", self.state.value)
            return False
        return self._transition(SessionState.PLAYING)

    def toggle_pause(self) -> bool:
        if self.state is SessionState.PLAYING:
            return self.pause()
        return self.resume()

    def restart(self, mode: Optional[GameMode] = None) -> bool:
        """GameOver -> Playing with a fresh round."""
        if self.state is not SessionState.GAME_OVER:
            logger.debug("Ignoring restart while %s", self.state.value)
            return False
        if mode is not None:
            self.mode = mode
        return self._transition(SessionState.PLAYING)

    def return_to_menu(self) -> bool:
        """Paused -> Menu (abandon the round) or GameOver -> Menu."""
        return self._transition(SessionState.MENU)

    abandon = return_to_menu

    def set_direction(self, direction: Direction) -> bool:
        """
        Queue a direction for the human snake. Only honoured while playing;
        reversals are ignored.
        """
        if self.state is not SessionState.PLAYING or self.player_snake is None:
            return False
        return set_pending_direction(self.player_snake, direction)

    # ------------------------------------------------------------------
    # Frame update
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        """
        Advance the session by ``dt`` seconds of caller time.

        Each accumulator resets to zero (it does not roll over) when its actor
        moves. Once a collision ends the round, nobody else moves this frame.
        """
        if self.state is not SessionState.PLAYING:
            return

        self.player_accumulator += dt
        if self.player_accumulator >= self.human_move_interval:
            self.player_accumulator = 0.0
            self._move_player_snake()

        if self.state is not SessionState.PLAYING or self.ai_snake is None:
            return

        self.ai_accumulator += dt
        if self.ai_accumulator >= self.ai_move_interval:
            self.ai_accumulator = 0.0
            self._move_ai_snake()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def player_score(self) -> int:
        return self.scores[PLAYER_ID]

    @property
    def ai_score(self) -> int:
        return self.scores[AI_ID]

    def snakes(self) -> List[Snake]:
        return [s for s in (self.player_snake, self.ai_snake) if s is not None]

    def snapshot(self) -> GameState:
        """
        Return a snapshot of the current session as a GameState.
        """
        snake_positions = {}
        alive_dict = {}
        for snake in self.snakes():
            snake_positions[snake.snake_id] = [tuple(p) for p in snake.positions]
            alive_dict[snake.snake_id] = snake.alive

        return GameState(
            state=self.state.value,
            mode=self.mode.value,
            snake_positions=snake_positions,
            alive=alive_dict,
            scores=self.scores.copy(),
            grid_size=self.grid.size,
            food=None if self.food is None else tuple(self.food),
            high_score=self.high_score,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _transition(self, target: SessionState) -> bool:
        previous = self.state
        if not can_transition(previous, target):
            logger.debug("Ignoring transition %s -> %s", previous.value, target.value)
            return False

        self.state = target
        logger.debug("Session %s -> %s", previous.value, target.value)

        if target is SessionState.PLAYING:
            if previous in (SessionState.MENU, SessionState.GAME_OVER):
                self._start_new_round()
            self.player_accumulator = 0.0
            self.ai_accumulator = 0.0
        return True

    def _start_new_round(self) -> None:
        size = self.grid.size
        length = self.config.effective_initial_length
        start_y = size // 2

        self.scores = {PLAYER_ID: 0, AI_ID: 0}
        self.moves = {PLAYER_ID: 0, AI_ID: 0}
        self.game_result = None
        self.human_move_interval = self.config.human_move_interval

        player_x = size // 4
        self.player_snake = Snake(
            [self.grid.wrap((player_x - i, start_y)) for i in range(length)],
            direction=Direction.RIGHT,
            snake_id=PLAYER_ID,
        )

        self.ai_snake = None
        if self.mode is GameMode.VERSUS_AI:
            # Mirror image of the player: facing the centre, body trailing outward
            ai_x = size - 1 - player_x
            self.ai_snake = Snake(
                [self.grid.wrap((ai_x + i, start_y)) for i in range(length)],
                direction=Direction.LEFT,
                snake_id=AI_ID,
            )

        self._spawn_food()
        logger.info(
            "New %s round on a %dx%d grid (%s), food at %s",
            self.mode.value, size, size, self.grid.wrap_policy.value, tuple(self.food),
        )

    def _spawn_food(self) -> None:
        occupied = set()
        for snake in self.snakes():
            occupied.update(snake.positions)
        self.food = self.food_spawner.place(self.grid.size, occupied)

    def other_bodies(self, snake: Snake) -> List[List[GridPosition]]:
        return [
            other.body() for other in self.snakes()
            if other is not snake and other.alive
        ]

    def _move_player_snake(self) -> None:
        snake = self.player_snake
        if snake is None or not snake.alive:
            return
        self._apply_move(snake)

    def _move_ai_snake(self) -> None:
        snake = self.ai_snake
        if snake is None or not snake.alive:
            return
        direction = self.ai_player.decide(snake, self.food, self.grid, self.other_bodies(snake))
        set_pending_direction(snake, direction)
        self._apply_move(snake)

    def _apply_move(self, snake: Snake) -> None:
        other_bodies = self.other_bodies(snake)
        result = move(snake, self.grid, self.food, other_bodies)
        self.moves[snake.snake_id] += 1

        if result is MoveResult.ATE_FOOD:
            self._handle_food_eaten(snake)
        elif result is MoveResult.COLLIDED:
            snake.alive = False
            snake.death_reason = collision_reason(snake, self.grid, other_bodies)
            self._game_over(snake)

    def _handle_food_eaten(self, snake: Snake) -> None:
        self.scores[snake.snake_id] += 1
        logger.info(
            "%s ate food at %s (player %d, ai %d)",
            snake.snake_id, tuple(self.food), self.player_score, self.ai_score,
        )

        if snake.snake_id == PLAYER_ID:
            self._maybe_speed_up()

        if self.on_score_changed is not None:
            self.on_score_changed(self.player_score, self.ai_score)

        self._spawn_food()

    def _maybe_speed_up(self) -> None:
        every = self.config.speedup_every
        if every <= 0 or self.player_score % every != 0:
            return
        floor = self.config.min_move_interval
        if self.human_move_interval > floor:
            self.human_move_interval = max(floor, self.human_move_interval - self.config.speedup_step)
            logger.debug("Human move interval now %.3fs", self.human_move_interval)

    def _game_over(self, loser: Snake) -> None:
        final_score = self.player_score
        is_new_high_score = final_score > self.high_score

        if is_new_high_score:
            self.high_score = final_score
            self.high_score_store.save_high_score(final_score)

        if self.mode is GameMode.VERSUS_AI:
            winner_id = AI_ID if loser.snake_id == PLAYER_ID else PLAYER_ID
            self.game_result = {loser.snake_id: "lost", winner_id: "won"}
        else:
            self.game_result = {PLAYER_ID: "lost"}

        self._transition(SessionState.GAME_OVER)
        logger.info(
            "Game over: %s died (%s). Final score %d%s",
            loser.snake_id, loser.death_reason, final_score,
            " - new high score!" if is_new_high_score else "",
        )

        if self.on_game_over is not None:
            self.on_game_over(final_score, is_new_high_score)
