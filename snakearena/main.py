"""
Headless runner for SnakeArena.

Plays one round without any renderer: the human snake is steered by an
autopilot heuristic player, the session is fed a fixed frame delta, and a
JSON summary is printed when the round ends.
"""

import argparse
import json
import logging
from typing import Any, Dict, Optional

from snakearena.config import GameConfig, load_config
from snakearena.domain.constants import PLAYER_ID
from snakearena.players.difficulty_registry import AVAILABLE_DIFFICULTIES
from snakearena.players.heuristic_player import HeuristicPlayer
from snakearena.services.high_score_store import HighScoreStore, JsonFileHighScoreStore
from snakearena.session import GameMode, Session, SessionState

logger = logging.getLogger(__name__)

MODES = {
    "classic": GameMode.CLASSIC,
    "versus": GameMode.VERSUS_AI,
}


# -------------------------------
# Simulation Function
# -------------------------------

def run_simulation(
    config: GameConfig,
    mode: GameMode = GameMode.VERSUS_AI,
    autopilot_difficulty: str = "hard",
    fps: int = 60,
    max_seconds: float = 120.0,
    high_score_store: Optional[HighScoreStore] = None,
    show_board: bool = False,
) -> Dict[str, Any]:
    """
    Runs a single headless round.

    Args:
        config: Session configuration.
        mode: CLASSIC (player only) or VERSUS_AI.
        autopilot_difficulty: Preset used by the autopilot steering the player snake.
        fps: Frames per simulated second; each frame advances the session by 1/fps.
        max_seconds: Simulated time limit for the round.
        high_score_store: Where the high score is read from and written to.
        show_board: Log the board after every frame in which something moved.

    Returns:
        A dictionary summarizing the round.
    """
    if fps <= 0:
        raise ValueError("fps must be positive")

    events = {"score_changes": 0, "new_high_score": False}

    def on_score_changed(player_score: int, ai_score: int) -> None:
        events["score_changes"] += 1

    def on_game_over(final_score: int, is_new_high_score: bool) -> None:
        events["new_high_score"] = is_new_high_score

    session = Session(
        config=config,
        mode=mode,
        high_score_store=high_score_store,
        on_score_changed=on_score_changed,
        on_game_over=on_game_over,
    )
    autopilot = HeuristicPlayer(
        PLAYER_ID,
        difficulty=autopilot_difficulty,
        seed=None if config.seed is None else config.seed + 2,
    )

    dt = 1.0 / fps
    max_frames = int(max_seconds * fps)
    frames = 0

    session.start()
    while session.state is SessionState.PLAYING and frames < max_frames:
        # Steer only right before the player's move so the last intent wins
        if session.player_accumulator + dt >= session.human_move_interval:
            snake = session.player_snake
            direction = autopilot.decide(
                snake, session.food, session.grid, session.other_bodies(snake)
            )
            session.set_direction(direction)

        moves_before = dict(session.moves)
        session.update(dt)
        frames += 1

        if show_board and session.moves != moves_before:
            logger.info("\n%s\n", session.snapshot().print_board())

    timed_out = session.state is SessionState.PLAYING

    return {
        "mode": session.mode.value,
        "final_scores": session.scores.copy(),
        "game_result": session.game_result or {"player": "timeout"},
        "timed_out": timed_out,
        "high_score": session.high_score,
        "new_high_score": events["new_high_score"],
        "score_changes": events["score_changes"],
        "death_info": {
            snake.snake_id: snake.death_reason
            for snake in session.snakes()
            if not snake.alive
        },
        "moves": session.moves.copy(),
        "frames": frames,
        "simulated_seconds": round(frames * dt, 3),
    }


# -------------------------------
# Main Entry Point
# -------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run a headless SnakeArena round with an autopilot steering the player snake."
    )
    parser.add_argument("--mode", choices=sorted(MODES), default="versus",
                        help="classic (one snake) or versus (player vs AI)")
    parser.add_argument("--difficulty", choices=AVAILABLE_DIFFICULTIES, default=None,
                        help="AI opponent difficulty preset")
    parser.add_argument("--autopilot", choices=AVAILABLE_DIFFICULTIES, default="hard",
                        help="Difficulty preset used to steer the player snake")
    parser.add_argument("--grid-size", type=int, default=None,
                        help="Board width and height (at least 5)")
    parser.add_argument("--wrap-policy", choices=["wrap", "bounded"], default=None,
                        help="Whether the board edges wrap around")
    parser.add_argument("--fps", type=int, default=60,
                        help="Simulated frames per second")
    parser.add_argument("--max-seconds", type=float, default=120.0,
                        help="Simulated time limit for the round")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and both AIs")
    parser.add_argument("--config", type=str, default=None,
                        help="Optional YAML config file")
    parser.add_argument("--high-score-file", type=str, default=None,
                        help="JSON file holding the high score")
    parser.add_argument("--show-board", action="store_true",
                        help="Log the board after every move")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    config = load_config(args.config).with_overrides(
        grid_size=args.grid_size,
        wrap_policy=args.wrap_policy,
        difficulty=args.difficulty,
        seed=args.seed,
    ).validate()

    store = JsonFileHighScoreStore(args.high_score_file) if args.high_score_file else None

    result = run_simulation(
        config,
        mode=MODES[args.mode],
        autopilot_difficulty=args.autopilot,
        fps=args.fps,
        max_seconds=args.max_seconds,
        high_score_store=store,
        show_board=args.show_board,
    )

    print("\nSimulation Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
