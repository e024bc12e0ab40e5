"""CLI entrypoint for playing tic-tac-toe in the terminal."""

from __future__ import annotations

import argparse
import logging
import time
from typing import List, Optional

from ai.minimax_ai import MinimaxAI
from ai.move_engine import MoveEngine
from engine.config import Difficulty, FirstTurn, GameMode, SessionConfig
from engine.errors import TicTacToeError
from engine.rules import CELL_COUNT, coords_to_index
from engine.session import GameSession

HELP_TEXT = "Commands: <0-8> | <row> <col> | hint | restart | help | quit"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play tic-tac-toe in the terminal.")
    parser.add_argument("--config", type=str, default=None, help="Path to a session config JSON")
    parser.add_argument("--mode", choices=[m.value for m in GameMode], default=None, help="pvp or bot")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=None,
        help="Computer opponent strength",
    )
    parser.add_argument(
        "--first-turn",
        choices=[f.value for f in FirstTurn],
        default=None,
        help="Who moves first in bot mode",
    )
    parser.add_argument("--player-mark", choices=["X", "O"], default=None, help="Mark used by the human")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random strategies")
    parser.add_argument("--delay", type=float, default=0.3, help="Seconds the computer pauses before moving")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SessionConfig:
    """Load the config file, if any, then apply command-line overrides."""
    config = SessionConfig.from_json(args.config) if args.config else SessionConfig()
    overrides = {
        "mode": args.mode,
        "difficulty": args.difficulty,
        "first_turn": args.first_turn,
        "player_mark": args.player_mark,
    }
    changes = {key: value for key, value in overrides.items() if value is not None}
    return config.with_changes(**changes) if changes else config


def parse_user_move(command: str) -> Optional[int]:
    """Accept a cell index ("4") or zero-based row and column ("1 1")."""
    parts = command.strip().split()
    try:
        if len(parts) == 1:
            position = int(parts[0])
            return position if 0 <= position < CELL_COUNT else None
        if len(parts) == 2:
            return coords_to_index(int(parts[0]), int(parts[1]))
    except (ValueError, TicTacToeError):
        return None
    return None


def format_hint(session: GameSession, advisor: MinimaxAI) -> str:
    mark = session.current_turn
    scores = advisor.score_moves(session.board, mark, mark.opponent())
    ranked = sorted(scores.items(), key=lambda item: (-item[1], item[0]))
    return "Hint: " + ", ".join(f"{pos}={score:+g}" for pos, score in ranked)


def run_cli(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    logger = logging.getLogger("tictactoe.cli")

    try:
        config = build_config(args)
    except (TicTacToeError, OSError) as exc:
        logger.error("Invalid configuration: %s", exc)
        raise SystemExit(2) from exc

    session = GameSession(config, move_engine=MoveEngine(seed=args.seed))
    advisor = MinimaxAI(pruning=True)
    session.start()
    print(HELP_TEXT)

    while True:
        print()
        print(session.board.render_ascii())

        if not session.in_progress:
            print(session.result_message())
            answer = input("Play again? [y/N]> ").strip().lower()
            if answer in {"y", "yes"}:
                session.start()
                continue
            break

        if session.is_bot_turn():
            if args.delay > 0:
                time.sleep(args.delay)
            result = session.play_bot()
            print(f"Computer plays {result.position}")
            continue

        user_input = input(f"{session.current_turn.value} to move> ").strip().lower()
        if user_input in {"quit", "exit"}:
            print("Exiting game.")
            break
        if user_input == "help":
            print(HELP_TEXT)
            continue
        if user_input == "restart":
            session.start()
            continue
        if user_input == "hint":
            print(format_hint(session, advisor))
            continue

        position = parse_user_move(user_input)
        if position is None:
            print("Invalid command format.")
            continue
        try:
            session.play_human(position)
        except TicTacToeError as exc:
            print(f"Illegal move: {exc}")


if __name__ == "__main__":
    run_cli()
