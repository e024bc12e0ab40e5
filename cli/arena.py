"""CLI command to pit the difficulty tiers against each other."""

from __future__ import annotations

import argparse
import logging

from arena.config import ArenaConfig
from arena.evaluator import Evaluator


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run a round-robin between tic-tac-toe difficulty tiers.")
    parser.add_argument("--config", type=str, default=None, help="Path to arena config JSON")
    parser.add_argument("--games", type=int, default=None, help="Games per pairing")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the random strategies")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    config = ArenaConfig.from_json(args.config) if args.config else ArenaConfig()
    if args.games is not None:
        config.games_per_pair = args.games
    if args.seed is not None:
        config.seed = args.seed

    report = Evaluator(config).run_ladder()
    for pairing in report.pairings:
        summary = pairing.summary
        print(
            f"{pairing.first.value:>6} vs {pairing.second.value:<6} "
            f"W:{summary.first_wins:<4d} L:{summary.second_wins:<4d} D:{summary.draws:<4d}"
        )
    print("Ratings:")
    for name, rating in report.ratings.items():
        print(f"  {name:<6} {rating:7.1f}")


if __name__ == "__main__":
    main()
