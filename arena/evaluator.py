"""Round-robin evaluation of difficulty tiers."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Dict, List

from ai.move_engine import MoveEngine
from arena.config import ArenaConfig
from arena.elo import EloTracker
from arena.match import SeriesSummary, play_series
from engine.config import Difficulty

LOGGER = logging.getLogger(__name__)


@dataclass
class PairingResult:
    """Series result between two tiers."""

    first: Difficulty
    second: Difficulty
    summary: SeriesSummary


@dataclass
class LadderReport:
    """All pairings plus the final ratings."""

    pairings: List[PairingResult]
    ratings: Dict[str, float]

    def result_for(self, first: Difficulty, second: Difficulty) -> SeriesSummary:
        for pairing in self.pairings:
            if pairing.first is first and pairing.second is second:
                return pairing.summary
        raise KeyError(f"No pairing {first.value} vs {second.value}")


class Evaluator:
    """Plays every pair of tiers and keeps Elo ratings."""

    def __init__(self, config: ArenaConfig, elo_tracker: EloTracker | None = None) -> None:
        self.config = config
        self.elo_tracker = elo_tracker or EloTracker(config.elo)
        self.engine = MoveEngine(seed=config.seed, pruning=config.pruning)

    def run_ladder(self) -> LadderReport:
        tiers = list(dict.fromkeys(self.config.tiers))
        pairings: List[PairingResult] = []

        for first, second in itertools.combinations(tiers, 2):
            summary = play_series(
                self.engine.strategy_for(first),
                self.engine.strategy_for(second),
                games=self.config.games_per_pair,
                alternate=self.config.alternate_first_move,
            )
            self.elo_tracker.record_series(
                first.value,
                second.value,
                wins=summary.first_wins,
                losses=summary.second_wins,
                draws=summary.draws,
            )
            pairings.append(PairingResult(first=first, second=second, summary=summary))
            LOGGER.info(
                "Eval %s vs %s | W:%d L:%d D:%d score=%.3f elo=(%.1f, %.1f)",
                first.value,
                second.value,
                summary.first_wins,
                summary.second_wins,
                summary.draws,
                summary.first_score,
                self.elo_tracker.get(first.value),
                self.elo_tracker.get(second.value),
            )

        return LadderReport(pairings=pairings, ratings=self.elo_tracker.leaderboard())
