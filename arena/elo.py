"""Elo ratings for difficulty tiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass
class EloConfig:
    k_factor: float = 24.0
    initial_rating: float = 1200.0


def expected_score(rating_a: float, rating_b: float) -> float:
    """Probability-weighted score A is expected to take from B."""
    return 1.0 / (1.0 + 10 ** ((rating_b - rating_a) / 400.0))


def update_elo(rating_a: float, rating_b: float, score_a: float, k_factor: float = 24.0) -> Tuple[float, float]:
    """Return both new ratings after one game; score_a is 1.0, 0.5 or 0.0."""
    delta = k_factor * (score_a - expected_score(rating_a, rating_b))
    return rating_a + delta, rating_b - delta


class EloTracker:
    """Ratings keyed by tier name, created on first sight."""

    def __init__(self, config: EloConfig | None = None) -> None:
        self.config = config or EloConfig()
        self._ratings: Dict[str, float] = {}

    def get(self, name: str) -> float:
        return self._ratings.setdefault(name, self.config.initial_rating)

    def record_match(self, player_a: str, player_b: str, score_a: float) -> None:
        self._ratings[player_a], self._ratings[player_b] = update_elo(
            self.get(player_a),
            self.get(player_b),
            score_a,
            k_factor=self.config.k_factor,
        )

    def record_series(self, player_a: str, player_b: str, wins: int, losses: int, draws: int) -> None:
        """Apply a whole series game by game: wins first, then losses, then draws."""
        for score_a, games in ((1.0, wins), (0.0, losses), (0.5, draws)):
            for _ in range(games):
                self.record_match(player_a, player_b, score_a)

    def leaderboard(self) -> Dict[str, float]:
        return dict(sorted(self._ratings.items(), key=lambda item: item[1], reverse=True))
