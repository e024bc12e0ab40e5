"""Arena settings loaded from a JSON file or a plain dict."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

from arena.elo import EloConfig
from engine.config import Difficulty
from engine.errors import InvalidConfiguration


class ArenaConfig:
    """Container for arena parameters loaded from config file."""

    def __init__(self, payload: Optional[Dict[str, object]] = None) -> None:
        payload = payload or {}
        self.games_per_pair = int(payload.get("games_per_pair", 20))
        self.seed = payload.get("seed")
        self.pruning = bool(payload.get("pruning", True))
        self.alternate_first_move = bool(payload.get("alternate_first_move", True))
        tiers = payload.get("tiers", [level.value for level in Difficulty])
        self.tiers: List[Difficulty] = [Difficulty.parse(tier) for tier in tiers]

        elo = payload.get("elo", {})
        self.elo = EloConfig(
            k_factor=float(elo.get("k_factor", 24.0)),
            initial_rating=float(elo.get("initial_rating", 1200.0)),
        )

        if self.games_per_pair < 1:
            raise InvalidConfiguration(f"games_per_pair must be positive, got {self.games_per_pair}")
        if len(set(self.tiers)) < 2:
            raise InvalidConfiguration("Arena needs at least two distinct tiers.")

    @classmethod
    def from_json(cls, path: str | Path) -> "ArenaConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls(payload)
