"""Game configuration values and the session settings container."""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Dict, Type, TypeVar

from engine.errors import InvalidConfiguration
from engine.marks import Mark

_E = TypeVar("_E", bound="_ParsableEnum")


class _ParsableEnum(str, Enum):
    @classmethod
    def parse(cls: Type[_E], value: object) -> _E:
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        try:
            return cls(text)
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise InvalidConfiguration(
                f"Unknown {cls.__name__.lower()} {value!r}; expected one of: {choices}"
            ) from None


class Difficulty(_ParsableEnum):
    """Computer opponent strength."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class GameMode(_ParsableEnum):
    """Two humans, or a human against the computer."""

    PVP = "pvp"
    BOT = "bot"


class FirstTurn(_ParsableEnum):
    """Who moves first in bot mode."""

    PLAYER = "player"
    BOT = "bot"


@dataclass(frozen=True)
class SessionConfig:
    """Settings chosen before a game starts."""

    mode: GameMode = GameMode.PVP
    difficulty: Difficulty = Difficulty.HARD
    first_turn: FirstTurn = FirstTurn.PLAYER
    player_mark: Mark = Mark.X

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", GameMode.parse(self.mode))
        object.__setattr__(self, "difficulty", Difficulty.parse(self.difficulty))
        object.__setattr__(self, "first_turn", FirstTurn.parse(self.first_turn))
        object.__setattr__(self, "player_mark", Mark.parse(self.player_mark))

    @property
    def bot_mark(self) -> Mark:
        return self.player_mark.opponent()

    def with_changes(self, **changes: object) -> "SessionConfig":
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "SessionConfig":
        return cls(
            mode=payload.get("mode", GameMode.PVP),
            difficulty=payload.get("difficulty", Difficulty.HARD),
            first_turn=payload.get("first_turn", FirstTurn.PLAYER),
            player_mark=payload.get("player_mark", Mark.X),
        )

    @classmethod
    def from_json(cls, path: str | Path) -> "SessionConfig":
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
        return cls.from_dict(payload)

    def to_dict(self) -> Dict[str, str]:
        return {
            "mode": self.mode.value,
            "difficulty": self.difficulty.value,
            "first_turn": self.first_turn.value,
            "player_mark": self.player_mark.value,
        }
