"""One game in progress: board, settings, turn tracking and outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from engine.board import BoardState
from engine.config import FirstTurn, GameMode, SessionConfig
from engine.errors import GameNotInProgress, InvalidConfiguration, NotYourTurn
from engine.marks import Mark
from engine.rules import Line, Position

if TYPE_CHECKING:
    from ai.move_engine import MoveEngine

LOGGER = logging.getLogger(__name__)


class GameStatus(str, Enum):
    """Lifecycle of a single game."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class MoveResult:
    """Result metadata for an applied placement."""

    position: Position
    mark: Mark
    winner: Optional[Mark]
    is_draw: bool

    @property
    def game_over(self) -> bool:
        return self.winner is not None or self.is_draw


class GameSession:
    """
    Owns one board and the settings it is played under.

    Front-ends drive it with ``start``, ``play_human`` and ``play_bot``; each
    session is independent, so several can run side by side.
    """

    def __init__(self, config: Optional[SessionConfig] = None, move_engine: Optional["MoveEngine"] = None) -> None:
        self.config = config or SessionConfig()
        self.move_engine = move_engine
        self.board = BoardState()
        self.status = GameStatus.NOT_STARTED
        self.current_turn: Optional[Mark] = None
        self.winner: Optional[Mark] = None
        self.winning_line: Optional[Line] = None

    @property
    def in_progress(self) -> bool:
        return self.status is GameStatus.IN_PROGRESS

    def start(self) -> None:
        """Begin a fresh game; allowed from any state."""
        self._check_playable(self.config)

        self.board.reset()
        self.winner = None
        self.winning_line = None
        self.status = GameStatus.IN_PROGRESS
        if self.config.mode is GameMode.PVP:
            self.current_turn = Mark.X
        elif self.config.first_turn is FirstTurn.BOT:
            self.current_turn = self.config.bot_mark
        else:
            self.current_turn = self.config.player_mark

        LOGGER.info(
            "New game: mode=%s difficulty=%s first=%s",
            self.config.mode.value,
            self.config.difficulty.value,
            self.current_turn.value,
        )

    def reconfigure(self, **changes: object) -> None:
        """Apply new settings and restart the game; rejected settings change nothing."""
        config = self.config.with_changes(**changes)
        self._check_playable(config)
        self.config = config
        self.start()

    def is_bot_turn(self) -> bool:
        return (
            self.in_progress
            and self.config.mode is GameMode.BOT
            and self.current_turn is self.config.bot_mark
        )

    def play_human(self, position: Position) -> MoveResult:
        """Place the current human mark."""
        self._require_in_progress()
        if self.is_bot_turn():
            raise NotYourTurn("It is the computer's turn.")
        return self._apply(position, self.current_turn)

    def play_bot(self) -> MoveResult:
        """Let the computer pick and place its mark."""
        self._require_in_progress()
        if not self.is_bot_turn():
            raise NotYourTurn("It is not the computer's turn.")
        position = self.move_engine.choose_move(
            self.board,
            self.config.bot_mark,
            self.config.player_mark,
            self.config.difficulty,
        )
        return self._apply(position, self.config.bot_mark)

    def result_message(self) -> Optional[str]:
        if self.status is GameStatus.WON:
            return f"{self.winner.value} Wins!"
        if self.status is GameStatus.DRAW:
            return "It's a Draw!"
        return None

    def _check_playable(self, config: SessionConfig) -> None:
        if config.mode is GameMode.BOT and self.move_engine is None:
            raise InvalidConfiguration("Bot mode needs a move engine.")

    def _require_in_progress(self) -> None:
        if not self.in_progress:
            raise GameNotInProgress(f"Game is {self.status.value.replace('_', ' ')}.")

    def _apply(self, position: Position, mark: Mark) -> MoveResult:
        self.board.place(position, mark)

        line = self.board.winning_line(mark)
        if line is not None:
            self.status = GameStatus.WON
            self.winner = mark
            self.winning_line = line
            LOGGER.info("%s wins with line %s", mark.value, line)
        elif self.board.is_draw():
            self.status = GameStatus.DRAW
            LOGGER.info("Game drawn")
        else:
            self.current_turn = mark.opponent()
        return MoveResult(
            position=position,
            mark=mark,
            winner=self.winner,
            is_draw=self.status is GameStatus.DRAW,
        )
