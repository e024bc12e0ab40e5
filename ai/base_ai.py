"""Base AI interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from engine.board import BoardState
from engine.errors import InvalidConfiguration, NoMovesAvailable
from engine.marks import Mark
from engine.rules import Position


class BaseAI(ABC):
    """Abstract AI strategy contract."""

    @abstractmethod
    def choose_move(self, board: BoardState, bot_mark: Mark, opponent_mark: Mark) -> Position:
        """Choose an empty position for bot_mark; the board is left as found."""
        raise NotImplementedError


def check_move_request(board: BoardState, bot_mark: Mark, opponent_mark: Mark) -> None:
    """Raise if a strategy is asked to move on a full board or with a bad mark pair."""
    if not isinstance(bot_mark, Mark) or not isinstance(opponent_mark, Mark):
        raise InvalidConfiguration(f"Marks must be Mark values, got {bot_mark!r} and {opponent_mark!r}")
    if bot_mark is opponent_mark:
        raise InvalidConfiguration(f"Bot and opponent cannot share mark {bot_mark.value}")
    if not board.available_moves():
        raise NoMovesAvailable("No legal moves available.")
