"""Exception types raised by the game core."""

from __future__ import annotations


class TicTacToeError(Exception):
    """Base class for every error raised by the core."""


class InvalidPosition(TicTacToeError, ValueError):
    """Position index outside the 3x3 grid."""


class IllegalPlacement(TicTacToeError, ValueError):
    """Placement on an occupied cell, or with something that is not a mark."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class NoMovesAvailable(TicTacToeError, RuntimeError):
    """A move was requested on a full board."""


class InvalidConfiguration(TicTacToeError, ValueError):
    """Unrecognised difficulty, mode, first turn or mark assignment."""


class GameNotInProgress(TicTacToeError, RuntimeError):
    """A move was attempted before the game started or after it ended."""


class NotYourTurn(TicTacToeError, RuntimeError):
    """The wrong side tried to move."""
