"""Play strategies against each other and summarise the results."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ai.base_ai import BaseAI
from engine.board import BoardState
from engine.marks import Mark
from engine.rules import CELL_COUNT, Position

LOGGER = logging.getLogger(__name__)

# Outcome codes used for bincount aggregation.
FIRST_WINS = 0
SECOND_WINS = 1
DRAW = 2


@dataclass
class GameRecord:
    """Summary of one finished game."""

    winner: Optional[Mark]
    is_draw: bool
    plies: int
    moves: List[Position] = field(default_factory=list)


@dataclass
class SeriesSummary:
    """Aggregate of a series between two players."""

    first_wins: int
    second_wins: int
    draws: int

    @property
    def games(self) -> int:
        return self.first_wins + self.second_wins + self.draws

    @property
    def first_score(self) -> float:
        """Points for the first player, 1 per win and 0.5 per draw, normalised."""
        return (self.first_wins + 0.5 * self.draws) / max(1, self.games)


def play_game(x_ai: BaseAI, o_ai: BaseAI, board: Optional[BoardState] = None) -> GameRecord:
    """Play one game to completion; X moves first unless the board says otherwise."""
    board = board.clone() if board is not None else BoardState()
    turn = Mark.X if board.count(Mark.X) == board.count(Mark.O) else Mark.O
    moves: List[Position] = []

    done, winner, is_draw = board.outcome()
    while not done:
        actor = x_ai if turn is Mark.X else o_ai
        move = actor.choose_move(board, turn, turn.opponent())
        board.place(move, turn)
        moves.append(move)
        done, winner, is_draw = board.outcome()
        turn = turn.opponent()

    LOGGER.debug("Game finished winner=%s draw=%s moves=%s", winner, is_draw, moves)
    return GameRecord(winner=winner, is_draw=is_draw, plies=len(moves), moves=moves)


def play_series(first: BaseAI, second: BaseAI, games: int, alternate: bool = True) -> SeriesSummary:
    """
    Play ``games`` games between two players.

    With ``alternate`` the players swap marks every game so neither always
    enjoys the first move.
    """
    codes = np.empty(games, dtype=np.int64)
    for game_idx in range(games):
        first_is_x = not alternate or game_idx % 2 == 0
        if first_is_x:
            record = play_game(first, second)
            first_mark = Mark.X
        else:
            record = play_game(second, first)
            first_mark = Mark.O

        if record.is_draw:
            codes[game_idx] = DRAW
        elif record.winner is first_mark:
            codes[game_idx] = FIRST_WINS
        else:
            codes[game_idx] = SECOND_WINS

    counts = np.bincount(codes, minlength=3)
    return SeriesSummary(
        first_wins=int(counts[FIRST_WINS]),
        second_wins=int(counts[SECOND_WINS]),
        draws=int(counts[DRAW]),
    )


def move_distribution(
    ai: BaseAI,
    board: BoardState,
    bot_mark: Mark,
    opponent_mark: Mark,
    trials: int,
) -> np.ndarray:
    """Return the fraction of ``trials`` in which each of the 9 positions was chosen."""
    picks = np.fromiter(
        (ai.choose_move(board, bot_mark, opponent_mark) for _ in range(trials)),
        dtype=np.int64,
        count=trials,
    )
    return np.bincount(picks, minlength=CELL_COUNT) / max(1, trials)
