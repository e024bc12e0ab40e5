"""Single-ply win/block heuristic (medium difficulty)."""

from __future__ import annotations

import logging
import random
from typing import Optional

from ai.base_ai import BaseAI, check_move_request
from ai.random_ai import RandomAI
from engine.board import BoardState
from engine.marks import Mark
from engine.rules import Position

LOGGER = logging.getLogger(__name__)


class HeuristicAI(BaseAI):
    """
    Rule-based player, first matching rule wins:

    1. complete our own line now;
    2. occupy the cell where the opponent would complete a line;
    3. otherwise play a random empty cell.

    There is no deeper look-ahead, so forks are not seen.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._fallback = RandomAI(seed=seed, rng=rng)

    def choose_move(self, board: BoardState, bot_mark: Mark, opponent_mark: Mark) -> Position:
        check_move_request(board, bot_mark, opponent_mark)

        winning = find_completing_move(board, bot_mark)
        if winning is not None:
            LOGGER.debug("Heuristic wins at %d", winning)
            return winning

        block = find_completing_move(board, opponent_mark)
        if block is not None:
            LOGGER.debug("Heuristic blocks %s at %d", opponent_mark.value, block)
            return block

        return self._fallback.pick(board)


def find_completing_move(board: BoardState, mark: Mark) -> Optional[Position]:
    """Lowest empty position where placing mark wins, or None."""
    for position in board.available_moves():
        with board.tentative(position, mark):
            won = board.has_won(mark)
        if won:
            return position
    return None
