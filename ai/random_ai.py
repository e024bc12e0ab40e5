"""Uniform random move selection (easy difficulty)."""

from __future__ import annotations

import logging
import random
from typing import Optional

from ai.base_ai import BaseAI, check_move_request
from engine.board import BoardState
from engine.marks import Mark
from engine.rules import Position

LOGGER = logging.getLogger(__name__)


class RandomAI(BaseAI):
    """Picks any empty cell with equal probability."""

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    def choose_move(self, board: BoardState, bot_mark: Mark, opponent_mark: Mark) -> Position:
        check_move_request(board, bot_mark, opponent_mark)
        return self.pick(board)

    def pick(self, board: BoardState) -> Position:
        available = board.available_moves()
        move = self._rng.choice(available)
        LOGGER.debug("Random pick %d from %s", move, available)
        return move
