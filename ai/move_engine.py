"""Difficulty dispatch for the computer opponent."""

from __future__ import annotations

import logging
import random
from typing import Dict, Optional, Union

from ai.base_ai import BaseAI, check_move_request
from ai.heuristic_ai import HeuristicAI
from ai.minimax_ai import MinimaxAI
from ai.random_ai import RandomAI
from engine.board import BoardState
from engine.config import Difficulty
from engine.marks import Mark
from engine.rules import Position

LOGGER = logging.getLogger(__name__)


class MoveEngine:
    """Maps every difficulty to its strategy and picks one move per call."""

    def __init__(self, seed: Optional[int] = None, pruning: bool = False) -> None:
        rng = random.Random(seed)
        self.strategies: Dict[Difficulty, BaseAI] = {
            Difficulty.EASY: RandomAI(rng=rng),
            Difficulty.MEDIUM: HeuristicAI(rng=rng),
            Difficulty.HARD: MinimaxAI(pruning=pruning),
        }

    def strategy_for(self, difficulty: Union[Difficulty, str]) -> BaseAI:
        return self.strategies[Difficulty.parse(difficulty)]

    def choose_move(
        self,
        board: BoardState,
        bot_mark: Mark,
        opponent_mark: Mark,
        difficulty: Union[Difficulty, str],
    ) -> Position:
        """Return the position the bot plays; raises InvalidConfiguration for unknown difficulty."""
        level = Difficulty.parse(difficulty)
        check_move_request(board, bot_mark, opponent_mark)
        move = self.strategies[level].choose_move(board, bot_mark, opponent_mark)
        LOGGER.debug("%s bot (%s) plays %d", level.value, bot_mark.value, move)
        return move
