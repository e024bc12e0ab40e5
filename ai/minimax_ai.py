"""Exhaustive minimax AI for tic-tac-toe (hard difficulty)."""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Tuple

from ai.base_ai import BaseAI, check_move_request
from engine.board import BoardState, Cell
from engine.errors import NoMovesAvailable
from engine.marks import Mark
from engine.rules import Position

LOGGER = logging.getLogger(__name__)

WIN_SCORE = 10


class MinimaxAI(BaseAI):
    """Full-depth game-tree search; never loses."""

    def __init__(
        self,
        pruning: bool = False,
        use_transposition: bool = True,
        debug_top_k: int = 3,
    ) -> None:
        self.pruning = pruning
        # Cached values are exact only without cutoffs.
        self.use_transposition = use_transposition and not pruning
        self.debug_top_k = max(1, debug_top_k)
        self.nodes_evaluated = 0
        self._ttable: Dict[Tuple[Tuple[Cell, ...], int, bool, Mark, Mark], float] = {}

    def choose_move(self, board: BoardState, bot_mark: Mark, opponent_mark: Mark) -> Position:
        """Choose the highest scoring move; the lowest index wins ties."""
        check_move_request(board, bot_mark, opponent_mark)

        scratch = board.clone()
        self._ttable.clear()
        self.nodes_evaluated = 0
        best_score = -math.inf
        best_move: Optional[Position] = None
        diagnostics: List[Tuple[Position, float]] = []

        for position in scratch.available_moves():
            with scratch.tentative(position, bot_mark):
                if self.pruning:
                    score = self.minimax(scratch, 0, False, bot_mark, opponent_mark, alpha=best_score)
                else:
                    score = self.minimax(scratch, 0, False, bot_mark, opponent_mark)
            diagnostics.append((position, score))
            if score > best_score:
                best_score = score
                best_move = position

        if best_move is None:
            raise NoMovesAvailable("No legal moves available.")
        self._log_diagnostics(diagnostics, best_move)
        LOGGER.debug(
            "Minimax selected %d with score %s after %d nodes",
            best_move,
            best_score,
            self.nodes_evaluated,
        )
        return best_move

    def minimax(
        self,
        board: BoardState,
        depth: int,
        maximizing: bool,
        bot_mark: Mark,
        opponent_mark: Mark,
        alpha: float = -math.inf,
        beta: float = math.inf,
    ) -> float:
        """
        Score a position from bot_mark's point of view.

        Wins score ``10 - depth`` and losses ``depth - 10`` so faster wins and
        slower losses are preferred; a full board without a line scores 0.
        """
        self.nodes_evaluated += 1

        if board.has_won(bot_mark):
            return WIN_SCORE - depth
        if board.has_won(opponent_mark):
            return depth - WIN_SCORE
        available = board.available_moves()
        if not available:
            return 0

        key = None
        if self.use_transposition:
            key = (board.cells, depth, maximizing, bot_mark, opponent_mark)
            if key in self._ttable:
                return self._ttable[key]

        mark = bot_mark if maximizing else opponent_mark
        if maximizing:
            best = -math.inf
            for position in available:
                with board.tentative(position, mark):
                    score = self.minimax(board, depth + 1, False, bot_mark, opponent_mark, alpha, beta)
                best = max(best, score)
                if self.pruning:
                    alpha = max(alpha, score)
                    if alpha >= beta:
                        break
        else:
            best = math.inf
            for position in available:
                with board.tentative(position, mark):
                    score = self.minimax(board, depth + 1, True, bot_mark, opponent_mark, alpha, beta)
                best = min(best, score)
                if self.pruning:
                    beta = min(beta, score)
                    if alpha >= beta:
                        break

        if key is not None:
            self._ttable[key] = best
        return best

    def score_moves(self, board: BoardState, bot_mark: Mark, opponent_mark: Mark) -> Dict[Position, float]:
        """Exact score of every available move, for analysis and hints."""
        check_move_request(board, bot_mark, opponent_mark)
        scratch = board.clone()
        self._ttable.clear()
        scores: Dict[Position, float] = {}
        for position in scratch.available_moves():
            with scratch.tentative(position, bot_mark):
                scores[position] = self.minimax(scratch, 0, False, bot_mark, opponent_mark)
        return scores

    def _log_diagnostics(self, diagnostics: List[Tuple[Position, float]], chosen: Position) -> None:
        """Emit top-k candidate breakdown when DEBUG is enabled."""
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        ranked = sorted(diagnostics, key=lambda item: item[1], reverse=True)
        for idx, (position, score) in enumerate(ranked[: self.debug_top_k], start=1):
            LOGGER.debug("Candidate #%d position=%d score=%s chosen=%s", idx, position, score, position == chosen)
