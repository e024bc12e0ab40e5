import unittest

from ai.heuristic_ai import HeuristicAI
from ai.minimax_ai import MinimaxAI
from ai.move_engine import MoveEngine
from ai.random_ai import RandomAI
from engine.board import BoardState
from engine.config import Difficulty
from engine.errors import InvalidConfiguration, NoMovesAvailable
from engine.marks import Mark


class TestMoveEngine(unittest.TestCase):
    def setUp(self):
        self.engine = MoveEngine(seed=5)

    def test_every_difficulty_has_a_strategy(self):
        self.assertIsInstance(self.engine.strategy_for(Difficulty.EASY), RandomAI)
        self.assertIsInstance(self.engine.strategy_for(Difficulty.MEDIUM), HeuristicAI)
        self.assertIsInstance(self.engine.strategy_for(Difficulty.HARD), MinimaxAI)
        self.assertEqual(set(self.engine.strategies), set(Difficulty))

    def test_accepts_difficulty_names(self):
        board = BoardState.from_string("XX.O.....")
        self.assertEqual(self.engine.choose_move(board, Mark.O, Mark.X, "hard"), 2)
        self.assertEqual(self.engine.choose_move(board, Mark.O, Mark.X, " Medium "), 2)

    def test_easy_returns_an_available_position(self):
        board = BoardState.from_string("XOXOX....")
        for _ in range(50):
            move = self.engine.choose_move(board, Mark.O, Mark.X, Difficulty.EASY)
            self.assertIn(move, board.available_moves())

    def test_hard_wins_immediately(self):
        board = BoardState.from_string("OO.XX....")
        self.assertEqual(self.engine.choose_move(board, Mark.O, Mark.X, Difficulty.HARD), 2)

    def test_unknown_difficulty_is_rejected(self):
        for bad in ("impossible", "", None, 3):
            with self.assertRaises(InvalidConfiguration):
                self.engine.choose_move(BoardState(), Mark.O, Mark.X, bad)

    def test_full_board_is_rejected(self):
        with self.assertRaises(NoMovesAvailable):
            self.engine.choose_move(BoardState.from_string("XOXXOOOXX"), Mark.O, Mark.X, Difficulty.EASY)

    def test_identical_marks_are_rejected(self):
        with self.assertRaises(InvalidConfiguration):
            self.engine.choose_move(BoardState(), Mark.O, Mark.O, Difficulty.HARD)

    def test_board_is_not_modified(self):
        board = BoardState.from_string("X...O....")
        before = board.clone()
        for level in Difficulty:
            self.engine.choose_move(board, Mark.X, Mark.O, level)
        self.assertEqual(board, before)

    def test_pruning_engine_agrees(self):
        board = BoardState.from_string("X...O...X")
        pruned = MoveEngine(seed=5, pruning=True)
        self.assertEqual(
            pruned.choose_move(board, Mark.O, Mark.X, Difficulty.HARD),
            self.engine.choose_move(board, Mark.O, Mark.X, Difficulty.HARD),
        )


if __name__ == "__main__":
    unittest.main()
