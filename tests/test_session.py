import random
import unittest

from ai.move_engine import MoveEngine
from engine.config import Difficulty, FirstTurn, GameMode, SessionConfig
from engine.errors import GameNotInProgress, IllegalPlacement, InvalidConfiguration, NotYourTurn
from engine.marks import Mark
from engine.session import GameSession, GameStatus


def bot_session(**settings):
    config = SessionConfig(mode=GameMode.BOT, **settings)
    return GameSession(config, move_engine=MoveEngine(seed=9))


class TestPvpSession(unittest.TestCase):
    def test_cannot_move_before_start(self):
        session = GameSession()
        self.assertIs(session.status, GameStatus.NOT_STARTED)
        with self.assertRaises(GameNotInProgress):
            session.play_human(0)

    def test_turns_alternate_starting_with_x(self):
        session = GameSession()
        session.start()
        self.assertIs(session.current_turn, Mark.X)
        session.play_human(4)
        self.assertIs(session.current_turn, Mark.O)
        result = session.play_human(0)
        self.assertIs(result.mark, Mark.O)
        self.assertIs(session.board.get_cell(0), Mark.O)
        self.assertFalse(result.game_over)

    def test_occupied_cell_keeps_turn(self):
        session = GameSession()
        session.start()
        session.play_human(4)
        with self.assertRaises(IllegalPlacement):
            session.play_human(4)
        self.assertIs(session.current_turn, Mark.O)

    def test_win_ends_game(self):
        session = GameSession()
        session.start()
        for position in (0, 3, 1, 4):
            session.play_human(position)
        result = session.play_human(2)
        self.assertEqual(result.winner, Mark.X)
        self.assertIs(session.status, GameStatus.WON)
        self.assertEqual(session.winning_line, (0, 1, 2))
        self.assertEqual(session.result_message(), "X Wins!")
        with self.assertRaises(GameNotInProgress):
            session.play_human(8)

    def test_draw_ends_game(self):
        session = GameSession()
        session.start()
        # X O X / X O O / O X X
        for position in (0, 1, 2, 4, 3, 5, 7, 6, 8):
            result = session.play_human(position)
        self.assertTrue(result.is_draw)
        self.assertIs(session.status, GameStatus.DRAW)
        self.assertEqual(session.result_message(), "It's a Draw!")

    def test_restart_after_game_over(self):
        session = GameSession()
        session.start()
        for position in (0, 3, 1, 4, 2):
            session.play_human(position)
        session.start()
        self.assertIs(session.status, GameStatus.IN_PROGRESS)
        self.assertEqual(session.board.available_moves(), list(range(9)))
        self.assertIsNone(session.winner)
        self.assertIsNone(session.result_message())

    def test_sessions_are_independent(self):
        first, second = GameSession(), GameSession()
        first.start()
        second.start()
        first.play_human(4)
        self.assertTrue(second.board.is_empty(4))
        self.assertIs(second.current_turn, Mark.X)

    def test_bot_move_rejected_in_pvp(self):
        session = GameSession()
        session.start()
        with self.assertRaises(NotYourTurn):
            session.play_bot()


class TestBotSession(unittest.TestCase):
    def test_bot_mode_requires_engine(self):
        session = GameSession(SessionConfig(mode=GameMode.BOT))
        with self.assertRaises(InvalidConfiguration):
            session.start()

    def test_player_moves_first_by_default(self):
        session = bot_session()
        session.start()
        self.assertFalse(session.is_bot_turn())
        session.play_human(0)
        self.assertTrue(session.is_bot_turn())
        with self.assertRaises(NotYourTurn):
            session.play_human(1)
        result = session.play_bot()
        self.assertIs(result.mark, Mark.O)
        self.assertFalse(session.is_bot_turn())

    def test_bot_first_uses_bot_mark(self):
        session = bot_session(first_turn=FirstTurn.BOT, difficulty=Difficulty.HARD)
        session.start()
        self.assertTrue(session.is_bot_turn())
        self.assertIs(session.current_turn, Mark.O)
        result = session.play_bot()
        self.assertEqual(result.position, 0)
        self.assertIs(session.board.get_cell(0), Mark.O)
        with self.assertRaises(NotYourTurn):
            session.play_bot()

    def test_player_can_choose_o(self):
        session = bot_session(player_mark="O", first_turn="player")
        session.start()
        self.assertIs(session.current_turn, Mark.O)
        session.play_human(4)
        self.assertIs(session.play_bot().mark, Mark.X)

    def test_hard_bot_blocks(self):
        session = bot_session(difficulty=Difficulty.HARD)
        session.start()
        session.play_human(0)
        session.play_bot()
        free = [p for p in (1, 3) if session.board.is_empty(p)]
        session.play_human(free[0])
        threat = 2 if free[0] == 1 else 6
        self.assertEqual(session.play_bot().position, threat)

    def test_hard_bot_never_loses_against_random_player(self):
        rng = random.Random(21)
        for first in (FirstTurn.PLAYER, FirstTurn.BOT):
            session = bot_session(difficulty=Difficulty.HARD, first_turn=first)
            for _ in range(5):
                session.start()
                while session.in_progress:
                    if session.is_bot_turn():
                        session.play_bot()
                    else:
                        session.play_human(rng.choice(session.board.available_moves()))
                self.assertNotEqual(session.winner, Mark.X)

    def test_reconfigure_restarts(self):
        session = bot_session()
        session.start()
        session.play_human(4)
        session.reconfigure(first_turn="bot", difficulty="easy")
        self.assertIs(session.config.difficulty, Difficulty.EASY)
        self.assertEqual(session.board.available_moves(), list(range(9)))
        self.assertTrue(session.is_bot_turn())

    def test_reconfigure_switches_player_mark(self):
        session = bot_session()
        session.start()
        session.reconfigure(mode="bot", difficulty="hard", first_turn="bot", player_mark="O")
        self.assertIs(session.config.player_mark, Mark.O)
        self.assertIs(session.config.bot_mark, Mark.X)
        self.assertTrue(session.is_bot_turn())
        self.assertIs(session.play_bot().mark, Mark.X)

    def test_reconfigure_rejects_unknown_values(self):
        session = bot_session()
        session.start()
        with self.assertRaises(InvalidConfiguration):
            session.reconfigure(difficulty="nightmare")
        self.assertIs(session.config.difficulty, Difficulty.HARD)

    def test_rejected_reconfigure_keeps_game_and_settings(self):
        session = GameSession()
        session.start()
        session.play_human(4)
        with self.assertRaises(InvalidConfiguration):
            session.reconfigure(mode="bot")
        self.assertIs(session.config.mode, GameMode.PVP)
        self.assertIs(session.status, GameStatus.IN_PROGRESS)
        self.assertIs(session.board.get_cell(4), Mark.X)
        session.play_human(0)
        self.assertFalse(session.is_bot_turn())
        with self.assertRaises(NotYourTurn):
            session.play_bot()


if __name__ == "__main__":
    unittest.main()
