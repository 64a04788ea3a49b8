"""
Tests for the random agent and self-play matches.
"""

import unittest

from agents.arena import MatchResult, play_match
from agents.random_agent import RandomAgent
from schemas.game_config import GameConfig
from territory.board import Board, Player
from territory.game import BlokusGame
from tests.utils_game_states import TROMINO_I, TROMINO_L


class TestRandomAgent(unittest.TestCase):
    """Test the RandomAgent class."""

    def test_no_legal_moves(self):
        agent = RandomAgent(seed=0)
        self.assertIsNone(agent.select_action(Board(), Player.PLAYER1, []))
        self.assertIsNone(agent.choose_move(Board(), Player.PLAYER2, [TROMINO_L]))

    def test_choice_is_legal(self):
        agent = RandomAgent(seed=1)
        move = agent.choose_move(Board(), Player.PLAYER1, [TROMINO_L, TROMINO_I])
        self.assertIn(move.piece, [TROMINO_L, TROMINO_I])
        self.assertEqual(move.position.row, 0)
        self.assertEqual(move.position.col, 0)

    def test_same_seed_same_choices(self):
        game = BlokusGame()
        legal_moves = game.get_legal_moves()
        first = [RandomAgent(seed=5).select_action(game.board, Player.PLAYER1, legal_moves) for _ in range(3)]
        second = [RandomAgent(seed=5).select_action(game.board, Player.PLAYER1, legal_moves) for _ in range(3)]
        self.assertEqual(first, second)

    def test_set_seed_restarts_the_sequence(self):
        legal_moves = BlokusGame().get_legal_moves()
        agent = RandomAgent(seed=5)
        first = [agent.select_action(Board(), Player.PLAYER1, legal_moves) for _ in range(4)]
        agent.set_seed(5)
        again = [agent.select_action(Board(), Player.PLAYER1, legal_moves) for _ in range(4)]
        self.assertEqual(first, again)

    def test_action_info(self):
        info = RandomAgent().get_action_info()
        self.assertEqual(info["type"], "random")


class TestPlayMatch(unittest.TestCase):
    """Test self-play between random agents."""

    def test_sample_pieces_game_completes(self):
        for seed in range(5):
            result = play_match(GameConfig(seed=seed))
            self.assertIsInstance(result, MatchResult)
            self.assertTrue(result.completed)
            self.assertEqual(result.moves_made, 4)
            self.assertTrue(result.outcome.is_draw)
            self.assertEqual(len(result.history), 4)

    def test_seeded_matches_are_reproducible(self):
        first = play_match(GameConfig(seed=42))
        second = play_match(GameConfig(seed=42))
        self.assertEqual(first.history, second.history)

    def test_small_board_game(self):
        """On a 3x3 board each player has exactly one opening with the line."""
        result = play_match(GameConfig(rows=3, cols=3, pieces=["Tromino I"], seed=0))
        self.assertTrue(result.completed)
        self.assertEqual(result.moves_made, 2)
        self.assertEqual(result.history, [
            "Move(piece=Tromino I, anchor=(0, 0), player=PLAYER1)",
            "Move(piece=Tromino I, anchor=(2, 0), player=PLAYER2)",
        ])

    def test_blocked_on_tiny_board(self):
        config = GameConfig(rows=2, cols=2, pieces=["Tromino I"], seed=0)
        result = play_match(config)
        self.assertEqual(result.blocked_player, Player.PLAYER1)
        self.assertEqual(result.moves_made, 0)
        self.assertTrue(result.outcome.is_draw)


if __name__ == '__main__':
    unittest.main()
