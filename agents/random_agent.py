"""
Random agent that picks uniformly from legal moves.
"""

from typing import Any, Dict, List, Optional

import numpy as np

from territory.board import Board, Player
from territory.move_generator import LegalMoveGenerator
from territory.moves import Move
from territory.pieces import Piece


class RandomAgent:
    """
    Random agent that selects moves uniformly from legal moves.

    Serves as a baseline opponent and as a driver for self-play.
    """

    def __init__(self, seed: Optional[int] = None):
        """
        Initialize random agent.

        Args:
            seed: Random seed for reproducible behavior
        """
        self.set_seed(seed)
        self.move_generator = LegalMoveGenerator()

    def select_action(self, board: Board, player: Player, legal_moves: List[Move]) -> Optional[Move]:
        """
        Select a random legal move.

        Returns:
            Selected move, or None if no legal moves available
        """
        if not legal_moves:
            return None
        move_idx = self.rng.randint(0, len(legal_moves))
        return legal_moves[move_idx]

    def choose_move(self, board: Board, player: Player, pieces: List[Piece]) -> Optional[Move]:
        """Generate the legal moves for ``pieces`` and pick one."""
        legal_moves = self.move_generator.get_legal_moves(board, player, pieces)
        return self.select_action(board, player, legal_moves)

    def get_action_info(self) -> Dict[str, Any]:
        return {
            "name": "RandomAgent",
            "type": "random",
            "description": "Selects moves uniformly from legal moves"
        }

    def set_seed(self, seed: Optional[int]):
        """Set random seed for reproducible behavior."""
        self.rng = np.random.RandomState(seed)
