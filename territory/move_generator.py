"""
Legal move generator.

Enumerates placements by asking the legality engine about every anchor at
which all of a piece's occupied cells land on the board. Because the engine is pure,
the board is never modified while scanning.
"""

import logging
import os
import time
from typing import Iterable, Iterator, List

from .board import Board, Player, Position
from .legality import evaluate
from .moves import Move
from .pieces import Piece, PiecePlacement

logger = logging.getLogger(__name__)

# Debug flag for move generation timing (controlled via environment variable)
MOVEGEN_DEBUG = bool(os.getenv("TERRITORY_MOVEGEN_DEBUG", ""))


class LegalMoveGenerator:
    """Generates legal moves for a given board state and player."""

    def get_legal_moves(self, board: Board, player: Player, pieces: Iterable[Piece]) -> List[Move]:
        """
        Get all legal moves for ``player`` using the given pieces.

        Pieces with identical shapes are only scanned once.

        Args:
            board: Current board state
            player: Player to generate moves for
            pieces: Pieces the player still holds

        Returns:
            List of legal moves, grouped by piece then in row-major anchor order
        """
        start = time.perf_counter()
        legal_moves = list(self._iter_legal_moves(board, player, pieces))
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        if MOVEGEN_DEBUG:
            logger.info(f"MoveGen: player={player.name}, legal_moves={len(legal_moves)}, elapsed_ms={elapsed_ms:.2f}")
        logger.debug(f"Legal move generation: {len(legal_moves)} moves in {elapsed_ms:.2f}ms for player={player.name}")
        return legal_moves

    def has_legal_moves(self, board: Board, player: Player, pieces: Iterable[Piece]) -> bool:
        """Check whether at least one legal move exists, stopping at the first."""
        return next(self._iter_legal_moves(board, player, pieces), None) is not None

    def _iter_legal_moves(self, board: Board, player: Player, pieces: Iterable[Piece]) -> Iterator[Move]:
        seen = set()
        for piece in pieces:
            if piece in seen:
                continue
            seen.add(piece)
            for anchor_row, anchor_col in PiecePlacement.get_valid_anchor_positions(board.shape, piece):
                position = Position(anchor_row, anchor_col)
                if evaluate(board, piece, position, player).is_legal:
                    yield Move(piece, position, player)
