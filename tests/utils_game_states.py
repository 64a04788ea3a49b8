"""
Utility functions for building test board states.
"""

from typing import Dict, Iterable, Tuple

from territory.board import Board, Player
from territory.pieces import Piece, PieceGenerator

TROMINO_L = PieceGenerator.get_piece_by_name("Tromino L")
TROMINO_I = PieceGenerator.get_piece_by_name("Tromino I")


def board_with_cells(owned: Dict[Player, Iterable[Tuple[int, int]]],
                     rows: int = 14, cols: int = 14) -> Board:
    """
    Build a board where each player owns the given cells.

    Cells are stamped directly, bypassing the legality engine, so tests can
    set up positions that would take several moves to reach.
    """
    board = Board(rows, cols)
    for player, cells in owned.items():
        for row, col in cells:
            board.set_owner(row, col, player)
    return board


def piece(*rows: str) -> Piece:
    """Build a piece from strings where '#' marks an occupied cell."""
    return Piece("test piece", [[char == "#" for char in row] for row in rows])
