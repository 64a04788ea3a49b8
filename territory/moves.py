"""
Move representation and the move applier.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .board import Board, Player, Position
from .exceptions import CellOccupiedError, PieceNotInInventoryError
from .pieces import Inventory, Piece, PiecePlacement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Move:
    """A candidate placement: which piece, where, and by whom."""
    piece: Piece
    position: Position
    player: Player

    def get_positions(self) -> List[Tuple[int, int]]:
        """Get the board cells this move would occupy."""
        return PiecePlacement.get_piece_positions(self.piece, self.position.row, self.position.col)

    def __str__(self):
        return f"Move(piece={self.piece.name}, anchor=({self.position.row}, {self.position.col}), player={self.player.name})"


def apply_move(board: Board, inventory: Inventory, piece: Piece, position: Position, player: Player) -> None:
    """
    Commit an already-validated placement.

    The caller must have obtained a legal verdict for exactly this
    (board, piece, position, player). The placement rules are not re-checked
    here, only that every target cell exists and is unowned.
    Every occupied cell is stamped with ``player`` and one piece of the same
    shape is removed from ``inventory``.

    Raises:
        PieceNotInInventoryError: if ``inventory`` holds no piece of that shape.
        OutOfBoundsError: if an occupied cell falls outside the board.
        CellOccupiedError: if an occupied cell is already owned.

    The board and inventory are left untouched whenever an error is raised.
    """
    if piece not in inventory:
        raise PieceNotInInventoryError(piece)

    cells = PiecePlacement.get_piece_positions(piece, position.row, position.col)
    for row, col in cells:
        if not board.is_empty(row, col):
            raise CellOccupiedError(row, col, board.cell_at(row, col))

    for row, col in cells:
        board.set_owner(row, col, player)

    removed = inventory.remove(piece)
    logger.debug(f"Applied {removed.name} at ({position.row},{position.col}) for {player.name}; "
                 f"{len(inventory)} pieces left")
