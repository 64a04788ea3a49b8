"""
Move legality engine.

``evaluate`` decides whether a piece may be placed at an anchor position for
a player. It never mutates the board and never raises for a candidate move
by a seated player, so it can be called speculatively by move generators
and agents.

Rules:
1. Every occupied cell of the piece must be on the board and unowned.
2. A player's first piece must cover that player's start corner.
3. Later pieces must not share an edge with the player's own cells and must
   touch at least one of them at a corner.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import Board, Player, Position
from .exceptions import PlayerNotSeatedError
from .pieces import Piece

logger = logging.getLogger(__name__)


class IllegalReason(Enum):
    """Why a placement was rejected."""
    OUT_OF_BOUNDS = "out_of_bounds"
    OVERLAP = "overlap"
    MISSING_CORNER_START = "missing_corner_start"
    EDGE_ADJACENCY_TO_OWN_COLOR = "edge_adjacency_to_own_color"
    NO_CORNER_ADJACENCY_TO_OWN_COLOR = "no_corner_adjacency_to_own_color"
    EMPTY_PIECE = "empty_piece"


REASON_MESSAGES = {
    IllegalReason.OUT_OF_BOUNDS: "Piece extends past the edge of the board.",
    IllegalReason.OVERLAP: "Piece overlaps a cell that is already owned.",
    IllegalReason.MISSING_CORNER_START: "First move must occupy your starting corner.",
    IllegalReason.EDGE_ADJACENCY_TO_OWN_COLOR: "Piece touches your own color edge-to-edge.",
    IllegalReason.NO_CORNER_ADJACENCY_TO_OWN_COLOR: "Piece must touch your own color at a corner.",
    IllegalReason.EMPTY_PIECE: "Piece has no occupied cells.",
}


@dataclass(frozen=True)
class LegalityVerdict:
    """Result of evaluating a candidate placement."""
    is_legal: bool
    reason: Optional[IllegalReason] = None

    @classmethod
    def legal(cls) -> "LegalityVerdict":
        return cls(True)

    @classmethod
    def illegal(cls, reason: IllegalReason) -> "LegalityVerdict":
        return cls(False, reason)

    @property
    def message(self) -> str:
        """Diagnostic text; branch on ``is_legal``/``reason`` instead of parsing it."""
        if self.is_legal:
            return "Move is legal."
        return REASON_MESSAGES[self.reason]

    def __bool__(self):
        return self.is_legal


def evaluate(board: Board, piece: Piece, position: Position, player: Player) -> LegalityVerdict:
    """
    Decide whether ``piece`` anchored at ``position`` is a legal move for ``player``.

    Args:
        board: Current board (read only)
        piece: Piece to place
        position: Anchor for the top-left of the piece's bounding box
        player: Player making the move, seated on ``board``

    Returns:
        LegalityVerdict, legal or carrying the IllegalReason

    Raises:
        PlayerNotSeatedError: if ``player`` is not one of the board's players.
    """
    if not board.is_seated(player):
        raise PlayerNotSeatedError(player)

    offsets = piece.offsets
    if not offsets:
        return _reject(IllegalReason.EMPTY_PIECE, piece, position, player)

    cells = [position.offset(dr, dc) for dr, dc in offsets]

    # Bounds first so an off-board placement is always reported as such
    for cell in cells:
        if not board.is_within_bounds(cell.row, cell.col):
            return _reject(IllegalReason.OUT_OF_BOUNDS, piece, position, player)

    grid = board.grid
    player_value = player.value
    touches_edge = False
    touches_corner = False

    for cell in cells:
        if grid[cell.row, cell.col] != 0:
            return _reject(IllegalReason.OVERLAP, piece, position, player)

        if any(grid[n.row, n.col] == player_value for n in board.get_edge_adjacent_positions(cell)):
            touches_edge = True
        if any(grid[n.row, n.col] == player_value for n in board.get_corner_adjacent_positions(cell)):
            touches_corner = True

    if not board.has_placed(player):
        if board.start_corner(player) not in cells:
            return _reject(IllegalReason.MISSING_CORNER_START, piece, position, player)
        return LegalityVerdict.legal()

    if touches_edge:
        return _reject(IllegalReason.EDGE_ADJACENCY_TO_OWN_COLOR, piece, position, player)
    if not touches_corner:
        return _reject(IllegalReason.NO_CORNER_ADJACENCY_TO_OWN_COLOR, piece, position, player)

    return LegalityVerdict.legal()


def is_legal_move(board: Board, piece: Piece, position: Position, player: Player) -> bool:
    """Convenience wrapper returning only whether the move is legal."""
    return evaluate(board, piece, position, player).is_legal


def _reject(reason: IllegalReason, piece: Piece, position: Position, player: Player) -> LegalityVerdict:
    logger.debug(f"Rejected {piece.name} at ({position.row},{position.col}) for {player.name}: {reason.value}")
    return LegalityVerdict.illegal(reason)
