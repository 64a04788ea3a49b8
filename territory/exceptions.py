"""
Exception hierarchy for the territory engine.

Illegal placements are not exceptions; they are reported through
LegalityVerdict. These exceptions cover contract violations (touching cells
outside the grid, applying a piece the player does not hold) and malformed
console input.
"""


class TerritoryError(Exception):
    """Base class for all territory engine errors."""


class OutOfBoundsError(TerritoryError, IndexError):
    """Raised when a board cell outside the grid is read or written."""

    def __init__(self, row: int, col: int, rows: int, cols: int):
        self.row = row
        self.col = col
        super().__init__(f"Cell ({row}, {col}) is outside the {rows}x{cols} board")


class CellOccupiedError(TerritoryError):
    """Raised when writing a cell that is already owned."""

    def __init__(self, row: int, col: int, owner):
        self.row = row
        self.col = col
        self.owner = owner
        super().__init__(f"Cell ({row}, {col}) is already owned by {owner.name}")


class PieceNotInInventoryError(TerritoryError, KeyError):
    """Raised when removing a piece the inventory does not hold."""

    def __init__(self, piece):
        self.piece = piece
        super().__init__(f"Piece {piece.name!r} is not in the inventory")

    def __str__(self):
        return self.args[0]


class InputError(TerritoryError, ValueError):
    """Raised by the console layer for malformed player input."""


class PlayerNotSeatedError(TerritoryError, KeyError):
    """Raised when a board is asked about a player who is not in the game."""

    def __init__(self, player):
        self.player = player
        super().__init__(f"{player.name} is not seated on this board")

    def __str__(self):
        return self.args[0]
