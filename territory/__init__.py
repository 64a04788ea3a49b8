"""
Territory placement game engine package.

This package contains the core game logic, including:
- Board and player definitions
- Piece shapes and inventories
- Move legality evaluation
- Move application
- Terminal condition and outcome
"""

from .board import Board, Player, Position
from .exceptions import (
    CellOccupiedError,
    InputError,
    OutOfBoundsError,
    PieceNotInInventoryError,
    PlayerNotSeatedError,
    TerritoryError,
)
from .game import BlokusGame, Outcome, determine_outcome, is_game_over
from .legality import IllegalReason, LegalityVerdict, evaluate
from .move_generator import LegalMoveGenerator
from .moves import Move, apply_move
from .pieces import Inventory, Piece, PieceGenerator, PiecePlacement

__all__ = [
    'Board', 'Player', 'Position',
    'Piece', 'PieceGenerator', 'PiecePlacement', 'Inventory',
    'IllegalReason', 'LegalityVerdict', 'evaluate',
    'Move', 'apply_move', 'LegalMoveGenerator',
    'BlokusGame', 'Outcome', 'is_game_over', 'determine_outcome',
    'TerritoryError', 'OutOfBoundsError', 'CellOccupiedError',
    'PieceNotInInventoryError', 'PlayerNotSeatedError', 'InputError',
]
