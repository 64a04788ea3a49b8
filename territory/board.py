"""
Board implementation: a fixed rows x cols grid of cell ownership.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .exceptions import CellOccupiedError, OutOfBoundsError, PlayerNotSeatedError


class Player(Enum):
    """Player enumeration. Games use the first ``num_players`` members."""
    PLAYER1 = 1
    PLAYER2 = 2
    PLAYER3 = 3
    PLAYER4 = 4

    @classmethod
    def for_count(cls, num_players: int) -> List["Player"]:
        """Return the players taking part in a game of ``num_players``."""
        members = list(cls)
        if not 2 <= num_players <= len(members):
            raise ValueError(f"num_players must be between 2 and {len(members)}, got {num_players}")
        return members[:num_players]

    @property
    def label(self) -> str:
        return f"Player {self.value}"


@dataclass(frozen=True)
class Position:
    """Represents a position on the board."""
    row: int
    col: int

    def offset(self, dr: int, dc: int) -> "Position":
        return Position(self.row + dr, self.col + dc)


EDGE_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
CORNER_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class Board:
    """
    Territory board.

    The grid stores 0 for an unowned cell and ``player.value`` for a cell
    owned by that player. Dimensions are fixed at creation and cells, once
    owned, are never released.
    """

    DEFAULT_SIZE = 14

    def __init__(self, rows: int = DEFAULT_SIZE, cols: int = DEFAULT_SIZE,
                 players: Optional[Iterable[Player]] = None):
        if rows < 1 or cols < 1:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.players = list(players) if players is not None else Player.for_count(2)
        self.grid = np.zeros((rows, cols), dtype=np.int8)
        self.player_start_corners: Dict[Player, Position] = {
            player: self._corner_for(player) for player in self.players
        }
        self._owned_counts: Dict[Player, int] = {player: 0 for player in self.players}

    def _corner_for(self, player: Player) -> Position:
        last_row, last_col = self.rows - 1, self.cols - 1
        corners = {
            Player.PLAYER1: Position(0, 0),
            Player.PLAYER2: Position(last_row, last_col),
            Player.PLAYER3: Position(0, last_col),
            Player.PLAYER4: Position(last_row, 0),
        }
        return corners[player]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def is_within_bounds(self, row: int, col: int) -> bool:
        """Check if a cell is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.is_within_bounds(row, col):
            raise OutOfBoundsError(row, col, self.rows, self.cols)

    def cell_at(self, row: int, col: int) -> Optional[Player]:
        """Get the owner of a cell, or None if it is unowned."""
        self._check_bounds(row, col)
        value = int(self.grid[row, col])
        if value == 0:
            return None
        return Player(value)

    def set_owner(self, row: int, col: int, player: Player) -> None:
        """Mark a cell as owned by ``player``. Only the move applier calls this."""
        self._check_bounds(row, col)
        current = self.cell_at(row, col)
        if current is not None:
            raise CellOccupiedError(row, col, current)
        self.grid[row, col] = player.value
        self._owned_counts[player] = self._owned_counts.get(player, 0) + 1

    def is_empty(self, row: int, col: int) -> bool:
        return self.cell_at(row, col) is None

    def is_seated(self, player: Player) -> bool:
        return player in self.player_start_corners

    def start_corner(self, player: Player) -> Position:
        if not self.is_seated(player):
            raise PlayerNotSeatedError(player)
        return self.player_start_corners[player]

    def owned_cell_count(self, player: Player) -> int:
        return self._owned_counts.get(player, 0)

    def has_placed(self, player: Player) -> bool:
        """True once ``player`` owns at least one cell."""
        return self.owned_cell_count(player) > 0

    def get_edge_adjacent_positions(self, pos: Position) -> List[Position]:
        """Get on-board positions that share an edge with ``pos``."""
        return [pos.offset(dr, dc) for dr, dc in EDGE_OFFSETS
                if self.is_within_bounds(pos.row + dr, pos.col + dc)]

    def get_corner_adjacent_positions(self, pos: Position) -> List[Position]:
        """Get on-board positions that touch ``pos`` only at a corner."""
        return [pos.offset(dr, dc) for dr, dc in CORNER_OFFSETS
                if self.is_within_bounds(pos.row + dr, pos.col + dc)]

    def copy(self) -> "Board":
        """Create a deep copy of the board."""
        new_board = Board(self.rows, self.cols, self.players)
        # Only the grid and the owned-cell counters change after construction
        new_board.grid = self.grid.copy()
        new_board._owned_counts = self._owned_counts.copy()
        return new_board

    def __str__(self) -> str:
        """One character per cell: '.' for empty, the player number otherwise."""
        result = []
        for row in range(self.rows):
            row_str = ""
            for col in range(self.cols):
                value = self.grid[row, col]
                row_str += "." if value == 0 else str(value)
            result.append(row_str)
        return "\n".join(result)
