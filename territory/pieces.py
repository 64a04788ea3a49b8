"""
Piece definitions, the sample piece catalog and per-player inventories.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .exceptions import PieceNotInInventoryError

logger = logging.getLogger(__name__)


class Piece:
    """
    A polyomino described by a boolean occupancy mask over its bounding box.

    The mask is copied and frozen on construction. Two pieces are equal when
    their masks are equal; the name is descriptive only.
    """

    __slots__ = ("name", "shape", "_offsets")

    def __init__(self, name: str, shape):
        try:
            mask = np.array(shape, dtype=bool)
        except ValueError as exc:
            raise ValueError(f"Piece {name!r} shape must be rectangular") from exc
        if mask.ndim != 2:
            raise ValueError("Piece shape must be 2D")
        mask.setflags(write=False)
        self.name = name
        self.shape = mask
        self._offsets = shape_to_offsets(mask)

    @classmethod
    def from_rows(cls, name: str, rows: Sequence[Sequence[bool]]) -> "Piece":
        """Build a piece from nested rows, rejecting ragged input."""
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise ValueError(f"Piece {name!r} rows have differing lengths: {sorted(widths)}")
        return cls(name, rows)

    @property
    def offsets(self) -> List[Tuple[int, int]]:
        """(row, col) offsets of the occupied cells, in row-major order."""
        return list(self._offsets)

    @property
    def size(self) -> int:
        """Number of occupied cells."""
        return len(self._offsets)

    @property
    def height(self) -> int:
        return self.shape.shape[0]

    @property
    def width(self) -> int:
        return self.shape.shape[1]

    def __eq__(self, other):
        if not isinstance(other, Piece):
            return NotImplemented
        return np.array_equal(self.shape, other.shape)

    def __hash__(self):
        return hash((self.shape.shape, self.shape.tobytes()))

    def __repr__(self):
        return f"Piece({self.name!r}, {self.shape.astype(int).tolist()})"

    def __str__(self):
        return "\n".join("".join("#" if cell else "." for cell in row) for row in self.shape)


def shape_to_offsets(shape: np.ndarray) -> List[Tuple[int, int]]:
    """
    Convert a shape mask to a list of (row, col) offsets.

    Args:
        shape: 2D boolean array, True where cells are occupied

    Returns:
        List of (row, col) tuples for occupied cells
    """
    rows, cols = np.nonzero(shape)
    return [(int(r), int(c)) for r, c in zip(rows, cols)]


class PieceGenerator:
    """Builds the sample pieces every player starts with."""

    SAMPLE_SHAPES = {
        "Tromino L": [[True, True], [True, False]],
        "Tromino I": [[True, True, True]],
    }

    @staticmethod
    def get_sample_pieces() -> List[Piece]:
        """Get the sample pieces, in catalog order."""
        return [Piece(name, shape) for name, shape in PieceGenerator.SAMPLE_SHAPES.items()]

    @staticmethod
    def get_piece_by_name(name: str) -> Optional[Piece]:
        """Get a sample piece by its name."""
        shape = PieceGenerator.SAMPLE_SHAPES.get(name)
        if shape is None:
            return None
        return Piece(name, shape)

    @staticmethod
    def build_pieces(names: Iterable[str]) -> List[Piece]:
        """Build pieces for the given catalog names, raising on unknown names."""
        pieces = []
        for name in names:
            piece = PieceGenerator.get_piece_by_name(name)
            if piece is None:
                raise ValueError(f"Unknown piece name: {name!r}")
            pieces.append(piece)
        return pieces


class PiecePlacement:
    """Helper class for piece placement calculations."""

    @staticmethod
    def get_piece_positions(piece: Piece, anchor_row: int, anchor_col: int) -> List[Tuple[int, int]]:
        """
        Get the board cells a piece would occupy when placed at an anchor.

        Args:
            piece: Piece to place
            anchor_row: Row of the top-left of the piece's bounding box
            anchor_col: Column of the top-left of the piece's bounding box

        Returns:
            List of (row, col) tuples representing occupied positions
        """
        return [(anchor_row + dr, anchor_col + dc) for dr, dc in piece.offsets]

    @staticmethod
    def get_valid_anchor_positions(board_shape: Tuple[int, int], piece: Piece) -> List[Tuple[int, int]]:
        """
        Get every anchor at which all of the piece's occupied cells land on the board.

        Empty mask cells may hang off the edge, so anchors can be negative or
        leave part of the bounding box outside the board.

        Args:
            board_shape: (height, width) of the board
            piece: Piece to place

        Returns:
            List of (row, col) anchors in row-major order
        """
        offsets = piece.offsets
        if not offsets:
            return []
        board_height, board_width = board_shape
        row_offsets = [dr for dr, _ in offsets]
        col_offsets = [dc for _, dc in offsets]
        return [
            (row, col)
            for row in range(-min(row_offsets), board_height - max(row_offsets))
            for col in range(-min(col_offsets), board_width - max(col_offsets))
        ]


class Inventory:
    """Ordered collection of the pieces a player has not placed yet."""

    def __init__(self, pieces: Optional[Iterable[Piece]] = None):
        self._pieces: List[Piece] = list(pieces) if pieces is not None else []

    @property
    def pieces(self) -> List[Piece]:
        return list(self._pieces)

    def remove(self, piece: Piece) -> Piece:
        """
        Remove the first piece whose shape equals ``piece``.

        Raises:
            PieceNotInInventoryError: if no piece of that shape remains
        """
        for index, candidate in enumerate(self._pieces):
            if candidate == piece:
                logger.debug(f"Removing {candidate.name} at index {index}")
                return self._pieces.pop(index)
        raise PieceNotInInventoryError(piece)

    def is_empty(self) -> bool:
        return not self._pieces

    def __contains__(self, piece) -> bool:
        return piece in self._pieces

    def __getitem__(self, index: int) -> Piece:
        return self._pieces[index]

    def __iter__(self) -> Iterator[Piece]:
        return iter(list(self._pieces))

    def __len__(self) -> int:
        return len(self._pieces)

    def __repr__(self):
        return f"Inventory({[piece.name for piece in self._pieces]})"
