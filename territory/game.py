"""
Game state, terminal condition and outcome.

BlokusGame bundles the board, the per-player inventories and whose turn it
is, so callers pass one explicit value around instead of sharing globals.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Sequence

from schemas.game_config import GameConfig

from .board import Board, Player, Position
from .legality import LegalityVerdict, evaluate
from .move_generator import LegalMoveGenerator
from .moves import Move, apply_move
from .pieces import Inventory, Piece, PieceGenerator

logger = logging.getLogger(__name__)


@dataclass
class Outcome:
    """
    Final standing computed from remaining piece counts.

    Attributes:
        remaining: Number of pieces each player still holds
        winners: Players holding the fewest pieces (more than one on a draw)
        is_draw: True if more than one player shares the fewest pieces
    """
    remaining: Dict[Player, int]
    winners: List[Player] = field(default_factory=list)
    is_draw: bool = False

    @property
    def winner(self) -> Optional[Player]:
        """The single winner, or None on a draw."""
        if self.is_draw or not self.winners:
            return None
        return self.winners[0]

    def describe(self) -> str:
        if self.winner is None:
            return "It's a draw!"
        return f"{self.winner.label} wins!"


def is_game_over(inventories: Mapping[Player, Inventory]) -> bool:
    """True iff every player's inventory is empty."""
    return all(len(inventory) == 0 for inventory in inventories.values())


def determine_outcome(inventories: Mapping[Player, Inventory]) -> Outcome:
    """Fewer remaining pieces wins; a shared minimum is a draw."""
    remaining = {player: len(inventory) for player, inventory in inventories.items()}
    if not remaining:
        return Outcome(remaining={}, winners=[], is_draw=True)
    fewest = min(remaining.values())
    winners = [player for player, count in remaining.items() if count == fewest]
    return Outcome(remaining=remaining, winners=winners, is_draw=len(winners) > 1)


def next_player(players: Sequence[Player], current: Player) -> Player:
    """The player after ``current`` in turn order."""
    index = list(players).index(current)
    return players[(index + 1) % len(players)]


class BlokusGame:
    """Game state for one session: board, inventories and turn order."""

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.players = Player.for_count(self.config.num_players)
        self.board = Board(self.config.rows, self.config.cols, self.players)
        self.inventories: Dict[Player, Inventory] = {
            player: Inventory(PieceGenerator.build_pieces(self.config.pieces))
            for player in self.players
        }
        self.current_player = self.players[0]
        self.move_count = 0
        self.history: List[Move] = []
        self.move_generator = LegalMoveGenerator()
        logger.info(f"New game: {self.config.rows}x{self.config.cols} board, "
                    f"{len(self.players)} players, pieces={self.config.pieces}")

    def get_current_player(self) -> Player:
        return self.current_player

    def get_available_pieces(self, player: Optional[Player] = None) -> List[Piece]:
        """Pieces the player (default: current player) has not placed yet."""
        return self.inventories[player or self.current_player].pieces

    def _piece_at(self, piece_index: int) -> Piece:
        pieces = self.get_available_pieces()
        if not 0 <= piece_index < len(pieces):
            raise IndexError(f"Piece index {piece_index} out of range for {len(pieces)} pieces")
        return pieces[piece_index]

    def evaluate_move(self, piece_index: int, position: Position) -> LegalityVerdict:
        """Evaluate a placement for the current player without applying it."""
        return evaluate(self.board, self._piece_at(piece_index), position, self.current_player)

    def make_move(self, piece_index: int, position: Position) -> LegalityVerdict:
        """
        Evaluate and, when legal, apply a move for the current player.

        On success the move is recorded and the turn passes to the next
        player unless the game is over. Illegal moves leave the state untouched.

        Raises:
            IndexError: if ``piece_index`` does not name an available piece
        """
        player = self.current_player
        piece = self._piece_at(piece_index)
        verdict = evaluate(self.board, piece, position, player)
        if not verdict.is_legal:
            logger.info(f"{player.name} move rejected: {piece.name} at ({position.row},{position.col}) "
                        f"- {verdict.reason.value}")
            return verdict

        apply_move(self.board, self.inventories[player], piece, position, player)
        self.history.append(Move(piece, position, player))
        self.move_count += 1
        logger.info(f"{player.name} placed {piece.name} at ({position.row},{position.col}) "
                    f"(move {self.move_count})")

        if self.is_game_over():
            logger.info(f"Game over after {self.move_count} moves: {self.get_outcome().describe()}")
        else:
            self.current_player = next_player(self.players, player)
        return verdict

    def has_legal_moves(self, player: Optional[Player] = None) -> bool:
        player = player or self.current_player
        return self.move_generator.has_legal_moves(self.board, player, self.inventories[player].pieces)

    def get_legal_moves(self, player: Optional[Player] = None) -> List[Move]:
        player = player or self.current_player
        return self.move_generator.get_legal_moves(self.board, player, self.inventories[player].pieces)

    def is_game_over(self) -> bool:
        return is_game_over(self.inventories)

    def get_outcome(self) -> Outcome:
        return determine_outcome(self.inventories)
