"""
Console front end: board rendering, input parsing and the turn loop.

Everything here sits outside the engine. Malformed input is rejected with
InputError before the legality engine ever sees it.
"""

import logging
from typing import Callable, Sequence, Tuple

from pydantic import ValidationError

from schemas.move import MoveRequest

from .board import Board, Position
from .exceptions import InputError
from .game import BlokusGame, Outcome
from .pieces import Piece

logger = logging.getLogger(__name__)


def render_board(board: Board) -> str:
    """One character per cell: '.' when empty, the owner's number otherwise."""
    return str(board)


def format_pieces(pieces: Sequence[Piece]) -> str:
    """List pieces with their 0-based index and shape rows."""
    lines = []
    for index, piece in enumerate(pieces):
        rows = piece.shape.astype(int).tolist()
        lines.append(f"{index}: {piece.name} {rows}")
    return "\n".join(lines)


def _to_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InputError(f"{what} must be a whole number, got {token!r}") from None


def parse_piece_index(text: str, available: Sequence[Piece]) -> int:
    """
    Parse a 0-based piece index.

    Raises:
        InputError: non-numeric, negative, or not naming an available piece
    """
    tokens = text.split()
    if len(tokens) != 1:
        raise InputError("Enter exactly one piece index.")
    index = _to_int(tokens[0], "Piece index")
    if not 0 <= index < len(available):
        raise InputError(f"Invalid piece index {index}; choose 0-{len(available) - 1}.")
    return index


def parse_position(text: str) -> Position:
    """
    Parse a 'row col' pair.

    Raises:
        InputError: wrong token count, non-numeric or negative values
    """
    tokens = text.split()
    if len(tokens) != 2:
        raise InputError("Enter the row and column separated by a space.")
    row = _to_int(tokens[0], "Row")
    col = _to_int(tokens[1], "Column")
    try:
        request = MoveRequest(piece_index=0, anchor_row=row, anchor_col=col)
    except ValidationError as exc:
        raise InputError("Row and column must not be negative.") from exc
    return Position(request.anchor_row, request.anchor_col)


def prompt_move(game: BlokusGame, input_fn: Callable[[str], str],
                output_fn: Callable[[str], None]) -> Tuple[Piece, Position]:
    """Ask the current player for a move until a legal one has been applied."""
    while True:
        pieces = game.get_available_pieces()
        try:
            piece_index = parse_piece_index(
                input_fn("Enter the index of the piece you want to play (0-based): "), pieces)
            position = parse_position(
                input_fn("Enter the row and column where you want to place the piece: "))
        except InputError as exc:
            logger.debug(f"Rejected input from {game.get_current_player().name}: {exc}")
            output_fn(f"Invalid input: {exc}")
            continue

        verdict = game.make_move(piece_index, position)
        if verdict.is_legal:
            return pieces[piece_index], position
        output_fn(f"Invalid move: {verdict.message} Please try again.")


def run_console_game(game: BlokusGame, input_fn: Callable[[str], str] = input,
                     output_fn: Callable[[str], None] = print) -> Outcome:
    """
    Play a game on the console until every inventory is empty or the
    current player is blocked.

    Returns:
        The final Outcome
    """
    while not game.is_game_over():
        player = game.get_current_player()
        if not game.has_legal_moves():
            output_fn(f"{player.label} has no legal moves.")
            break
        output_fn(render_board(game.board))
        output_fn(f"Available pieces for {player.label}:")
        output_fn(format_pieces(game.get_available_pieces()))
        prompt_move(game, input_fn, output_fn)

    outcome = game.get_outcome()
    output_fn(render_board(game.board))
    output_fn(outcome.describe())
    return outcome
