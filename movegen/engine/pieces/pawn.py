from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..move import BOARD_SIZE, Move, square_of
from ..piece import Color, Piece

if TYPE_CHECKING:
    from ..board import Board


STARTING_ROW = {Color.WHITE: 1, Color.BLACK: 6}
DIRECTION = {Color.WHITE: 1, Color.BLACK: -1}


def _push(board: "Board", square: int, row: int, col: int) -> Optional[Move]:
    target = square_of(row, col)
    if board.is_empty(target):
        return Move(square, target)
    return None


def _double_push(
    board: "Board", square: int, row: int, col: int, color: Color, single_allowed: bool
) -> Optional[Move]:
    if not single_allowed or row != STARTING_ROW[color]:
        return None
    target = square_of(row + 2 * DIRECTION[color], col)
    if board.is_empty(target):
        return Move(square, target)
    return None


def _capture(board: "Board", square: int, row: int, col: int, color: Color) -> Optional[Move]:
    if col < 0 or col >= BOARD_SIZE:
        return None
    target = square_of(row, col)
    occupant = board.get_piece(target)
    if occupant is not None and occupant.color is not color:
        return Move(square, target)
    return None


def generate_pawn_moves(board: "Board", square: int, piece: Piece) -> Optional[List[Move]]:
    """Generate pawn pushes and diagonal captures.

    Args:
        board (Board): Board to read.
        square (int): Square the pawn stands on.
        piece (Piece): The pawn; its color sets the push direction.

    Returns:
        Optional[List[Move]]: Single push, double push from the starting
            row (only when the single push square is also empty), then the
            left and right captures. ``None`` when nothing is available.

    Notes:
        En passant and promotion are not generated. A pawn on the last row
        in its direction yields no moves.
    """
    color = piece.color
    row, col = divmod(square, BOARD_SIZE)
    new_row = row + DIRECTION[color]
    if new_row < 0 or new_row >= BOARD_SIZE:
        return None

    moves: List[Move] = []
    single = _push(board, square, new_row, col)
    if single is not None:
        moves.append(single)
    double = _double_push(board, square, row, col, color, single is not None)
    if double is not None:
        moves.append(double)
    for capture_col in (col - 1, col + 1):
        capture = _capture(board, square, new_row, capture_col, color)
        if capture is not None:
            moves.append(capture)
    return moves or None
