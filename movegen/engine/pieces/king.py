from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from ..move import BOARD_SIZE, Move, square_of
from ..piece import Color, Piece

if TYPE_CHECKING:
    from ..board import Board


KING_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

KING_HOME = {Color.WHITE: 4, Color.BLACK: 60}


def _castling_moves(board: "Board", square: int, color: Color) -> List[Move]:
    # Rights flag and empty path only: attacked squares and the rook's
    # presence are not checked.
    if square != KING_HOME[color]:
        return []
    rights = board.castling_rights
    if color is Color.WHITE:
        kingside, queenside = rights.white_kingside, rights.white_queenside
    else:
        kingside, queenside = rights.black_kingside, rights.black_queenside

    moves: List[Move] = []
    if kingside and board.is_empty(square + 1) and board.is_empty(square + 2):
        moves.append(Move(square, square + 2))
    if queenside and board.is_empty(square - 1) and board.is_empty(square - 2):
        moves.append(Move(square, square - 2))
    return moves


def generate_king_moves(board: "Board", square: int, piece: Piece) -> Optional[List[Move]]:
    """One-step king moves followed by castling candidates."""
    row, col = divmod(square, BOARD_SIZE)
    moves: List[Move] = []
    for dr, dc in KING_OFFSETS:
        r, c = row + dr, col + dc
        if not (0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE):
            continue
        target = square_of(r, c)
        occupant = board.get_piece(target)
        if occupant is None or occupant.color is not piece.color:
            moves.append(Move(square, target))
    moves.extend(_castling_moves(board, square, piece.color))
    return moves or None
