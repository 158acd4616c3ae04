from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..move import Move
from ..piece import Piece, PieceKind
from .king import generate_king_moves
from .knight import generate_knight_moves
from .pawn import generate_pawn_moves
from .sliding import generate_sliding_moves

if TYPE_CHECKING:
    from ..board import Board


def generate_piece_moves(board: "Board", square: int, piece: Piece) -> Optional[List[Move]]:
    """Dispatch to the move generator for ``piece.kind``.

    Returns:
        Optional[List[Move]]: A non-empty move list, or ``None`` when the
            piece has nowhere to go.
    """
    kind = piece.kind
    if kind is PieceKind.PAWN:
        return generate_pawn_moves(board, square, piece)
    if kind is PieceKind.KNIGHT:
        return generate_knight_moves(board, square, piece)
    if kind is PieceKind.KING:
        return generate_king_moves(board, square, piece)
    # Bishop, rook, queen
    return generate_sliding_moves(board, square, piece)
