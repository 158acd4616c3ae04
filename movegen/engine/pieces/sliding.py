from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from ..move import BOARD_SIZE, Move, square_of
from ..piece import Color, Piece, PieceKind

if TYPE_CHECKING:
    from ..board import Board


@dataclass(frozen=True)
class Direction:
    """Ray direction expressed as a per-step row/column delta."""

    name: str
    d_row: int
    d_col: int

    def step(self, row: int, col: int, i: int) -> Tuple[int, int]:
        return row + self.d_row * i, col + self.d_col * i

    def stops(self, row: int, col: int, i: int) -> bool:
        """True when step ``i`` would leave the board.

        Checking row and column separately keeps the ray from wrapping into
        a neighbouring rank through flat index arithmetic.
        """
        r, c = self.step(row, col, i)
        return not (0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE)


UP_RIGHT = Direction("up_right", 1, 1)
UP_LEFT = Direction("up_left", 1, -1)
DOWN_RIGHT = Direction("down_right", -1, 1)
DOWN_LEFT = Direction("down_left", -1, -1)
RIGHT = Direction("right", 0, 1)
LEFT = Direction("left", 0, -1)
UP = Direction("up", 1, 0)
DOWN = Direction("down", -1, 0)

DIAGONAL_DIRECTIONS: Tuple[Direction, ...] = (UP_RIGHT, UP_LEFT, DOWN_RIGHT, DOWN_LEFT)
LINEAR_DIRECTIONS: Tuple[Direction, ...] = (RIGHT, LEFT, UP, DOWN)


def cast_rays(
    board: "Board", square: int, color: Color, directions: Sequence[Direction]
) -> List[Move]:
    """Cast a ray from ``square`` along each of ``directions``.

    Each ray records empty squares and keeps going, records an enemy-occupied
    square and stops, or stops without recording at a friendly piece.
    Directions are independent of one another.

    Args:
        board (Board): Board to read.
        square (int): Origin square of the sliding piece.
        color (Color): Color of the sliding piece.
        directions (Sequence[Direction]): Rays to cast, in order.

    Returns:
        List[Move]: Moves ray by ray, nearest square first. May be empty.
    """
    row, col = divmod(square, BOARD_SIZE)
    moves: List[Move] = []
    for direction in directions:
        for i in range(1, BOARD_SIZE):
            if direction.stops(row, col, i):
                break
            target = square_of(*direction.step(row, col, i))
            occupant = board.get_piece(target)
            if occupant is None:
                moves.append(Move(square, target))
                continue
            if occupant.color is not color:
                moves.append(Move(square, target))
            break
    return moves


def directions_for(kind: PieceKind) -> Tuple[Direction, ...]:
    if kind is PieceKind.BISHOP:
        return DIAGONAL_DIRECTIONS
    if kind is PieceKind.ROOK:
        return LINEAR_DIRECTIONS
    if kind is PieceKind.QUEEN:
        return DIAGONAL_DIRECTIONS + LINEAR_DIRECTIONS
    raise ValueError(f"not a sliding piece: {kind.name.lower()}")


def generate_sliding_moves(board: "Board", square: int, piece: Piece) -> Optional[List[Move]]:
    """Bishop, rook and queen moves. Queens cast diagonals before lines."""
    moves = cast_rays(board, square, piece.color, directions_for(piece.kind))
    return moves or None
