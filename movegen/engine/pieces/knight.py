from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from ..move import BOARD_SIZE, Move, square_of
from ..piece import Piece

if TYPE_CHECKING:
    from ..board import Board


# (row, col) offsets in a fixed enumeration order
KNIGHT_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-2, 1),
    (-2, -1),
    (-1, 2),
    (-1, -2),
    (1, 2),
    (1, -2),
    (2, 1),
    (2, -1),
)

# Index is the origin square, value the reachable target squares
KnightTable = Tuple[Tuple[int, ...], ...]


def precompute_knight_targets() -> KnightTable:
    """Precompute the knight targets for every square on the board.

    Offsets that land off-board are dropped, so corner squares keep two
    targets and central squares keep all eight. Targets for each square are
    ordered like ``KNIGHT_OFFSETS``.

    Returns:
        KnightTable: 64 tuples of target squares, indexed by origin square.
    """
    table: List[Tuple[int, ...]] = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            targets = []
            for dr, dc in KNIGHT_OFFSETS:
                r, c = row + dr, col + dc
                if 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE:
                    targets.append(square_of(r, c))
            table.append(tuple(targets))
    return tuple(table)


def generate_knight_moves(board: "Board", square: int, piece: Piece) -> Optional[List[Move]]:
    """Knight jumps from ``square``: empty targets and enemy captures.

    Intervening squares are never inspected; only the landing square matters.
    """
    moves: List[Move] = []
    for target in board.knight_targets[square]:
        occupant = board.get_piece(target)
        if occupant is None or occupant.color is not piece.color:
            moves.append(Move(square, target))
    return moves or None
