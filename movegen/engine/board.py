from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .move import NUM_SQUARES, Move
from .piece import Color, Piece
from .pieces import generate_piece_moves
from .pieces.knight import KnightTable, precompute_knight_targets


@dataclass(frozen=True)
class CastlingRights:
    """Per-side, per-wing castling flags. All forfeited by default."""

    white_kingside: bool = False
    white_queenside: bool = False
    black_kingside: bool = False
    black_queenside: bool = False

    def as_tuple(self) -> Tuple[bool, bool, bool, bool]:
        return (
            self.white_kingside,
            self.white_queenside,
            self.black_kingside,
            self.black_queenside,
        )

    def to_fen(self) -> str:
        letters = "".join(ch for ch, flag in zip("KQkq", self.as_tuple()) if flag)
        return letters or "-"


def _empty_squares() -> List[Optional[Piece]]:
    return [None] * NUM_SQUARES


@dataclass
class Board:
    """64-square piece store with a precomputed knight table.

    Notes:
    - Squares are 0..63 (a1=0 .. h8=63), ``index = rank * 8 + file``.
    - ``knight_targets`` is built once per board and never mutated.
    - Move generation only reads the board.
    """

    squares: List[Optional[Piece]] = field(default_factory=_empty_squares)
    knight_targets: KnightTable = field(default_factory=precompute_knight_targets, repr=False)
    castling_rights: CastlingRights = field(default_factory=CastlingRights)

    @classmethod
    def new_empty_board(cls) -> "Board":
        return cls()

    def __post_init__(self) -> None:
        if len(self.squares) != NUM_SQUARES:
            raise ValueError(f"board must have {NUM_SQUARES} squares, got {len(self.squares)}")

    def get_piece(self, square: int) -> Optional[Piece]:
        return self.squares[square]

    def set_piece(self, square: int, piece: Optional[Piece]) -> None:
        """Place ``piece`` on ``square``, overwriting it. ``None`` clears the square."""
        self.squares[square] = piece

    def is_empty(self, square: int) -> bool:
        return self.squares[square] is None

    def pieces(self, color: Optional[Color] = None) -> Iterator[Tuple[int, Piece]]:
        """Yield ``(square, piece)`` pairs in ascending square order.

        Args:
            color (Optional[Color]): Restrict to pieces of this color.
        """
        for square, piece in enumerate(self.squares):
            if piece is None:
                continue
            if color is not None and piece.color is not color:
                continue
            yield square, piece

    def generate_moves(self, color: Color) -> List[Move]:
        """Return pseudo-legal moves for every piece of ``color``.

        Squares are scanned rank-major from a1 to h8 and each piece's moves
        are appended in the order its generator produces them. Moves that
        leave the mover's king attacked are not filtered out.

        Args:
            color (Color): Side whose pieces are moved.

        Returns:
            List[Move]: Freshly allocated move list, possibly empty.
        """
        moves: List[Move] = []
        for square, piece in self.pieces(color):
            piece_moves = generate_piece_moves(self, square, piece)
            if piece_moves is not None:
                moves.extend(piece_moves)
        return moves

    def copy(self) -> "Board":
        # Knight table is immutable, safe to share
        return Board(
            squares=list(self.squares),
            knight_targets=self.knight_targets,
            castling_rights=self.castling_rights,
        )
