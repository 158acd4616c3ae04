from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Color(Enum):
    """Side owning a piece. Values match the FEN active-color tokens."""

    WHITE = "w"
    BLACK = "b"

    @property
    def opposite(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class PieceKind(Enum):
    """Piece type. Values are the lowercase FEN letters."""

    PAWN = "p"
    BISHOP = "b"
    KNIGHT = "n"
    ROOK = "r"
    QUEEN = "q"
    KING = "k"


@dataclass(frozen=True)
class Piece:
    """Immutable piece value: a kind owned by a color."""

    kind: PieceKind
    color: Color

    @classmethod
    def from_symbol(cls, ch: str) -> "Piece":
        """Build a piece from its FEN letter.

        Uppercase letters are White, lowercase are Black.

        Raises:
            ValueError: If ``ch`` is not one of ``pbnrqkPBNRQK``.
        """
        try:
            kind = PieceKind(ch.lower())
        except ValueError as e:
            raise ValueError(f"invalid piece symbol: {ch!r}") from e
        if ch.isupper():
            return cls(kind, Color.WHITE)
        return cls(kind, Color.BLACK)

    def symbol(self) -> str:
        letter = self.kind.value
        return letter.upper() if self.color is Color.WHITE else letter
