from __future__ import annotations

from dataclasses import dataclass


BOARD_SIZE = 8
NUM_SQUARES = BOARD_SIZE * BOARD_SIZE


@dataclass(frozen=True)
class Move:
    """Pseudo-legal move between two squares.

    Attributes:
        initial_square (int): Origin square index (0-based, a1=0 .. h8=63).
        target_square (int): Destination square index.
    """

    initial_square: int
    target_square: int

    def to_uci(self) -> str:
        """Serialize the move into long algebraic form.

        Returns:
            str: Move encoded like ``"e2e4"``.
        """
        return square_to_str(self.initial_square) + square_to_str(self.target_square)


def str_to_square(s: str) -> int:
    """Convert algebraic notation into a 0-based square index.

    Args:
        s (str): Square name such as ``"e4"``.

    Returns:
        int: Zero-based square index.

    Raises:
        ValueError: If ``s`` is not a valid square.
    """
    if len(s) != 2 or s[0] < "a" or s[0] > "h" or s[1] < "1" or s[1] > "8":
        raise ValueError(f"invalid square: {s!r}")
    file = ord(s[0]) - ord("a")
    rank = int(s[1]) - 1
    return rank * 8 + file


def square_to_str(idx: int) -> str:
    """Convert a 0-based square index into algebraic notation.

    Raises:
        ValueError: If ``idx`` is outside the valid square range.
    """
    if idx < 0 or idx > 63:
        raise ValueError(f"invalid square index: {idx}")
    file = idx % 8
    rank = idx // 8
    return chr(ord("a") + file) + str(rank + 1)


def square_of(row: int, col: int) -> int:
    return row * BOARD_SIZE + col
