from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .board import Board
from .fen import STARTPOS_FEN, format_fen, parse_fen
from .move import Move
from .piece import Color


class GameResult(Enum):
    ONGOING = "*"
    WHITE_WINS = "1-0"
    BLACK_WINS = "0-1"
    DRAW = "1/2-1/2"


@dataclass
class GameState:
    """Position snapshot: board, side to move and turn counter.

    Responsibility: answer move queries for the side to move. Applying moves
    and deciding the result is left to the caller, which mutates the state
    between turns.
    """

    board: Board = field(default_factory=Board.new_empty_board)
    current_player: Color = Color.WHITE
    turn: int = 1
    game_result: GameResult = GameResult.ONGOING
    # Carried through from FEN, not used by move generation
    en_passant_target: str = "-"
    halfmove_clock: str = "0"

    @classmethod
    def new(cls) -> "GameState":
        return cls.from_fen(STARTPOS_FEN)

    @classmethod
    def from_fen(cls, fen: str) -> "GameState":
        return parse_fen(fen)

    def to_fen(self) -> str:
        return format_fen(self)

    def generate_moves(self) -> List[Move]:
        return self.board.generate_moves(self.current_player)
