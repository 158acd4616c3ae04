from __future__ import annotations

from typing import TYPE_CHECKING, List

from .board import Board, CastlingRights
from .move import BOARD_SIZE, square_of
from .piece import Color, Piece

if TYPE_CHECKING:
    from .game import GameState


STARTPOS_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
STARTPOS_FEN = f"{STARTPOS_PLACEMENT} w KQkq - 0 1"

FEN_FIELDS = (
    "piece placement",
    "active color",
    "castling availability",
    "en passant target",
    "half-move clock",
    "full move number",
)

PIECE_LETTERS = "pbnrqkPBNRQK"


class FenError(ValueError):
    """Base class for position-notation parsing failures."""


class InvalidPiecePlacement(FenError):
    """The placement field holds a character outside ``[0-8pbnrqkPBNRQK/]``."""

    def __init__(self, char: str) -> None:
        super().__init__(f"invalid character in piece placement: {char!r}")
        self.char = char


class PlacementOverflow(FenError):
    """The placement field puts a piece outside the 64 squares."""


class MissingFenField(FenError):
    def __init__(self, field: str) -> None:
        super().__init__(f"invalid FEN: missing {field}")
        self.field = field


class InvalidActiveColor(FenError):
    def __init__(self, token: str) -> None:
        super().__init__(f"invalid active color in FEN: {token!r}")
        self.token = token


class InvalidMoveCounter(FenError):
    pass


def parse_placement(placement: str) -> Board:
    """Build a board from the piece-placement field of a FEN string.

    The field is scanned left to right starting at a8: a digit skips that
    many files, ``/`` moves down one rank and back to the a-file, and a
    piece letter places a piece and advances one file. Missing trailing
    ranks are left empty.

    Args:
        placement (str): Placement field such as ``"8/8/8/8/8/8/8/8"``.

    Returns:
        Board: New board with the pieces placed and no castling rights.

    Raises:
        InvalidPiecePlacement: On the first character that is neither a
            digit 0-8, ``/``, nor a piece letter. Scanning stops there.
        PlacementOverflow: If a piece would land past the h-file or below
            the first rank.
    """
    board = Board.new_empty_board()
    rank = BOARD_SIZE - 1
    file = 0
    for ch in placement:
        if "0" <= ch <= "8":
            file += int(ch)
        elif ch == "/":
            rank -= 1
            file = 0
        elif ch in PIECE_LETTERS:
            if rank < 0 or file >= BOARD_SIZE:
                raise PlacementOverflow(f"piece {ch!r} placed outside the board")
            board.set_piece(square_of(rank, file), Piece.from_symbol(ch))
            file += 1
        else:
            raise InvalidPiecePlacement(ch)
    return board


def parse_castling(token: str) -> CastlingRights:
    """Read the castling-availability field.

    Each of ``K``, ``Q``, ``k``, ``q`` present sets one flag; any other
    character, ``-`` included, is ignored.
    """
    return CastlingRights(
        white_kingside="K" in token,
        white_queenside="Q" in token,
        black_kingside="k" in token,
        black_queenside="q" in token,
    )


def parse_fen(fen: str) -> "GameState":
    """Create a game state from a full six-field FEN string.

    Args:
        fen (str): FEN string describing the position to load.

    Returns:
        GameState: Board, side to move and turn counter from ``fen``.

    Raises:
        MissingFenField: If fewer than six whitespace-separated fields are
            present.
        InvalidActiveColor: If the active color is neither ``w`` nor ``b``.
        InvalidMoveCounter: If the full-move number is not a non-negative
            integer.
        InvalidPiecePlacement: See :func:`parse_placement`.

    Notes:
        The castling, en-passant and half-move tokens are not validated. The
        en-passant target and half-move clock are kept verbatim for
        round-tripping and do not influence move generation.
    """
    from .game import GameState

    parts = fen.split()
    if len(parts) < len(FEN_FIELDS):
        raise MissingFenField(FEN_FIELDS[len(parts)])
    placement, active, castling, en_passant, halfmove, fullmove = parts[: len(FEN_FIELDS)]

    if active not in ("w", "b"):
        raise InvalidActiveColor(active)
    current_player = Color(active)

    try:
        turn = int(fullmove)
    except ValueError as e:
        raise InvalidMoveCounter(f"invalid full move number in FEN: {fullmove!r}") from e
    if turn < 0:
        raise InvalidMoveCounter(f"invalid full move number in FEN: {fullmove!r}")

    rights = parse_castling(castling)
    board = parse_placement(placement)
    board.castling_rights = rights

    return GameState(
        board=board,
        current_player=current_player,
        turn=turn,
        en_passant_target=en_passant,
        halfmove_clock=halfmove,
    )


def format_placement(board: Board) -> str:
    """Serialize the pieces on ``board`` into a FEN placement field."""
    ranks: List[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        run = 0
        row: List[str] = []
        for file in range(BOARD_SIZE):
            piece = board.get_piece(square_of(rank, file))
            if piece is None:
                run += 1
                continue
            if run > 0:
                row.append(str(run))
                run = 0
            row.append(piece.symbol())
        if run > 0:
            row.append(str(run))
        ranks.append("".join(row))
    return "/".join(ranks)


def format_fen(state: "GameState") -> str:
    placement = format_placement(state.board)
    castling = state.board.castling_rights.to_fen()
    return (
        f"{placement} {state.current_player.value} {castling} "
        f"{state.en_passant_target} {state.halfmove_clock} {state.turn}"
    )
