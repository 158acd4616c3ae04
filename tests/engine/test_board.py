from __future__ import annotations

import pytest

from movegen.engine.board import Board, CastlingRights
from movegen.engine.fen import STARTPOS_PLACEMENT, parse_placement
from movegen.engine.move import Move
from movegen.engine.piece import Color, Piece, PieceKind
from movegen.engine.pieces import generate_piece_moves


def test_new_empty_board() -> None:
    b = Board.new_empty_board()
    assert len(b.squares) == 64
    assert all(b.get_piece(sq) is None for sq in range(64))
    assert b.castling_rights.as_tuple() == (False, False, False, False)
    assert b.generate_moves(Color.WHITE) == []


def test_set_piece_overwrites_and_clears() -> None:
    b = Board.new_empty_board()
    b.set_piece(10, Piece(PieceKind.ROOK, Color.WHITE))
    b.set_piece(10, Piece(PieceKind.QUEEN, Color.BLACK))
    assert b.get_piece(10) == Piece(PieceKind.QUEEN, Color.BLACK)
    b.set_piece(10, None)
    assert b.get_piece(10) is None


def test_board_rejects_wrong_square_count() -> None:
    with pytest.raises(ValueError):
        Board(squares=[None] * 63)


@pytest.mark.parametrize(
    "kind,square,expected",
    [
        (PieceKind.QUEEN, 27, 27),
        (PieceKind.ROOK, 27, 14),
        (PieceKind.BISHOP, 27, 13),
        (PieceKind.KING, 27, 8),
        (PieceKind.KNIGHT, 27, 8),
        (PieceKind.KNIGHT, 0, 2),
    ],
)
def test_single_piece_counts_on_empty_board(kind: PieceKind, square: int, expected: int) -> None:
    b = Board.new_empty_board()
    b.set_piece(square, Piece(kind, Color.WHITE))
    moves = b.generate_moves(Color.WHITE)
    assert len(moves) == expected
    assert all(m.initial_square == square for m in moves)


def test_other_color_is_skipped() -> None:
    b = Board.new_empty_board()
    b.set_piece(27, Piece(PieceKind.QUEEN, Color.BLACK))
    assert b.generate_moves(Color.WHITE) == []
    assert len(b.generate_moves(Color.BLACK)) == 27


def test_startpos_moves_in_square_order() -> None:
    b = parse_placement(STARTPOS_PLACEMENT)
    moves = b.generate_moves(Color.WHITE)
    assert len(moves) == 20
    assert moves[:4] == [Move(1, 18), Move(1, 16), Move(6, 23), Move(6, 21)]
    assert moves[4:6] == [Move(8, 16), Move(8, 24)]
    assert len(b.generate_moves(Color.BLACK)) == 20


def test_generate_moves_does_not_mutate_board() -> None:
    b = parse_placement("r3k2r/pp1n1ppp/2p5/3Pp3/1b6/2N2N2/PPP2PPP/R2QK2R")
    b.castling_rights = CastlingRights(True, True, True, True)
    before = list(b.squares)
    table = b.knight_targets
    b.generate_moves(Color.WHITE)
    b.generate_moves(Color.BLACK)
    assert b.squares == before
    assert b.knight_targets is table


def test_every_generated_move_is_on_the_board() -> None:
    b = parse_placement("r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R")
    b.castling_rights = CastlingRights(True, True, True, True)
    for color in Color:
        for m in b.generate_moves(color):
            assert 0 <= m.initial_square < 64
            assert 0 <= m.target_square < 64
            assert m.initial_square != m.target_square


def test_generated_moves_match_per_piece_dispatch() -> None:
    b = parse_placement("4k3/8/8/3q4/8/2N5/8/R3K2R")
    expected = []
    for square, piece in b.pieces(Color.WHITE):
        expected.extend(generate_piece_moves(b, square, piece) or [])
    assert b.generate_moves(Color.WHITE) == expected


def test_pieces_iterates_in_square_order() -> None:
    b = parse_placement("4k3/8/8/8/8/8/8/R3K3")
    assert [sq for sq, _ in b.pieces()] == [0, 4, 60]
    assert [sq for sq, _ in b.pieces(Color.BLACK)] == [60]


def test_copy_is_independent_snapshot() -> None:
    b = parse_placement(STARTPOS_PLACEMENT)
    snapshot = b.copy()
    b.set_piece(12, None)
    assert snapshot.get_piece(12) == Piece(PieceKind.PAWN, Color.WHITE)
    assert snapshot.knight_targets is b.knight_targets


def test_castling_rights_to_fen() -> None:
    assert CastlingRights().to_fen() == "-"
    assert CastlingRights(True, True, True, True).to_fen() == "KQkq"
    assert CastlingRights(white_queenside=True, black_kingside=True).to_fen() == "Qk"


@pytest.mark.parametrize(
    "kind,expected",
    [
        (PieceKind.PAWN, 2),
        (PieceKind.KNIGHT, 6),
        (PieceKind.BISHOP, 9),
        (PieceKind.ROOK, 14),
        (PieceKind.QUEEN, 23),
        (PieceKind.KING, 8),
    ],
)
def test_dispatch_covers_every_piece_kind(kind: PieceKind, expected: int) -> None:
    b = Board.new_empty_board()
    piece = Piece(kind, Color.WHITE)
    b.set_piece(10, piece)
    moves = generate_piece_moves(b, 10, piece)
    assert moves is not None
    assert len(moves) == expected
