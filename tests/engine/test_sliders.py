from __future__ import annotations

import pytest

from movegen.engine.board import Board
from movegen.engine.move import Move
from movegen.engine.piece import Color, Piece, PieceKind
from movegen.engine.pieces import generate_piece_moves
from movegen.engine.pieces.sliding import (
    DIAGONAL_DIRECTIONS,
    LINEAR_DIRECTIONS,
    RIGHT,
    cast_rays,
    directions_for,
    generate_sliding_moves,
)


def place(kind: PieceKind, square: int, color: Color = Color.WHITE) -> tuple[Board, Piece]:
    b = Board.new_empty_board()
    piece = Piece(kind, color)
    b.set_piece(square, piece)
    return b, piece


def target_set(board: Board, square: int) -> set[int]:
    piece = board.get_piece(square)
    assert piece is not None
    return {m.target_square for m in generate_sliding_moves(board, square, piece) or []}


@pytest.mark.parametrize(
    "kind,expected",
    [
        (PieceKind.QUEEN, 27),
        (PieceKind.ROOK, 14),
        (PieceKind.BISHOP, 13),
    ],
)
def test_empty_board_counts_from_d4(kind: PieceKind, expected: int) -> None:
    b, piece = place(kind, 27)
    moves = generate_sliding_moves(b, 27, piece)
    assert moves is not None
    assert len(moves) == expected
    assert len(set(moves)) == expected


def test_rook_on_h_file_does_not_wrap() -> None:
    b, _ = place(PieceKind.ROOK, 7)
    targets = target_set(b, 7)
    assert len(targets) == 14
    assert 8 not in targets


def test_bishop_on_h_file_does_not_wrap() -> None:
    b, _ = place(PieceKind.BISHOP, 31)
    assert target_set(b, 31) == {38, 45, 52, 59, 22, 13, 4}


def test_bishop_on_a_file_does_not_wrap() -> None:
    b, _ = place(PieceKind.BISHOP, 24)
    assert target_set(b, 24) == {33, 42, 51, 60, 17, 10, 3}


def test_ray_stops_before_own_piece_and_on_enemy_piece() -> None:
    b, _ = place(PieceKind.ROOK, 27)
    b.set_piece(29, Piece(PieceKind.PAWN, Color.WHITE))
    b.set_piece(43, Piece(PieceKind.PAWN, Color.BLACK))
    assert target_set(b, 27) == {28, 35, 43, 26, 25, 24, 19, 11, 3}


def test_blocked_direction_does_not_affect_others() -> None:
    b, _ = place(PieceKind.BISHOP, 27)
    b.set_piece(36, Piece(PieceKind.PAWN, Color.WHITE))
    targets = target_set(b, 27)
    assert not {36, 45, 54, 63} & targets
    assert {34, 41, 48, 20, 13, 6, 18, 9, 0}.issubset(targets)


def test_capture_at_distance() -> None:
    b, _ = place(PieceKind.BISHOP, 0)
    b.set_piece(45, Piece(PieceKind.KNIGHT, Color.BLACK))
    assert target_set(b, 0) == {9, 18, 27, 36, 45}


def test_capture_on_the_edge() -> None:
    b, _ = place(PieceKind.ROOK, 27, Color.BLACK)
    b.set_piece(31, Piece(PieceKind.PAWN, Color.WHITE))
    b.set_piece(59, Piece(PieceKind.PAWN, Color.WHITE))
    targets = target_set(b, 27)
    assert {31, 59}.issubset(targets)
    assert len(targets) == 14


def test_queen_casts_diagonals_before_lines() -> None:
    b, piece = place(PieceKind.QUEEN, 0)
    moves = generate_sliding_moves(b, 0, piece)
    assert moves is not None
    assert len(moves) == 21
    assert moves[:7] == [Move(0, sq) for sq in (9, 18, 27, 36, 45, 54, 63)]
    assert moves[7] == Move(0, 1)


def test_fully_blocked_queen_yields_none() -> None:
    b, piece = place(PieceKind.QUEEN, 0)
    for sq in (1, 8, 9):
        b.set_piece(sq, Piece(PieceKind.PAWN, Color.WHITE))
    assert generate_sliding_moves(b, 0, piece) is None
    assert generate_piece_moves(b, 0, piece) is None


def test_queen_captures_everywhere() -> None:
    b, _ = place(PieceKind.QUEEN, 27)
    ring = (18, 19, 20, 26, 28, 34, 35, 36)
    for sq in ring:
        b.set_piece(sq, Piece(PieceKind.PAWN, Color.BLACK))
    assert target_set(b, 27) == set(ring)


def test_cast_rays_single_direction() -> None:
    b, _ = place(PieceKind.ROOK, 56)
    moves = cast_rays(b, 56, Color.WHITE, [RIGHT])
    assert [m.target_square for m in moves] == [57, 58, 59, 60, 61, 62, 63]


def test_directions_for_each_slider() -> None:
    assert directions_for(PieceKind.BISHOP) == DIAGONAL_DIRECTIONS
    assert directions_for(PieceKind.ROOK) == LINEAR_DIRECTIONS
    assert directions_for(PieceKind.QUEEN) == DIAGONAL_DIRECTIONS + LINEAR_DIRECTIONS
    with pytest.raises(ValueError):
        directions_for(PieceKind.KNIGHT)
