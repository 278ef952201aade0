from __future__ import annotations

import pytest

from kaik.engine.attacks import (
    bishop_targets,
    king_targets,
    knight_targets,
    pawn_targets,
    queen_targets,
    rook_targets,
)
from kaik.engine.bitboard import EMPTY, BitBoard
from kaik.engine.piece import Color
from kaik.engine.square import Square


def _files(bb: BitBoard) -> set[str]:
    return {Square(sq).file for sq in bb.squares()}


def _names(bb: BitBoard) -> set[str]:
    return {str(Square(sq)) for sq in bb.squares()}


def _max_distance(a: int, b: int) -> int:
    return max(abs(a % 8 - b % 8), abs(a // 8 - b // 8))


def test_king_corner() -> None:
    assert _names(king_targets(Square.A1)) == {"a2", "b1", "b2"}
    assert _names(king_targets(Square.H8)) == {"g8", "g7", "h7"}


def test_king_center_has_eight() -> None:
    assert king_targets(Square.E4).count() == 8


def test_knight_edge() -> None:
    assert _names(knight_targets(Square.A1)) == {"b3", "c2"}
    assert _names(knight_targets(Square.H4)) == {"g2", "f3", "f5", "g6"}


@pytest.mark.parametrize("sq", list(Square))
def test_leapers_never_wrap(sq: Square) -> None:
    for target in king_targets(sq).squares():
        assert _max_distance(sq, target) == 1
    for target in knight_targets(sq).squares():
        assert _max_distance(sq, target) == 2


@pytest.mark.parametrize("sq", list(Square))
def test_sliders_never_wrap_on_empty_board(sq: Square) -> None:
    f, r = sq % 8, sq // 8
    for target in rook_targets(sq, EMPTY).squares():
        assert target % 8 == f or target // 8 == r
    for target in bishop_targets(sq, EMPTY).squares():
        assert abs(target % 8 - f) == abs(target // 8 - r)
    assert rook_targets(sq, EMPTY).count() == 14
    assert queen_targets(sq, EMPTY) == rook_targets(sq, EMPTY) | bishop_targets(sq, EMPTY)


def test_rook_ray_includes_first_blocker_only() -> None:
    occ = BitBoard.from_squares([Square.A1, Square.A4, Square.A6, Square.C1])
    assert _names(rook_targets(Square.A1, occ)) == {"a2", "a3", "a4", "b1", "c1"}


def test_bishop_descending_ray_stops_at_nearest_blocker() -> None:
    occ = BitBoard.from_squares([Square.H8, Square.D4, Square.B2])
    assert _names(bishop_targets(Square.H8, occ)) == {"g7", "f6", "e5", "d4"}


def test_white_pawn_pushes_and_captures() -> None:
    occ = BitBoard.from_squares([Square.E2, Square.D3])
    opp = BitBoard.from_squares([Square.D3])
    assert _names(pawn_targets(Color.WHITE, Square.E2, occ, opp)) == {"e3", "e4", "d3"}


def test_pawn_double_push_needs_both_squares_empty() -> None:
    blocked_near = BitBoard.from_squares([Square.E2, Square.E3])
    assert pawn_targets(Color.WHITE, Square.E2, blocked_near, EMPTY) == EMPTY
    blocked_far = BitBoard.from_squares([Square.E2, Square.E4])
    assert _names(pawn_targets(Color.WHITE, Square.E2, blocked_far, EMPTY)) == {"e3"}
    blocked_black = BitBoard.from_squares([Square.E7, Square.E5])
    assert _names(pawn_targets(Color.BLACK, Square.E7, blocked_black, EMPTY)) == {"e6"}


def test_no_double_push_off_home_rank() -> None:
    occ = BitBoard.from_squares([Square.E3])
    assert _names(pawn_targets(Color.WHITE, Square.E3, occ, EMPTY)) == {"e4"}
    occ = BitBoard.from_squares([Square.E6])
    assert _names(pawn_targets(Color.BLACK, Square.E6, occ, EMPTY)) == {"e5"}


@pytest.mark.parametrize(
    "color, sq, other_file",
    [
        (Color.WHITE, Square.A4, "h"),
        (Color.WHITE, Square.H4, "a"),
        (Color.BLACK, Square.A5, "h"),
        (Color.BLACK, Square.H5, "a"),
    ],
)
def test_pawn_captures_never_wrap(color: Color, sq: Square, other_file: str) -> None:
    everyone = ~EMPTY
    targets = pawn_targets(color, sq, BitBoard.from_square(sq), everyone ^ BitBoard.from_square(sq))
    assert other_file not in _files(targets)
    assert targets.count() == 2


def test_pawn_on_last_rank_has_no_targets() -> None:
    occ = BitBoard.from_squares([Square.D8])
    assert pawn_targets(Color.WHITE, Square.D8, occ, EMPTY) == EMPTY
