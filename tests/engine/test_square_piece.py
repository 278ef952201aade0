from __future__ import annotations

import pytest

from kaik.engine.errors import InvalidPieceChar, InvalidSquareText
from kaik.engine.piece import ALL_PIECES, Color, Piece, PieceKind, parse_pieces
from kaik.engine.square import Square


def test_square_rank() -> None:
    assert Square.A1.rank == 1
    assert Square.C3.rank == 3
    assert Square.H8.rank == 8


@pytest.mark.parametrize(
    "sq, file",
    [
        (Square.A1, "a"),
        (Square.B5, "b"),
        (Square.C1, "c"),
        (Square.D8, "d"),
        (Square.E7, "e"),
        (Square.F3, "f"),
        (Square.G6, "g"),
        (Square.H8, "h"),
    ],
)
def test_square_file(sq: Square, file: str) -> None:
    assert sq.file == file


def test_square_text_round_trip() -> None:
    for sq in Square:
        assert Square.parse(str(sq)) is sq


def test_square_parse_is_case_insensitive() -> None:
    assert Square.parse("E4") is Square.E4
    assert Square.parse("e4") is Square.E4
    assert str(Square.E4) == "e4"


@pytest.mark.parametrize("text", ["", "e", "e44", "i1", "a0", "a9", "44", "ee"])
def test_square_parse_rejects_bad_text(text: str) -> None:
    with pytest.raises(InvalidSquareText):
        Square.parse(text)


def test_invalid_square_text_is_value_error() -> None:
    with pytest.raises(ValueError):
        Square.parse("z9")


def test_piece_order() -> None:
    assert [int(p) for p in ALL_PIECES] == list(range(12))
    assert Piece.WHITE_PAWN == 0
    assert Piece.BLACK_PAWN == 1
    assert Piece.WHITE_KNIGHT == 2
    assert Piece.BLACK_KNIGHT == 3
    assert Piece.WHITE_BISHOP == 4
    assert Piece.BLACK_BISHOP == 5
    assert Piece.WHITE_ROOK == 6
    assert Piece.BLACK_ROOK == 7
    assert Piece.WHITE_QUEEN == 8
    assert Piece.BLACK_QUEEN == 9
    assert Piece.WHITE_KING == 10
    assert Piece.BLACK_KING == 11


def test_piece_char_round_trip() -> None:
    assert "".join(p.char for p in ALL_PIECES) == "PpNnBbRrQqKk"
    for p in ALL_PIECES:
        assert Piece.from_char(p.char) is p


@pytest.mark.parametrize("ch", ["x", "", "PP", ".", "1"])
def test_piece_from_char_rejects(ch: str) -> None:
    with pytest.raises(InvalidPieceChar):
        Piece.from_char(ch)


def test_piece_color_and_pairing() -> None:
    assert Piece.WHITE_QUEEN.color is Color.WHITE
    assert Piece.BLACK_KNIGHT.color is Color.BLACK
    assert Piece.WHITE_ROOK.paired is Piece.BLACK_ROOK
    assert Piece.BLACK_KING.paired is Piece.WHITE_KING
    assert Color.WHITE.opposite() is Color.BLACK
    assert Color.BLACK.opposite() is Color.WHITE


def test_piece_kind() -> None:
    assert Piece.BLACK_BISHOP.kind is PieceKind.BISHOP
    for p in ALL_PIECES:
        assert Piece.of(p.kind, p.color) is p


def test_parse_pieces() -> None:
    squares = parse_pieces("r . k\n. P ?")
    assert squares == [Piece.BLACK_ROOK, None, Piece.BLACK_KING, None, Piece.WHITE_PAWN]
