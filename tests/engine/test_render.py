from __future__ import annotations

from kaik.engine.board import Board
from kaik.engine.move import Move
from kaik.engine.piece import Piece
from kaik.engine.render import render_board, render_moves
from kaik.engine.square import Square


def test_render_initial_ascii() -> None:
    lines = render_board(Board.initial_position(), unicode=False).splitlines()
    assert len(lines) == 9
    assert lines[0] == "  8  r  n  b  q  k  b  n  r "
    assert lines[4] == "  4  .  .  .  .  .  .  .  . "
    assert lines[8] == "     a  b  c  d  e  f  g  h"


def test_render_unicode_uses_figurines() -> None:
    text = render_board(Board.initial_position())
    assert "♔" in text and "♚" in text


def test_render_highlights_move() -> None:
    board = Board.decode("2k5/8/8/8/8/8/2Pp4/2K5 w - - 0 1")
    mv = Move.capture(Square.C1, Square.D2, Piece.WHITE_KING)
    lines = render_board(board, mv, unicode=False).splitlines()
    assert lines[6] == "  2  .  .  P [p] .  .  .  . "
    assert lines[7] == "  1  .  .  *  .  .  .  .  . "


def test_render_moves_one_per_line() -> None:
    moves = Board.decode("2k5/8/8/8/8/8/2Pp4/2K5 w - - 0 1").generate_moves_for([Piece.WHITE_KING])
    assert render_moves(moves).splitlines() == ["Kc1-b1", "Kc1-d1", "Kc1-b2", "Kc1xd2"]
