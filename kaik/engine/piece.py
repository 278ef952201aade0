from __future__ import annotations

from enum import IntEnum
from typing import List, Optional, Tuple

from .errors import InvalidPieceChar


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    def opposite(self) -> "Color":
        return Color(self.value ^ 1)

    @property
    def fen_char(self) -> str:
        return "w" if self is Color.WHITE else "b"


class PieceKind(IntEnum):
    PAWN = 0
    KNIGHT = 1
    BISHOP = 2
    ROOK = 3
    QUEEN = 4
    KING = 5


# The order matters: the ordinal indexes the board's bitboard list, and its
# parity is the piece color (even = white).
class Piece(IntEnum):
    WHITE_PAWN = 0
    BLACK_PAWN = 1
    WHITE_KNIGHT = 2
    BLACK_KNIGHT = 3
    WHITE_BISHOP = 4
    BLACK_BISHOP = 5
    WHITE_ROOK = 6
    BLACK_ROOK = 7
    WHITE_QUEEN = 8
    BLACK_QUEEN = 9
    WHITE_KING = 10
    BLACK_KING = 11

    @classmethod
    def from_char(cls, ch: str) -> "Piece":
        """Map a FEN letter (``P``, ``n``, ...) to a piece.

        Raises:
            InvalidPieceChar: If ``ch`` is not one of ``PpNnBbRrQqKk``.
        """
        idx = ASCII_PIECES.find(ch) if isinstance(ch, str) and len(ch) == 1 else -1
        if idx < 0:
            raise InvalidPieceChar(f"invalid piece: {ch!r}")
        return cls(idx)

    @classmethod
    def of(cls, kind: PieceKind, color: Color) -> "Piece":
        return cls(int(kind) * 2 + int(color))

    @property
    def char(self) -> str:
        return ASCII_PIECES[self.value]

    @property
    def symbol(self) -> str:
        return UNICODE_PIECES[self.value]

    @property
    def color(self) -> Color:
        return Color(self.value & 1)

    @property
    def kind(self) -> PieceKind:
        return PieceKind(self.value >> 1)

    @property
    def paired(self) -> "Piece":
        """Same piece kind, other color."""
        return Piece(self.value ^ 1)

    def __str__(self) -> str:
        return self.char

    def __format__(self, spec: str) -> str:
        return format(self.char, spec)


ASCII_PIECES = "PpNnBbRrQqKk"
UNICODE_PIECES = "♙♟♘♞♗♝♖♜♕♛♔♚"

ALL_PIECES: Tuple[Piece, ...] = tuple(Piece)
WHITE_PIECES: Tuple[Piece, ...] = tuple(p for p in Piece if p.color is Color.WHITE)
BLACK_PIECES: Tuple[Piece, ...] = tuple(p for p in Piece if p.color is Color.BLACK)


def parse_pieces(text: str) -> List[Optional[Piece]]:
    """Read squares from a picture of the board, starting at a8.

    Piece letters become pieces and ``.`` an empty square; every other
    character (spaces, line breaks) is skipped.
    """
    squares: List[Optional[Piece]] = []
    for ch in text:
        if ch in ASCII_PIECES:
            squares.append(Piece.from_char(ch))
        elif ch == ".":
            squares.append(None)
    return squares
