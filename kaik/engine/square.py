"""Square enumeration.

A square's integer value is the index of its bit in a bitboard: a1=0,
b1=1 .. h1=7, a2=8 .. h8=63.
"""
from __future__ import annotations

from enum import IntEnum

from .bitboard import BitBoard
from .errors import InvalidSquareText


FILES = "abcdefgh"
RANKS = "12345678"


class Square(IntEnum):
    # fmt: off
    A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
    A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
    A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
    A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
    A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
    A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
    A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
    A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
    # fmt: on

    @classmethod
    def parse(cls, text: str) -> "Square":
        """Parse a coordinate such as ``"e4"`` (case-insensitive).

        Raises:
            InvalidSquareText: If ``text`` is not one of the 64 squares.
        """
        if not isinstance(text, str) or len(text) != 2:
            raise InvalidSquareText(f"invalid square: {text!r}")
        file_ch, rank_ch = text[0].lower(), text[1]
        if file_ch not in FILES or rank_ch not in RANKS:
            raise InvalidSquareText(f"invalid square: {text!r}")
        return cls(RANKS.index(rank_ch) * 8 + FILES.index(file_ch))

    @classmethod
    def from_coords(cls, file_idx: int, rank_idx: int) -> "Square":
        return cls(rank_idx * 8 + file_idx)

    @property
    def rank(self) -> int:
        """Rank number, 1..8."""
        return self.value // 8 + 1

    @property
    def file(self) -> str:
        """File letter, 'a'..'h'."""
        return FILES[self.value % 8]

    @property
    def file_index(self) -> int:
        return self.value % 8

    @property
    def rank_index(self) -> int:
        return self.value // 8

    @property
    def bitboard(self) -> BitBoard:
        return BitBoard.from_square(self.value)

    def __str__(self) -> str:
        return self.file + RANKS[self.value // 8]

    # IntEnum formats as the integer by default; f-strings should show "e4"
    def __format__(self, spec: str) -> str:
        return format(str(self), spec)
