from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple

from .piece import Piece, PieceKind
from .square import Square


PROMOTION_PIECES = {"q", "r", "b", "n"}


@total_ordering
@dataclass(frozen=True)
class Move:
    """Engine-internal move representation.

    Attributes:
        from_sq (Square): Origin square.
        to_sq (Square): Destination square.
        promotion (Optional[Piece]): Piece a pawn turns into, if any.
        piece (Piece): The moving piece.
        is_capture (bool): Whether the destination holds an enemy piece.
    """

    from_sq: Square
    to_sq: Square
    promotion: Optional[Piece]
    piece: Piece
    is_capture: bool = False

    @classmethod
    def quiet(cls, from_sq: Square, to_sq: Square, piece: Piece) -> "Move":
        return cls(from_sq, to_sq, None, piece, False)

    @classmethod
    def capture(cls, from_sq: Square, to_sq: Square, piece: Piece) -> "Move":
        return cls(from_sq, to_sq, None, piece, True)

    def _key(self) -> Tuple[int, int, int, int, bool]:
        promo = -1 if self.promotion is None else int(self.promotion)
        return (int(self.from_sq), int(self.to_sq), promo, int(self.piece), self.is_capture)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return self._key() < other._key()

    def to_uci(self) -> str:
        """Serialize the move into long algebraic UCI form.

        Returns:
            str: Move encoded like ``"e2e4"`` or ``"e7e8q"``.
        """
        promo = self.promotion.char.lower() if self.promotion is not None else ""
        return f"{self.from_sq}{self.to_sq}{promo}"

    def __str__(self) -> str:
        prefix = "" if self.piece.kind is PieceKind.PAWN else self.piece.char.upper()
        sep = "x" if self.is_capture else "-"
        promo = f"={self.promotion.char.upper()}" if self.promotion is not None else ""
        return f"{prefix}{self.from_sq}{sep}{self.to_sq}{promo}"


def parse_uci(uci: str) -> Tuple[Square, Square, Optional[str]]:
    """Parse a UCI move string.

    The piece and capture flag are not part of UCI text; callers resolve
    them against a board (see ``Board.find_move``).

    Args:
        uci (str): Move encoded in long algebraic notation (e.g. ``"e2e4"``).

    Returns:
        Tuple[Square, Square, Optional[str]]: Origin, destination and the
            lowercase promotion letter, if any.

    Raises:
        ValueError: If the string has an invalid length or promotion piece.
        InvalidSquareText: If either square is malformed.
    """
    if not isinstance(uci, str) or len(uci) not in (4, 5):
        raise ValueError(f"invalid UCI move length: {uci!r}")
    from_sq = Square.parse(uci[0:2])
    to_sq = Square.parse(uci[2:4])
    promo: Optional[str] = None
    if len(uci) == 5:
        promo = uci[4].lower()
        if promo not in PROMOTION_PIECES:
            raise ValueError(f"invalid promotion piece: {promo!r}")
    return from_sq, to_sq, promo
