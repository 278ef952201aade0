from __future__ import annotations


class InvalidSquareText(ValueError):
    """Raised when text is not one of the 64 algebraic square names."""


class InvalidPieceChar(ValueError):
    """Raised when a character is not one of ``PpNnBbRrQqKk``."""


class InvalidFen(ValueError):
    """Raised when position text cannot be decoded."""


class UnsupportedMove(NotImplementedError):
    """Raised when a move needs rules this engine does not apply yet.

    Promotions (and castling or en passant, once generated) fall in this
    category. The generator never emits such moves, so seeing this error
    means the caller built a move by hand.
    """
