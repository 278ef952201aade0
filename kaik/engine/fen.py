from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .errors import InvalidFen, InvalidSquareText
from .piece import Color, Piece
from .square import Square


START_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

CASTLING_ORDER = "KQkq"


@dataclass(frozen=True)
class FenRecord:
    """The six FEN fields, decoded.

    ``placement`` lists 64 entries starting at a8, running a..h along each
    rank and from rank 8 down to rank 1; ``None`` marks an empty square.
    """

    placement: List[Optional[Piece]]
    side_to_move: Color
    castling: str
    en_passant: Optional[Square]
    halfmove_clock: int
    fullmove_number: int


def parse_fen(fen: str) -> FenRecord:
    """Split a Forsyth–Edwards Notation (FEN) string into its fields.

    Args:
        fen (str): FEN string describing the position to load.

    Returns:
        FenRecord: Decoded fields.

    Raises:
        InvalidFen: If ``fen`` is empty, has the wrong number of fields, or
            holds a malformed placement, side to move, castling rights, en
            passant square, or move counter.
        InvalidPieceChar: If the placement holds an unknown piece letter.

    Notes:
        Castling rights are normalized to ``KQkq`` order.
    """
    if not fen or not isinstance(fen, str):
        raise InvalidFen("FEN must be a non-empty string")
    parts = fen.strip().split()
    if len(parts) != 6:
        raise InvalidFen("FEN must have 6 fields")
    placement_text, stm, castling, ep, halfmove, fullmove = parts

    ranks = placement_text.split("/")
    if len(ranks) != 8:
        raise InvalidFen("FEN board must have 8 ranks")
    placement: List[Optional[Piece]] = []
    for rank in ranks:  # rank 8 first
        file_idx = 0
        for ch in rank:
            if ch.isdigit():
                n = int(ch)
                if n < 1 or n > 8:
                    raise InvalidFen("invalid empty count in FEN rank")
                placement.extend([None] * n)
                file_idx += n
            else:
                placement.append(Piece.from_char(ch))
                file_idx += 1
            if file_idx > 8:
                raise InvalidFen("too many squares in FEN rank")
        if file_idx != 8:
            raise InvalidFen("rank does not sum to 8 squares in FEN")

    if stm not in ("w", "b"):
        raise InvalidFen("side to move must be 'w' or 'b'")
    side_to_move = Color.WHITE if stm == "w" else Color.BLACK

    if castling == "-":
        castling = ""
    else:
        if any(ch not in CASTLING_ORDER for ch in castling):
            raise InvalidFen("invalid castling rights")
        castling = "".join(c for c in CASTLING_ORDER if c in castling)

    en_passant: Optional[Square] = None
    if ep != "-":
        try:
            en_passant = Square.parse(ep)
        except InvalidSquareText as e:
            raise InvalidFen("invalid en passant square") from e
        if en_passant.rank not in (3, 6):
            raise InvalidFen("invalid en passant square rank")

    try:
        halfmove_clock = int(halfmove)
        fullmove_number = int(fullmove)
    except ValueError as e:
        raise InvalidFen("invalid move counters in FEN") from e
    if halfmove_clock < 0 or fullmove_number <= 0:
        raise InvalidFen("invalid move counters in FEN")

    return FenRecord(
        placement=placement,
        side_to_move=side_to_move,
        castling=castling,
        en_passant=en_passant,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )


def create_fen(
    placement: Sequence[Optional[Piece]],
    side_to_move: Color,
    castling: str,
    en_passant: Optional[Square],
    halfmove_clock: int,
    fullmove_number: int,
) -> str:
    """Serialize position fields into a FEN string.

    ``placement`` uses the same a8-first order that ``parse_fen`` returns.
    """
    if len(placement) != 64:
        raise ValueError(f"placement must have 64 squares, got {len(placement)}")
    ranks_str: List[str] = []
    for rank_start in range(0, 64, 8):
        run = 0
        row = []
        for piece in placement[rank_start : rank_start + 8]:
            if piece is None:
                run += 1
            else:
                if run > 0:
                    row.append(str(run))
                    run = 0
                row.append(piece.char)
        if run > 0:
            row.append(str(run))
        ranks_str.append("".join(row))
    fields = [
        "/".join(ranks_str),
        side_to_move.fen_char,
        castling or "-",
        str(en_passant) if en_passant is not None else "-",
        str(halfmove_clock),
        str(fullmove_number),
    ]
    return " ".join(fields)
