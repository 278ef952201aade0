from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .attacks import (
    bishop_targets,
    king_targets,
    knight_targets,
    pawn_targets,
    queen_targets,
    rook_targets,
)
from .bitboard import EMPTY, RANK_2, RANK_7, BitBoard
from .errors import UnsupportedMove
from .fen import create_fen, parse_fen
from .move import Move
from .piece import ALL_PIECES, Color, Piece, PieceKind
from .square import Square


logger = logging.getLogger(__name__)


def _squares(*names: str) -> BitBoard:
    return BitBoard.from_squares(Square.parse(n) for n in names)


# Starting layout, listed in Piece order.
INITIAL_PIECES: List[BitBoard] = [
    RANK_2,
    RANK_7,
    _squares("b1", "g1"),
    _squares("b8", "g8"),
    _squares("c1", "f1"),
    _squares("c8", "f8"),
    _squares("a1", "h1"),
    _squares("a8", "h8"),
    _squares("d1"),
    _squares("d8"),
    _squares("e1"),
    _squares("e8"),
]

# Castling, en passant and clocks are not tracked; encoding writes these.
DEFAULT_CASTLING = "KQkq"


def _color_sets(pieces: List[BitBoard]) -> List[BitBoard]:
    colors = [EMPTY, EMPTY]
    for piece in ALL_PIECES:
        colors[piece.color] |= pieces[piece]
    return colors


@dataclass
class Board:
    """Bitboard position with incremental move application.

    Three layers are kept in sync: one set per piece (indexed by ``Piece``),
    one set per color (indexed by ``Color``), and the global occupancy.

    Notes:
    - Squares are 0..63 (a1=0 .. h8=63), rank-major from white's perspective.
    - Move generation is pseudo-legal: king safety is not checked.
    """

    pieces: List[BitBoard] = field(default_factory=lambda: [EMPTY] * 12)
    colors: List[BitBoard] = field(default_factory=lambda: [EMPTY, EMPTY])
    occupied: BitBoard = EMPTY
    side_to_move: Color = Color.WHITE

    @classmethod
    def empty(cls) -> "Board":
        return cls()

    @classmethod
    def initial_position(cls) -> "Board":
        """Create a board set up in the standard chess starting position."""
        return cls._from_pieces(list(INITIAL_PIECES), Color.WHITE)

    @classmethod
    def _from_pieces(cls, pieces: List[BitBoard], side_to_move: Color) -> "Board":
        colors = _color_sets(pieces)
        return cls(
            pieces=pieces,
            colors=colors,
            occupied=colors[Color.WHITE] | colors[Color.BLACK],
            side_to_move=side_to_move,
        )

    @classmethod
    def decode(cls, text: str) -> "Board":
        """Create a board from a FEN string.

        Only the placement and side to move are kept; the remaining fields
        are validated and dropped.

        Raises:
            InvalidFen: If ``text`` is not a well-formed FEN.
            InvalidPieceChar: If the placement holds an unknown piece letter.
        """
        record = parse_fen(text)
        # placement runs a8..h8, a7..h7, ..., a1..h1
        scan = [Square.from_coords(i % 8, 7 - i // 8) for i in range(64)]
        pieces = [
            BitBoard.from_squares(sq for sq, occupant in zip(scan, record.placement) if occupant is piece)
            for piece in ALL_PIECES
        ]
        logger.debug("decoded position %r", text)
        return cls._from_pieces(pieces, record.side_to_move)

    def encode(self) -> str:
        """Serialize the position into FEN.

        Castling rights, en passant target and clocks are not tracked, so
        they are written as ``KQkq - 0 1``.
        """
        placement: List[Optional[Piece]] = []
        for rank_idx in range(7, -1, -1):
            for file_idx in range(8):
                placement.append(self.piece_at(Square.from_coords(file_idx, rank_idx)))
        return create_fen(placement, self.side_to_move, DEFAULT_CASTLING, None, 0, 1)

    def __str__(self) -> str:
        return self.encode()

    def copy(self) -> "Board":
        return Board(
            pieces=list(self.pieces),
            colors=list(self.colors),
            occupied=self.occupied,
            side_to_move=self.side_to_move,
        )

    # --- queries ---
    def piece_at(self, square: Square) -> Optional[Piece]:
        for piece in ALL_PIECES:
            if self.pieces[piece].is_set(square):
                return piece
        return None

    def is_occupied(self, square: Square) -> bool:
        return self.occupied.is_set(square)

    def pieces_of(self, piece: Piece) -> BitBoard:
        return self.pieces[piece]

    def color_set(self, color: Color) -> BitBoard:
        return self.colors[color]

    def is_consistent(self) -> bool:
        """Check that the three bitboard layers agree and pieces don't overlap."""
        union = EMPTY
        for bb in self.pieces:
            if union & bb:
                return False
            union |= bb
        if self.colors != _color_sets(self.pieces):
            return False
        return self.occupied == union == (self.colors[Color.WHITE] | self.colors[Color.BLACK])

    # --- move generation ---
    def _targets(self, piece: Piece, from_sq: Square, opposite: BitBoard) -> BitBoard:
        kind = piece.kind
        if kind is PieceKind.KING:
            return king_targets(from_sq)
        if kind is PieceKind.KNIGHT:
            return knight_targets(from_sq)
        if kind is PieceKind.PAWN:
            return pawn_targets(piece.color, from_sq, self.occupied, opposite)
        if kind is PieceKind.BISHOP:
            return bishop_targets(from_sq, self.occupied)
        if kind is PieceKind.ROOK:
            return rook_targets(from_sq, self.occupied)
        return queen_targets(from_sq, self.occupied)

    def generate_moves_for(self, pieces: Iterable[Piece]) -> List[Move]:
        """Return pseudo-legal moves of the given pieces for the side to move.

        Pieces of the other color are skipped. Moves come out grouped by
        piece (in ``Piece`` order), then by ascending origin square, then by
        ascending destination square.
        """
        moves: List[Move] = []
        own = self.colors[self.side_to_move]
        opposite = self.colors[self.side_to_move.opposite()]

        for piece in sorted(set(pieces)):
            if piece.color is not self.side_to_move:
                continue
            pieces_bb = self.pieces[piece]
            while pieces_bb:
                from_bb = pieces_bb.lsb()
                from_sq = Square(from_bb.lsb_index())
                targets = self._targets(piece, from_sq, opposite) & ~own
                while targets:
                    to_bb = targets.lsb()
                    to_sq = Square(to_bb.lsb_index())
                    is_capture = opposite.contains(to_bb)
                    moves.append(Move(from_sq, to_sq, None, piece, is_capture))
                    targets = targets.reset_lsb()
                pieces_bb = pieces_bb.reset_lsb()
        return moves

    def generate_moves(self) -> List[Move]:
        return self.generate_moves_for(ALL_PIECES)

    def find_move(self, from_sq: Square, to_sq: Square) -> Optional[Move]:
        """Look up the generated move between two squares, if there is one."""
        piece = self.piece_at(from_sq)
        if piece is None:
            return None
        for mv in self.generate_moves_for([piece]):
            if mv.to_sq == to_sq:
                return mv
        return None

    # --- move application ---
    def apply_move(self, move: Move) -> None:
        """Apply ``move`` to this board in place.

        Update by move: the origin and destination bits are flipped together
        in the mover's piece and color sets. On a capture the destination bit
        is flipped out of the captured piece's set and the opponent's color
        set. The side to move is left unchanged.

        Raises:
            UnsupportedMove: If the move carries a promotion.
        """
        # TODO: castling and en passant need their own update paths once generated.
        if move.promotion is not None:
            raise UnsupportedMove(f"promotion is not supported: {move.to_uci()}")
        color = move.piece.color
        from_bb = BitBoard.from_square(move.from_sq)
        to_bb = BitBoard.from_square(move.to_sq)
        from_to_bb = from_bb ^ to_bb

        self.pieces[move.piece] ^= from_to_bb
        self.colors[color] ^= from_to_bb

        if move.is_capture:
            opponent = color.opposite()
            for piece in ALL_PIECES:
                if piece.color is opponent and self.pieces[piece] & to_bb:
                    self.pieces[piece] ^= to_bb
                    self.colors[opponent] ^= to_bb
                    break
            # destination stays occupied, only the origin empties
            self.occupied ^= from_bb
        else:
            self.occupied ^= from_to_bb
        logger.debug("applied %s", move)
