"""Raw target sets per piece kind.

King and knight targets come from tables built once at import by shifting
a single-square set with file masks, so nothing wraps from file a to file h.
Sliding pieces use precomputed rays: the first blocker on a ray is its
lowest (ascending rays) or highest (descending rays) occupied square, and
everything beyond the blocker is cut off with the blocker's own ray.

All functions return targets before the mover's own pieces are masked out.
"""
from __future__ import annotations

from typing import List, Tuple

from .bitboard import (
    BitBoard,
    NOT_FILE_A,
    NOT_FILE_AB,
    NOT_FILE_GH,
    NOT_FILE_H,
    RANK_3,
    RANK_6,
)
from .piece import Color


def _king_mask(b: BitBoard) -> BitBoard:
    side = ((b << 1) & NOT_FILE_A) | ((b >> 1) & NOT_FILE_H)
    row = side | b
    return side | (row << 8) | (row >> 8)


def _knight_mask(b: BitBoard) -> BitBoard:
    l1 = (b >> 1) & NOT_FILE_H
    l2 = (b >> 2) & NOT_FILE_GH
    r1 = (b << 1) & NOT_FILE_A
    r2 = (b << 2) & NOT_FILE_AB
    h1 = l1 | r1
    h2 = l2 | r2
    return (h1 << 16) | (h1 >> 16) | (h2 << 8) | (h2 >> 8)


KING_ATTACKS: List[BitBoard] = [_king_mask(BitBoard.from_square(sq)) for sq in range(64)]
KNIGHT_ATTACKS: List[BitBoard] = [_knight_mask(BitBoard.from_square(sq)) for sq in range(64)]


# (file delta, rank delta, ascending); ascending rays grow toward h8.
NORTH, SOUTH, EAST, WEST, NORTH_EAST, NORTH_WEST, SOUTH_EAST, SOUTH_WEST = range(8)
DIRECTIONS: List[Tuple[int, int, bool]] = [
    (0, 1, True),
    (0, -1, False),
    (1, 0, True),
    (-1, 0, False),
    (1, 1, True),
    (-1, 1, True),
    (1, -1, False),
    (-1, -1, False),
]
ROOK_DIRECTIONS = (NORTH, SOUTH, EAST, WEST)
BISHOP_DIRECTIONS = (NORTH_EAST, NORTH_WEST, SOUTH_EAST, SOUTH_WEST)
QUEEN_DIRECTIONS = ROOK_DIRECTIONS + BISHOP_DIRECTIONS


def _build_rays() -> List[List[int]]:
    rays = [[0] * 64 for _ in DIRECTIONS]
    for d, (df, dr, _) in enumerate(DIRECTIONS):
        for sq in range(64):
            f, r = sq % 8 + df, sq // 8 + dr
            mask = 0
            while 0 <= f < 8 and 0 <= r < 8:
                mask |= 1 << (r * 8 + f)
                f += df
                r += dr
            rays[d][sq] = mask
    return rays


RAYS: List[List[int]] = _build_rays()


def _ray_attacks(direction: int, sq: int, occupied: int) -> int:
    ray = RAYS[direction][sq]
    blockers = ray & occupied
    if not blockers:
        return ray
    if DIRECTIONS[direction][2]:
        blocker = (blockers & -blockers).bit_length() - 1
    else:
        blocker = blockers.bit_length() - 1
    return ray ^ RAYS[direction][blocker]


def _slide(directions: Tuple[int, ...], square: int, occupied: BitBoard) -> BitBoard:
    sq = int(square)
    occ = occupied.value
    attacks = 0
    for d in directions:
        attacks |= _ray_attacks(d, sq, occ)
    return BitBoard(attacks)


def king_targets(square: int) -> BitBoard:
    return KING_ATTACKS[int(square)]


def knight_targets(square: int) -> BitBoard:
    return KNIGHT_ATTACKS[int(square)]


def bishop_targets(square: int, occupied: BitBoard) -> BitBoard:
    return _slide(BISHOP_DIRECTIONS, square, occupied)


def rook_targets(square: int, occupied: BitBoard) -> BitBoard:
    return _slide(ROOK_DIRECTIONS, square, occupied)


def queen_targets(square: int, occupied: BitBoard) -> BitBoard:
    return _slide(QUEEN_DIRECTIONS, square, occupied)


def pawn_targets(color: Color, square: int, occupied: BitBoard, opponents: BitBoard) -> BitBoard:
    """Pushes onto empty squares plus diagonal captures onto ``opponents``.

    A double push needs the pawn on its home rank with both squares ahead
    empty: the single push must land on rank 3 (rank 6 for black) and the
    square beyond it must be free.
    """
    b = BitBoard.from_square(square)
    empty = ~occupied
    if color is Color.WHITE:
        single = (b << 8) & empty
        double = ((single & RANK_3) << 8) & empty
        captures = ((b << 7) & NOT_FILE_H) | ((b << 9) & NOT_FILE_A)
    else:
        single = (b >> 8) & empty
        double = ((single & RANK_6) >> 8) & empty
        captures = ((b >> 9) & NOT_FILE_H) | ((b >> 7) & NOT_FILE_A)
    return single | double | (captures & opponents)
