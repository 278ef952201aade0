from __future__ import annotations

from typing import Iterable, List, Optional

from .board import Board
from .move import Move
from .square import Square


def render_board(board: Board, move: Optional[Move] = None, unicode: bool = True) -> str:
    """Draw the board as text, rank 8 on top.

    When ``move`` is given, its origin is drawn as ``*`` and its
    destination is wrapped in brackets.
    """
    lines: List[str] = []
    for rank_idx in range(7, -1, -1):
        cells = []
        for file_idx in range(8):
            sq = Square.from_coords(file_idx, rank_idx)
            piece = board.piece_at(sq)
            ch = "." if piece is None else (piece.symbol if unicode else piece.char)
            if move is not None and sq == move.from_sq:
                ch = "*"
            if move is not None and sq == move.to_sq:
                cells.append(f"[{ch}]")
            else:
                cells.append(f" {ch} ")
        lines.append(f"  {rank_idx + 1} " + "".join(cells))
    lines.append("     " + "  ".join("abcdefgh"))
    return "\n".join(lines)


def render_moves(moves: Iterable[Move]) -> str:
    return "\n".join(str(mv) for mv in moves)
