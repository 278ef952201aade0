#!/usr/bin/env python3
# ruff: noqa: E402
from __future__ import annotations

import argparse
import os
import sys
import time

# Allow running this script directly via `python scripts/bench_movegen.py`
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from kaik.engine.board import Board
from kaik.engine.fen import START_POSITION


def run(board: Board, iterations: int) -> int:
    """Generate every move and apply each one to a copy; return moves seen."""
    moves_seen = 0
    for _ in range(iterations):
        for mv in board.generate_moves():
            child = board.copy()
            child.apply_move(mv)
            moves_seen += 1
    return moves_seen


def main() -> None:
    parser = argparse.ArgumentParser(description="Time move generation and application")
    parser.add_argument(
        "--fen", type=str, default=START_POSITION, help="FEN string (default: startpos)"
    )
    parser.add_argument("--iterations", type=int, default=1000, help="Repetitions (default: 1000)")
    args = parser.parse_args()

    board = Board.decode(args.fen)
    start = time.perf_counter()
    moves = run(board, args.iterations)
    dt = time.perf_counter() - start
    print(f"moves={moves} iterations={args.iterations} time_ms={int(dt*1000)} mps={int(moves/max(dt,1e-9))}")


if __name__ == "__main__":
    main()
