from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

import uvicorn

from ..config import Settings, load_settings
from ..engine.board import Board
from ..engine.fen import START_POSITION
from ..engine.move import parse_uci
from ..engine.piece import ALL_PIECES, Piece
from ..engine.render import render_board, render_moves


logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kaik", description="Kaik bitboard chess engine")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    sub = parser.add_subparsers(dest="command", required=True)

    moves = sub.add_parser("moves", help="Print the pseudo-legal moves of a position")
    moves.add_argument("--fen", default=START_POSITION, help="FEN string (default: startpos)")
    moves.add_argument(
        "--pieces", default=None, help="Piece letters to generate for, e.g. 'Nn' (default: all)"
    )
    moves.add_argument("--ascii", action="store_true", help="Draw pieces as letters")
    moves.add_argument(
        "--show-boards", action="store_true", help="Draw the board once per move"
    )

    apply = sub.add_parser("apply", help="Apply UCI moves and print the resulting FEN")
    apply.add_argument("--fen", default=START_POSITION, help="FEN string (default: startpos)")
    apply.add_argument("moves", nargs="+", help="Moves in UCI form, e.g. e2e4")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=settings.host)
    serve.add_argument("--port", type=int, default=settings.port)
    return parser


def cmd_moves(args: argparse.Namespace, settings: Settings, out: TextIO) -> int:
    board = Board.decode(args.fen)
    if args.pieces is None:
        pieces = list(ALL_PIECES)
    else:
        pieces = [Piece.from_char(ch) for ch in args.pieces]
    unicode = settings.unicode and not args.ascii
    moves = board.generate_moves_for(pieces)

    print(render_board(board, unicode=unicode), file=out)
    print(file=out)
    print(render_moves(moves), file=out)
    if args.show_boards:
        for mv in moves:
            print(file=out)
            print(mv, file=out)
            print(render_board(board, mv, unicode=unicode), file=out)
    return 0


def cmd_apply(args: argparse.Namespace, out: TextIO) -> int:
    board = Board.decode(args.fen)
    for text in args.moves:
        from_sq, to_sq, promo = parse_uci(text)
        move = board.find_move(from_sq, to_sq) if promo is None else None
        if move is None:
            raise ValueError(f"move not available: {text}")
        board.apply_move(move)
        board.side_to_move = board.side_to_move.opposite()
    print(board.encode(), file=out)
    return 0


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    out = out if out is not None else sys.stdout
    settings = load_settings()
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(level=args.log_level.upper())

    if args.command == "serve":
        uvicorn.run(
            "kaik.protocol.http.app:create_app", factory=True, host=args.host, port=args.port
        )
        return 0
    try:
        if args.command == "moves":
            return cmd_moves(args, settings, out)
        return cmd_apply(args, out)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
