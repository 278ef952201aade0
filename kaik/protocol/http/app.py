from __future__ import annotations

import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, Response
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field

from ... import __version__
from ...config import Settings, load_settings
from ...engine.board import Board
from ...engine.move import Move, parse_uci
from ...engine.piece import ALL_PIECES, Piece
from .error import (
    exception_handler,
    http_exception_handler,
    request_validation_exception_handler,
)
from .logging_middleware import RequestIDLoggingMiddleware
from .session import BoardSessionStore


logger = logging.getLogger(__name__)


class CreateBoardRequest(BaseModel):
    fen: Optional[str] = Field(default=None, description="FEN string; start position if omitted")


class CreateBoardResponse(BaseModel):
    board_id: str
    fen: str


class GenerateRequest(BaseModel):
    pieces: Optional[str] = Field(
        default=None, description="Piece letters to generate for, e.g. 'Pp'; all if omitted"
    )


class ApplyRequest(BaseModel):
    move: str = Field(..., description="UCI move string, e.g., e2e4")


class MoveInfo(BaseModel):
    uci: str
    piece: str
    capture: bool


class BoardState(BaseModel):
    board_id: str
    fen: str
    side_to_move: str
    moves: List[MoveInfo]


def _move_info(mv: Move) -> MoveInfo:
    return MoveInfo(uci=mv.to_uci(), piece=mv.piece.char, capture=mv.is_capture)


def _state(board_id: str, board: Board) -> BoardState:
    return BoardState(
        board_id=board_id,
        fen=board.encode(),
        side_to_move=board.side_to_move.fen_char,
        moves=[_move_info(m) for m in board.generate_moves()],
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="Kaik Chess Engine API", version=__version__)

    logging.basicConfig(level=settings.log_level)

    app.add_middleware(RequestIDLoggingMiddleware)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, exception_handler)

    store = BoardSessionStore()
    app.state.store = store

    @app.get("/healthz")
    async def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/boards", response_model=CreateBoardResponse)
    async def create_board(req: Optional[CreateBoardRequest] = None) -> CreateBoardResponse:
        fen = req.fen if req is not None else None
        if fen is None:
            board = Board.initial_position()
        else:
            try:
                board = Board.decode(fen)
            except ValueError as e:
                raise HTTPException(status_code=400, detail=f"invalid FEN: {e}")
        board_id = store.create(board)
        logger.info("board created", extra={"board_id": board_id})
        return CreateBoardResponse(board_id=board_id, fen=board.encode())

    @app.get("/api/boards/{board_id}", response_model=BoardState)
    async def get_board(board_id: str) -> BoardState:
        with store.lock:
            return _state(board_id, _require_board(store, board_id))

    @app.post("/api/boards/{board_id}/moves", response_model=List[MoveInfo])
    async def generate(board_id: str, req: GenerateRequest) -> List[MoveInfo]:
        if req.pieces is None:
            pieces = list(ALL_PIECES)
        else:
            try:
                pieces = [Piece.from_char(ch) for ch in req.pieces]
            except ValueError as e:
                raise HTTPException(status_code=400, detail=str(e))
        with store.lock:
            board = _require_board(store, board_id)
            return [_move_info(m) for m in board.generate_moves_for(pieces)]

    @app.post("/api/boards/{board_id}/apply", response_model=BoardState)
    async def apply(board_id: str, req: ApplyRequest) -> BoardState:
        try:
            from_sq, to_sq, promo = parse_uci(req.move)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        if promo is not None:
            raise HTTPException(status_code=400, detail="promotion is not supported")
        with store.lock:
            board = _require_board(store, board_id)
            move = board.find_move(from_sq, to_sq)
            if move is None:
                raise HTTPException(status_code=400, detail=f"move not available: {req.move}")
            board.apply_move(move)
            board.side_to_move = board.side_to_move.opposite()
            logger.info("move applied", extra={"board_id": board_id, "move": req.move})
            return _state(board_id, board)

    @app.delete("/api/boards/{board_id}", status_code=204)
    async def delete_board(board_id: str) -> Response:
        if not store.delete(board_id):
            raise HTTPException(status_code=404, detail="board not found")
        return Response(status_code=204)

    return app


def _require_board(store: BoardSessionStore, board_id: str) -> Board:
    board = store.get(board_id)
    if board is None:
        raise HTTPException(status_code=404, detail="board not found")
    return board
