from __future__ import annotations

import threading
import uuid
from typing import Dict, Optional

from ...engine.board import Board


class BoardSessionStore:
    """Thread-safe in-memory store of boards keyed by ``board_id``.

    Boards are mutated in place by ``apply_move``; callers hold ``lock``
    around read-modify-write sequences on a stored board.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._boards: Dict[str, Board] = {}

    def create(self, board: Optional[Board] = None) -> str:
        board_id = str(uuid.uuid4())
        if board is None:
            board = Board.initial_position()
        with self.lock:
            self._boards[board_id] = board
        return board_id

    def get(self, board_id: str) -> Optional[Board]:
        with self.lock:
            return self._boards.get(board_id)

    def delete(self, board_id: str) -> bool:
        with self.lock:
            return self._boards.pop(board_id, None) is not None

    def __len__(self) -> int:
        with self.lock:
            return len(self._boards)
