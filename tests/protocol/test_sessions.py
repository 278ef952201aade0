from __future__ import annotations

from kaik.engine.board import Board
from kaik.protocol.http.session import BoardSessionStore


def test_create_defaults_to_start_position() -> None:
    store = BoardSessionStore()
    board_id = store.create()
    assert store.get(board_id) == Board.initial_position()
    assert len(store) == 1


def test_ids_are_unique_and_boards_independent() -> None:
    store = BoardSessionStore()
    a = store.create()
    b = store.create(Board.empty())
    assert a != b
    assert store.get(a) != store.get(b)


def test_get_unknown_returns_none() -> None:
    assert BoardSessionStore().get("does-not-exist") is None


def test_delete() -> None:
    store = BoardSessionStore()
    board_id = store.create()
    assert store.delete(board_id)
    assert store.get(board_id) is None
    assert not store.delete(board_id)
