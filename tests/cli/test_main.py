from __future__ import annotations

import io

import pytest

from kaik.cli.main import main


def _run(argv: list[str]) -> tuple[int, str]:
    out = io.StringIO()
    code = main(argv, out=out)
    return code, out.getvalue()


def test_moves_lists_king_moves() -> None:
    code, text = _run(
        ["moves", "--fen", "2k5/8/8/8/8/8/2Pp4/2K5 w - - 0 1", "--pieces", "K", "--ascii"]
    )
    assert code == 0
    assert text.splitlines()[-4:] == ["Kc1-b1", "Kc1-d1", "Kc1-b2", "Kc1xd2"]


def test_moves_show_boards_draws_each_move() -> None:
    code, text = _run(
        [
            "moves",
            "--fen",
            "2k5/8/8/8/8/8/2Pp4/2K5 w - - 0 1",
            "--pieces",
            "K",
            "--ascii",
            "--show-boards",
        ]
    )
    assert code == 0
    assert text.count("[") == 4


def test_apply_prints_fen() -> None:
    code, text = _run(["apply", "b2b3"])
    assert code == 0
    assert text.strip() == "rnbqkbnr/pppppppp/8/8/8/1P6/P1PPPPPP/RNBQKBNR b KQkq - 0 1"


def test_apply_plays_both_sides_in_turn() -> None:
    code, text = _run(["apply", "e2e4", "e7e5", "g1f3"])
    assert code == 0
    assert text.strip() == "rnbqkbnr/pppp1ppp/8/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R b KQkq - 0 1"


def test_apply_rejects_same_side_twice(capsys: pytest.CaptureFixture[str]) -> None:
    code, _ = _run(["apply", "e2e4", "d2d4"])
    assert code == 2
    assert "move not available: d2d4" in capsys.readouterr().err


def test_default_output_follows_redirected_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["apply", "b2b3"]) == 0
    assert capsys.readouterr().out.startswith("rnbqkbnr/pppppppp/8/8/8/1P6/")


@pytest.mark.parametrize(
    "argv",
    [
        ["apply", "e2e5"],
        ["apply", "zz"],
        ["moves", "--fen", "bad"],
        ["moves", "--pieces", "X"],
    ],
)
def test_bad_input_exits_with_2(argv: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    code, _ = _run(argv)
    assert code == 2
    assert capsys.readouterr().err.startswith("error:")
