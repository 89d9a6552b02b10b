"""Tests for the terminal front end."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from othello_ai.cli import main, parse_args
from othello_ai.game.board import Board
from othello_ai.io import load_from_file


def _feed(monkeypatch: pytest.MonkeyPatch, answers: list[str]) -> None:
    """input() が answers を順に返すようにする。"""
    it: Iterator[str] = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(it))


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.black == "human"
    assert args.white == "minimax"
    assert args.depth == 4
    assert args.iterations == 1000


def test_parse_args_normalizes_keys() -> None:
    assert parse_args(["--white", "Alpha Beta"]).white == "alphabeta"


def test_parse_args_rejects_unknown_side() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--black", "negamax"])


def test_computer_game_runs_to_the_end(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--black", "random", "--white", "random", "--seed", "1"])
    out = capsys.readouterr().out
    assert "BLACK" in out
    assert "wins!" in out or "Draw!" in out


def test_human_can_quit(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    _feed(monkeypatch, ["quit"])
    main(["--black", "human", "--white", "random"])
    out = capsys.readouterr().out
    assert "Legal moves:" in out
    assert "wins!" not in out


def test_human_invalid_then_valid_move(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    # 範囲外の番号・非合法マス・意味のない入力のあと d3 を打ち、白の手番で終了
    _feed(monkeypatch, ["9", "a1", "xyz", "d3", "quit"])
    main(["--black", "human", "--white", "human"])
    out = capsys.readouterr().out
    assert "Invalid: choose 0-3" in out
    assert "a1 is not an available move" in out
    assert "Enter a number" in out
    assert "BLACK (AI)" not in out


def test_save_command(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    path = tmp_path / "game.json"
    _feed(monkeypatch, ["save", "quit"])
    main(["--black", "human", "--white", "random", "--save", str(path)])
    assert load_from_file(path).board == Board.initial()


def test_load_resumes_game(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "game.json"
    _feed(monkeypatch, ["0", "save", "quit"])
    main(["--black", "human", "--white", "human", "--save", str(path)])
    capsys.readouterr()

    main(["--black", "random", "--white", "random", "--seed", "2", "--load", str(path)])
    out = capsys.readouterr().out
    assert "wins!" in out or "Draw!" in out
