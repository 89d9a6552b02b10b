"""Tests for move generation and move application."""

from __future__ import annotations

import random

import pytest

from othello_ai.game.board import Board, Cell
from othello_ai.game.display import board_from_rows
from othello_ai.game.errors import IllegalMoveError
from othello_ai.game.moves import (
    apply_move,
    available_moves,
    captured_cells,
    disc_counts,
    is_game_over,
    line_between,
    play_move,
    winner,
)
from othello_ai.game.types import NUM_CELLS, Color

# 着手先 (2,2) に3方向から届く局面。(6,2) の W は起点 (5,2) の外側にある。
MULTI_ORIGIN_ROWS = [
    "B.......",
    ".W......",
    "BW......",
    "..W.....",
    "..W.....",
    "..B.....",
    "..W.....",
    "........",
]


def _coords(cells: list[Cell]) -> list[tuple[int, int]]:
    return [c.coords for c in cells]


class TestInitialMoves:
    def test_black_has_four_moves(self) -> None:
        moves = available_moves(Board.initial(), Color.BLACK)
        assert {c.coords for c in moves} == {(2, 3), (3, 2), (4, 5), (5, 4)}

    def test_discovery_order(self) -> None:
        moves = available_moves(Board.initial(), Color.BLACK)
        assert _coords(list(moves)) == [(3, 2), (5, 4), (2, 3), (4, 5)]

    def test_white_has_four_moves(self) -> None:
        moves = available_moves(Board.initial(), Color.WHITE)
        assert {c.coords for c in moves} == {(2, 4), (3, 5), (4, 2), (5, 3)}

    def test_each_move_has_one_origin(self) -> None:
        moves = available_moves(Board.initial(), Color.BLACK)
        assert _coords(moves[Cell(2, 3)]) == [(4, 3)]
        assert _coords(moves[Cell(3, 2)]) == [(3, 4)]


class TestMoveGeneration:
    def test_single_option(self) -> None:
        board = Board.empty().set_color(0, 0, Color.BLACK).set_color(0, 1, Color.WHITE)
        moves = available_moves(board, Color.BLACK)
        assert _coords(list(moves)) == [(0, 2)]
        assert _coords(moves[Cell(0, 2)]) == [(0, 0)]

    def test_lone_disc_has_no_moves(self) -> None:
        board = Board.empty().set_color(4, 4, Color.BLACK)
        assert available_moves(board, Color.BLACK) == {}

    def test_blocked_by_edge(self) -> None:
        # 相手の石が盤端まで続く → 着手先がない
        board = Board.empty().set_color(0, 1, Color.BLACK).set_color(0, 0, Color.WHITE)
        assert available_moves(board, Color.BLACK) == {}

    def test_own_disc_ends_walk(self) -> None:
        board = board_from_rows(["BBW....."] + ["........"] * 7)
        moves = available_moves(board, Color.BLACK)
        # (0,0) から東は自分の石 (0,1) で止まる。(0,1) からは (0,3) に届く
        assert _coords(list(moves)) == [(0, 3)]
        assert _coords(moves[Cell(0, 3)]) == [(0, 1)]

    def test_full_board_has_no_moves(self) -> None:
        board = Board(colors=(Color.BLACK,) * NUM_CELLS)
        assert available_moves(board, Color.BLACK) == {}
        assert available_moves(board, Color.WHITE) == {}

    def test_origins_sorted_by_distance(self) -> None:
        board = board_from_rows(MULTI_ORIGIN_ROWS)
        moves = available_moves(board, Color.BLACK)
        assert {c.coords for c in moves} == {(2, 2), (0, 2), (7, 2)}
        # 距離: (2,0)=2, (5,2)=3, (0,0)=4
        assert _coords(moves[Cell(2, 2)]) == [(2, 0), (5, 2), (0, 0)]


class TestMoveApplication:
    def test_flips_single_line(self) -> None:
        board = Board.initial()
        moves = available_moves(board, Color.BLACK)
        new_board = apply_move(board, Color.BLACK, Cell(2, 3), moves[Cell(2, 3)])
        assert new_board.color_at(2, 3) == Color.BLACK
        assert new_board.color_at(3, 3) == Color.BLACK
        assert new_board.count(Color.BLACK) == 4
        assert new_board.count(Color.WHITE) == 1
        assert board == Board.initial()  # Original unchanged

    def test_flips_every_line_but_nothing_beyond(self) -> None:
        board = board_from_rows(MULTI_ORIGIN_ROWS)
        moves = available_moves(board, Color.BLACK)
        new_board = apply_move(board, Color.BLACK, Cell(2, 2), moves[Cell(2, 2)])
        for coords in [(2, 2), (2, 1), (1, 1), (3, 2), (4, 2)]:
            assert new_board.color_at(*coords) == Color.BLACK
        # 起点 (5,2) の外側の白石はそのまま
        assert new_board.color_at(6, 2) == Color.WHITE
        assert new_board.count(Color.BLACK) == 8
        assert new_board.count(Color.WHITE) == 1

    def test_captured_cells_destination_first(self) -> None:
        cells = captured_cells(Cell(2, 2), [Cell(2, 0), Cell(5, 2), Cell(0, 0)])
        assert cells == [(2, 2), (2, 1), (4, 2), (3, 2), (1, 1)]

    def test_line_between(self) -> None:
        assert line_between(Cell(5, 2), Cell(2, 2)) == [(4, 2), (3, 2)]
        assert line_between(Cell(0, 0), Cell(3, 3)) == [(1, 1), (2, 2)]
        assert line_between(Cell(0, 0), Cell(0, 1)) == []

    def test_line_between_rejects_bent_line(self) -> None:
        with pytest.raises(ValueError):
            line_between(Cell(0, 0), Cell(1, 2))

    def test_play_move_rejects_illegal_cell(self) -> None:
        with pytest.raises(IllegalMoveError):
            play_move(Board.initial(), Color.BLACK, Cell(0, 0))


class TestInvariants:
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_random_games_keep_invariants(self, seed: int) -> None:
        """ランダム対局の全局面で、合法手と石数の不変条件が成り立つ。"""
        rng = random.Random(seed)
        board = Board.initial()
        color = Color.BLACK
        passes = 0
        while passes < 2:
            moves = available_moves(board, color)
            for destination, origins in moves.items():
                assert board.color_at(destination.x, destination.y) == Color.EMPTY
                assert origins
            if not moves:
                passes += 1
                color = color.opponent
                continue
            passes = 0
            destination = rng.choice(list(moves))
            before = disc_counts(board)
            board = apply_move(board, color, destination, moves[destination])
            after = disc_counts(board)
            total = board.count(Color.BLACK) + board.count(Color.WHITE) + board.count(Color.EMPTY)
            assert total == NUM_CELLS
            # 着手した側は「1枚 + 裏返した枚数」増え、相手は裏返した分だけ減る
            flipped = before[color.opponent] - after[color.opponent]
            assert flipped >= 1
            assert after[color] == before[color] + flipped + 1
            color = color.opponent
        assert is_game_over(board)


class TestTerminal:
    def test_initial_not_over(self) -> None:
        assert not is_game_over(Board.initial())

    def test_full_board_over(self) -> None:
        assert is_game_over(Board(colors=(Color.WHITE,) * NUM_CELLS))

    def test_nobody_can_move(self) -> None:
        board = Board.empty().set_color(0, 0, Color.BLACK).set_color(7, 7, Color.WHITE)
        assert is_game_over(board)

    def test_winner(self) -> None:
        board = Board.empty().set_colors([(0, 0), (0, 1)], Color.BLACK).set_color(7, 7, Color.WHITE)
        assert winner(board) == Color.BLACK
        assert winner(Board.initial()) is None
