"""Tests for MCTS search."""

from __future__ import annotations

import math
import random

import pytest

from othello_ai.arena import pit
from othello_ai.engine.mcts import MCTS, MCTSConfig, MCTSNode
from othello_ai.engine.random_player import RandomPlayer
from othello_ai.game.board import Board, Cell
from othello_ai.game.moves import available_moves
from othello_ai.game.player import Player
from othello_ai.game.types import NUM_CELLS, Color


def _mcts(iterations: int = 30, seed: int = 0) -> MCTS:
    return MCTS(MCTSConfig(num_iterations=iterations), rng=random.Random(seed))


class TestMCTSNode:
    def test_unvisited_ucb_is_infinite(self) -> None:
        root = MCTSNode(board=Board.initial(), color=Color.BLACK, visits=1)
        child = MCTSNode(board=Board.initial(), color=Color.WHITE, parent=root)
        assert child.ucb1(math.sqrt(2)) == math.inf

    def test_ucb1_value(self) -> None:
        root = MCTSNode(board=Board.initial(), color=Color.BLACK, visits=10)
        child = MCTSNode(board=Board.initial(), color=Color.WHITE, parent=root, wins=1, visits=2)
        expected = 0.5 + math.sqrt(2) * math.sqrt(math.log(10) / 2)
        assert child.ucb1(math.sqrt(2)) == pytest.approx(expected)

    def test_win_rate(self) -> None:
        assert MCTSNode(board=Board.initial(), color=Color.BLACK).win_rate == 0.0
        node = MCTSNode(board=Board.initial(), color=Color.BLACK, wins=3, visits=4)
        assert node.win_rate == 0.75


class TestMCTSConfig:
    def test_defaults(self) -> None:
        config = MCTSConfig()
        assert config.num_iterations == 1000
        assert config.exploration == pytest.approx(math.sqrt(2))

    def test_rejects_zero_iterations(self) -> None:
        with pytest.raises(ValueError):
            MCTSConfig(num_iterations=0)


class TestMCTSSearch:
    def test_only_move(self) -> None:
        board = Board.empty().set_color(0, 0, Color.BLACK).set_color(0, 1, Color.WHITE)
        assert _mcts().search(board, Color.BLACK) == Cell(0, 2)

    def test_returns_legal_move(self) -> None:
        move = _mcts().search(Board.initial(), Color.BLACK)
        assert move in available_moves(Board.initial(), Color.BLACK)

    def test_root_visits(self) -> None:
        root = _mcts(iterations=40).search_tree(Board.initial(), Color.BLACK)
        assert root.visits == 40
        assert len(root.children) == 4
        assert sum(child.visits for child in root.children) == 40
        assert all(child.color == Color.WHITE for child in root.children)

    def test_chooses_most_visited(self) -> None:
        root = _mcts(iterations=40, seed=3).search_tree(Board.initial(), Color.BLACK)
        best = max(root.children, key=lambda child: child.visits)
        assert _mcts(iterations=40, seed=3).search(Board.initial(), Color.BLACK) == best.move

    def test_seed_is_reproducible(self) -> None:
        first = MCTS(MCTSConfig(num_iterations=50, seed=5)).search(Board.initial(), Color.BLACK)
        second = MCTS(MCTSConfig(num_iterations=50, seed=5)).search(Board.initial(), Color.BLACK)
        assert first == second

    def test_strategy_interface(self) -> None:
        move = _mcts().choose_move(Board.initial(), Player.human(Color.WHITE), Player.human(Color.BLACK))
        assert move in available_moves(Board.initial(), Color.WHITE)

    def test_does_not_mutate_board(self) -> None:
        board = Board.initial()
        _mcts().search(board, Color.BLACK)
        assert board == Board.initial()

    @pytest.mark.slow
    def test_full_games_against_random(self) -> None:
        results = pit(
            lambda: _mcts(iterations=50, seed=7),
            lambda: RandomPlayer(seed=13),
            num_games=2,
        )
        assert sum(results) == 2


class TestMCTSPass:
    def test_no_moves_runs_no_iterations(self, monkeypatch: pytest.MonkeyPatch) -> None:
        mcts = _mcts()

        def fail(*args: object) -> MCTSNode:
            raise AssertionError("search should not start")

        monkeypatch.setattr(mcts, "search_tree", fail)
        board = Board.empty().set_color(4, 4, Color.BLACK)
        assert mcts.search(board, Color.BLACK) is None

    def test_full_board_passes(self) -> None:
        board = Board(colors=(Color.BLACK,) * NUM_CELLS)
        assert _mcts().search(board, Color.WHITE) is None
