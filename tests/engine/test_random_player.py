"""Tests for random player."""

import random

from othello_ai.engine.random_player import RandomPlayer, random_move
from othello_ai.game.board import Board
from othello_ai.game.moves import apply_move, available_moves, is_game_over
from othello_ai.game.player import Player
from othello_ai.game.types import Color


def test_returns_legal_move() -> None:
    move = random_move(Board.initial(), Color.BLACK)
    assert move in available_moves(Board.initial(), Color.BLACK)


def test_passes_without_moves() -> None:
    board = Board.empty().set_color(4, 4, Color.BLACK)
    assert random_move(board, Color.BLACK) is None


def test_seeded_player_is_reproducible() -> None:
    black, white = Player.human(Color.BLACK), Player.human(Color.WHITE)
    first = [RandomPlayer(seed=42).choose_move(Board.initial(), black, white) for _ in range(3)]
    second = [RandomPlayer(seed=42).choose_move(Board.initial(), black, white) for _ in range(3)]
    assert first == second


def test_game_completes() -> None:
    """Random vs random game should terminate within 60 discs plus passes."""
    rng = random.Random(0)
    board = Board.initial()
    color = Color.BLACK
    for _ in range(200):
        if is_game_over(board):
            break
        move = random_move(board, color, rng)
        if move is not None:
            board = apply_move(board, color, move, available_moves(board, color)[move])
        color = color.opponent
    assert is_game_over(board)
