"""Othello — 8x8 board, BLACK moves first."""

from othello_ai.game.board import Board, Cell
from othello_ai.game.display import board_to_str
from othello_ai.game.errors import GameOverError, IllegalMoveError, OthelloError
from othello_ai.game.game import OthelloGame
from othello_ai.game.moves import apply_move, available_moves
from othello_ai.game.player import Player, PlayerKind
from othello_ai.game.snapshot import GameSnapshot
from othello_ai.game.types import BOARD_SIZE, Color

__all__ = [
    "BOARD_SIZE",
    "Board",
    "Cell",
    "Color",
    "GameOverError",
    "GameSnapshot",
    "IllegalMoveError",
    "OthelloError",
    "OthelloGame",
    "Player",
    "PlayerKind",
    "apply_move",
    "available_moves",
    "board_to_str",
]
