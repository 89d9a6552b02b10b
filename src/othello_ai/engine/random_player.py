"""Random player — selects a legal move uniformly at random.

ランダムプレイヤー: 合法手の中からランダムに手を選ぶ。

用途:
- 実装の動作確認（ルールが正しく実装されているかテスト）
- ベースラインとの対戦（ランダムに勝てないAIは弱すぎる）
"""

from __future__ import annotations

import random

from othello_ai.game.board import Board, Cell
from othello_ai.game.moves import available_moves
from othello_ai.game.player import Player
from othello_ai.game.types import Color


def random_move(board: Board, color: Color, rng: random.Random | None = None) -> Cell | None:
    """Return a random legal move for color, or None (pass) if there is none.

    合法手の中から一様ランダムで1手を返す。
    """
    moves = available_moves(board, color)
    if not moves:
        return None
    return (rng or random).choice(list(moves))  # 一様ランダムサンプリング


class RandomPlayer:
    """Strategy wrapper around random_move() with its own generator."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)

    def choose_move(self, board: Board, me: Player, opponent: Player) -> Cell | None:
        return random_move(board, me.color, self.rng)
