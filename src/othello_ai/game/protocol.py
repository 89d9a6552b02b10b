"""Strategy protocol — every computer player's decision maker implements this.

思考エンジンの共通インタフェース（プロトコル）。

ミニマックス・MCTS・ニューラルネットワーク・ランダムなど、
このプロトコルを実装したクラスなら何でもコンピュータプレイヤーに差し込める。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from othello_ai.game.board import Board, Cell

if TYPE_CHECKING:
    from othello_ai.game.player import Player


@runtime_checkable  # isinstance() でのランタイムチェックを有効にする
class Strategy(Protocol):
    """Common interface for move-choosing strategies.

    重要: choose_move() は盤面やプレイヤーを変更しない。
    盤面はイミュータブルなので、探索は自由に新しい盤面を作ってよい。
    実際の着手はゲーム側（OthelloGame）が合法性を確認してから行う。
    """

    def choose_move(self, board: Board, me: Player, opponent: Player) -> Cell | None:
        """着手先マスを返す。合法手がなければ None（パス）。"""
        ...
