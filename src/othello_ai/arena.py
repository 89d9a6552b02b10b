"""Arena for evaluating strategy strength through head-to-head matches.

アリーナ: 2つの戦略を対戦させて強さを評価するモジュール。
各局は独立した OthelloGame・プレイヤー・戦略インスタンスを使い、
対局間で可変な状態を共有しない。
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from othello_ai.game.game import OthelloGame
from othello_ai.game.player import Player
from othello_ai.game.protocol import Strategy
from othello_ai.game.types import Color

LOGGER = logging.getLogger(__name__)

StrategyFactory = Callable[[], Strategy]


def play_match(black: Strategy, white: Strategy, max_turns: int | None = None) -> Color | None:
    """Play one game and return the winning color (None for a draw).

    max_turns で打ち切った場合も None（引き分け扱い）。
    """
    game = OthelloGame(Player.computer(Color.BLACK, black), Player.computer(Color.WHITE, white))
    winner = game.play_out(max_turns)
    return winner.color if winner is not None else None


def pit(
    first_factory: StrategyFactory,
    second_factory: StrategyFactory,
    num_games: int = 10,
    swap_colors: bool = True,
    max_turns: int | None = None,
) -> tuple[int, int, int]:
    """Play num_games between two strategies.

    2つの戦略を num_games 局対戦させる。
    swap_colors=True なら先手（黒）・後手（白）を交互に入れ替え、
    先手有利バイアスを打ち消す。

    Args:
        first_factory:  戦略1を毎局新しく作る関数
        second_factory: 戦略2を毎局新しく作る関数
        num_games: 対局数（偶数にすると先後均等になる）
        swap_colors: 奇数局で色を入れ替えるか
        max_turns: 1局の最大手数（None なら終局まで）

    Returns:
        (first_wins, second_wins, draws)
    """
    first_wins = 0
    second_wins = 0
    draws = 0

    for game_idx in range(num_games):
        first_is_black = not (swap_colors and game_idx % 2 == 1)
        first, second = first_factory(), second_factory()
        if first_is_black:
            result = play_match(first, second, max_turns)
        else:
            result = play_match(second, first, max_turns)

        if result is None:
            draws += 1
        elif (result == Color.BLACK) == first_is_black:
            first_wins += 1
        else:
            second_wins += 1
        LOGGER.info("Game %d/%d: winner=%s", game_idx + 1, num_games, result.name if result else "draw")

    return first_wins, second_wins, draws
