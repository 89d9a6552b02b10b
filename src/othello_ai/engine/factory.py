"""Build a strategy from its configuration key.

設定文字列（"minimax", "mcts" など）から思考エンジンを生成する。
未知のキーは ValueError（既定値へのフォールバックはしない）。
"""

from __future__ import annotations

import random
from typing import Any

from othello_ai.engine.mcts import MCTS, MCTSConfig
from othello_ai.engine.minimax import Minimax, MinimaxConfig
from othello_ai.engine.network_strategy import InferenceSession, NeuralNetworkStrategy
from othello_ai.engine.random_player import RandomPlayer
from othello_ai.game.player import Player
from othello_ai.game.protocol import Strategy
from othello_ai.game.types import Color

STRATEGY_KEYS = ("minimax", "alphabeta", "mcts", "random", "cnn", "network")


def normalize_key(key: str) -> str:
    """空白を取り除いて小文字にする（"Alpha Beta" → "alphabeta"）。"""
    return "".join(key.split()).lower()


def create_strategy(
    key: str,
    *,
    depth: int = 4,
    iterations: int = 1000,
    seed: int | None = None,
    session: InferenceSession | None = None,
) -> Strategy:
    """Return the strategy named by key.

    depth:      minimax の読みの深さ
    iterations: MCTS の反復回数
    seed:       MCTS / random の乱数シード
    session:    cnn / network に必要な推論セッション
    """
    name = normalize_key(key)
    if name in ("minimax", "alphabeta"):
        return Minimax(MinimaxConfig(depth=depth))
    if name == "mcts":
        return MCTS(MCTSConfig(num_iterations=iterations), rng=random.Random(seed))
    if name == "random":
        return RandomPlayer(seed=seed)
    if name in ("cnn", "network"):
        if session is None:
            raise ValueError(f"Strategy {key!r} needs an inference session")
        return NeuralNetworkStrategy(session)
    raise ValueError(f"Unknown strategy: {key!r} (expected one of {', '.join(STRATEGY_KEYS)})")


def computer_player(color: Color, key: str, **options: Any) -> Player:
    """Create a computer player bound to the strategy named by key."""
    return Player.computer(color, create_strategy(key, **options))
