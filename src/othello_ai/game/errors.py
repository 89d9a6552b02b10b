"""Exceptions raised by the Othello game logic.

ゲーム進行で発生する例外。構築時の設定ミスは ValueError をそのまま使う。
"""


class OthelloError(Exception):
    """Base class for game errors."""


class IllegalMoveError(OthelloError, ValueError):
    """A destination (or pass) that the current move map does not allow.

    合法手に含まれない着手先、または合法手があるのにパスしようとした。
    """


class GameOverError(OthelloError):
    """An action was attempted after the game ended."""
