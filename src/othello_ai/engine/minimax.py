"""Minimax search with alpha-beta pruning for Othello."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from othello_ai.game.board import Board, Cell
from othello_ai.game.moves import apply_move, available_moves, is_game_over
from othello_ai.game.player import Player
from othello_ai.game.types import BOARD_SIZE, Color

LOGGER = logging.getLogger(__name__)

# マスごとの位置評価テーブル
# 角（100）は一度取ると返されないので最重要。
# 角の隣（C打ち -20、X打ち -50）は相手に角を渡しやすいのでマイナス。
POSITION_WEIGHTS: tuple[tuple[int, ...], ...] = (
    (100, -20, 10, 5, 5, 10, -20, 100),
    (-20, -50, -2, -2, -2, -2, -50, -20),
    (10, -2, -1, -1, -1, -1, -2, 10),
    (5, -2, -1, -1, -1, -1, -2, 5),
    (5, -2, -1, -1, -1, -1, -2, 5),
    (10, -2, -1, -1, -1, -1, -2, 10),
    (-20, -50, -2, -2, -2, -2, -50, -20),
    (100, -20, 10, 5, 5, 10, -20, 100),
)


def evaluate(board: Board, color: Color) -> int:
    """Weighted disc balance from color's point of view.

    局面を color の視点から数値評価する（静的評価関数）。
    自分の石のマスは +重み、相手の石のマスは -重み、空マスは 0。
    """
    score = 0
    for idx, current in enumerate(board.colors):
        if current == Color.EMPTY:
            continue
        weight = POSITION_WEIGHTS[idx // BOARD_SIZE][idx % BOARD_SIZE]
        if current == color:
            score += weight
        else:
            score -= weight
    return score


def alphabeta(
    board: Board,
    mover: Color,
    depth: int,
    alpha: float,
    beta: float,
    root_color: Color,
) -> float:
    """Minimax value of board with mover to play, scored for root_color.

    ミニマックス法 + αβ枝刈りによる探索。

    mover が root_color なら最大化、そうでなければ最小化する。
    alpha: 最大化側が保証できる最低スコア
    beta:  最小化側が保証できる最高スコア

    合法手がないときはパスとして手番を入れ替えるが、
    パスも1手（depth - 1）として数える。
    """
    # 探索深さ0、または終局なら静的評価を返す（葉ノード）
    if depth == 0 or is_game_over(board):
        return evaluate(board, root_color)

    moves = available_moves(board, mover)
    if not moves:
        return alphabeta(board, mover.opponent, depth - 1, alpha, beta, root_color)

    if mover == root_color:
        best = float("-inf")
        for destination, origins in moves.items():
            child = apply_move(board, mover, destination, origins)
            score = alphabeta(child, mover.opponent, depth - 1, alpha, beta, root_color)
            best = max(best, score)
            alpha = max(alpha, score)
            if beta <= alpha:
                break  # βカットオフ: 最小化側はこの枝を選ばない
        return best

    best = float("inf")
    for destination, origins in moves.items():
        child = apply_move(board, mover, destination, origins)
        score = alphabeta(child, mover.opponent, depth - 1, alpha, beta, root_color)
        best = min(best, score)
        beta = min(beta, score)
        if beta <= alpha:
            break  # αカットオフ
    return best


def minimax_move(board: Board, color: Color, depth: int = 4) -> Cell | None:
    """Return the best move for color, or None (pass) if it has none.

    ルートの各合法手を適用し、相手番から depth - 1 手読んだ評価値で比較する。
    同点なら列挙順で先に見つかった手を選ぶ。
    """
    if depth < 1:
        raise ValueError(f"depth must be at least 1, got {depth}")

    moves = available_moves(board, color)
    if not moves:
        return None

    best_move: Cell | None = None
    best_score = float("-inf")
    for destination, origins in moves.items():
        child = apply_move(board, color, destination, origins)
        score = alphabeta(
            child,
            color.opponent,
            depth - 1,
            float("-inf"),
            float("inf"),
            color,
        )
        if best_move is None or score > best_score:
            best_score = score
            best_move = destination

    assert best_move is not None
    LOGGER.debug("Minimax(depth=%d) chose %s with score %.1f", depth, best_move.label, best_score)
    return best_move


@dataclass(frozen=True)
class MinimaxConfig:
    """Configuration for minimax search."""

    depth: int = 4  # ルートの1手を含めた読みの深さ（プライ数）


class Minimax:
    """Strategy wrapper around minimax_move()."""

    def __init__(self, config: MinimaxConfig | None = None) -> None:
        self.config = config or MinimaxConfig()

    def choose_move(self, board: Board, me: Player, opponent: Player) -> Cell | None:
        return minimax_move(board, me.color, depth=self.config.depth)
