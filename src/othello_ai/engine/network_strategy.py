"""Neural network strategy: ask a policy network which cell to play.

ニューラルネットワーク戦略。盤面を手番視点の 8×8 テンソルに変換して
方策ネットワークに入力し、合法手（とパス）の中で最もスコアの高いものを選ぶ。

モデルは InferenceSession として起動時に一度だけ読み込み、戦略に渡す。
使い終わったら close()（または with 文）で解放する。
"""

from __future__ import annotations

import logging
from os import PathLike
from types import TracebackType

import torch
from torch import Tensor

from othello_ai.game.board import Board, Cell
from othello_ai.game.moves import available_moves
from othello_ai.game.player import Player
from othello_ai.game.types import BOARD_SIZE, Color
from othello_ai.model.config import OTHELLO_CONFIG, NetworkConfig
from othello_ai.model.network import PolicyNetwork

LOGGER = logging.getLogger(__name__)


def encode_board(board: Board, me: Color, opponent: Color | None = None) -> Tensor:
    """Encode board from me's point of view as a (1, 1, 8, 8) float tensor.

    自分の石 = +1、相手の石 = -1、空マス = 0。
    """
    opponent = opponent if opponent is not None else me.opponent
    planes = torch.zeros(1, 1, BOARD_SIZE, BOARD_SIZE)
    for idx, current in enumerate(board.colors):
        r, c = idx // BOARD_SIZE, idx % BOARD_SIZE
        if current == me:
            planes[0, 0, r, c] = 1.0
        elif current == opponent:
            planes[0, 0, r, c] = -1.0
    return planes


class InferenceSession:
    """Owns a policy network in eval mode for the lifetime of a program.

    推論セッション。ネットワークを保持し、close() 後の推論は RuntimeError。
    """

    def __init__(self, network: PolicyNetwork, device: str | torch.device = "cpu") -> None:
        self.device = torch.device(device)
        self._network: PolicyNetwork | None = network.to(self.device)
        self._network.eval()  # 推論モード
        self.config: NetworkConfig = network.config

    @classmethod
    def load(
        cls,
        path: str | PathLike[str],
        config: NetworkConfig = OTHELLO_CONFIG,
        device: str | torch.device = "cpu",
    ) -> InferenceSession:
        """Build a network from config and load a saved state dict into it."""
        network = PolicyNetwork(config)
        state_dict = torch.load(path, map_location=device, weights_only=True)
        network.load_state_dict(state_dict)
        LOGGER.info("Loaded policy network from %s", path)
        return cls(network, device)

    @property
    def closed(self) -> bool:
        return self._network is None

    @property
    def pass_index(self) -> int:
        return self.config.pass_index

    def run(self, planes: Tensor) -> Tensor:
        """Return the flat score vector (action_size,) for one encoded board."""
        if self._network is None:
            raise RuntimeError("Inference session is closed")
        with torch.no_grad():  # 勾配計算不要（推論のみ）
            scores = self._network(planes.to(self.device))
        return scores[0].cpu()

    def close(self) -> None:
        self._network = None

    def __enter__(self) -> InferenceSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class NeuralNetworkStrategy:
    """Pick the legal move (or pass) the network scores highest.

    推論に失敗した場合は例外を外に出さず、パス（None）を返す。
    """

    def __init__(self, session: InferenceSession) -> None:
        self.session = session

    def choose_move(self, board: Board, me: Player, opponent: Player) -> Cell | None:
        moves = available_moves(board, me.color)
        pass_index = self.session.pass_index
        try:
            scores = self.session.run(encode_board(board, me.color, opponent.color))
            if scores.numel() <= pass_index:
                raise ValueError(f"Expected {pass_index + 1} scores, got {scores.numel()}")
            if not torch.isfinite(scores).all():
                raise ValueError("Network returned non-finite scores")
        except (RuntimeError, ValueError) as exc:
            LOGGER.warning("Network inference failed, passing: %s", exc)
            return None

        # 合法手のマス + パスだけを候補にして最大スコアを選ぶ
        candidates: dict[int, Cell | None] = {
            cell.x * BOARD_SIZE + cell.y: cell for cell in moves
        }
        candidates[pass_index] = None
        best_index = max(candidates, key=lambda i: float(scores[i]))
        choice = candidates[best_index]
        LOGGER.debug(
            "Network chose %s (score %.3f)",
            choice.label if choice else "pass",
            float(scores[best_index]),
        )
        return choice
