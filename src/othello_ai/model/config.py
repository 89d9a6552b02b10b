"""Shape settings for the Othello policy network."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NetworkConfig:
    """Input plane shape, output width and tower size of a PolicyNetwork.

    出力は盤面の全マス + パス1つなので action_size = board_h * board_w + 1。
    num_res_blocks / num_channels はネットワークの大きさだけを決める。
    """

    board_h: int
    board_w: int
    in_channels: int
    action_size: int
    num_res_blocks: int = 3
    num_channels: int = 64

    def __post_init__(self) -> None:
        if self.action_size != self.num_cells + 1:
            raise ValueError(
                f"action_size must be {self.num_cells + 1} (one per cell plus pass), got {self.action_size}"
            )

    @property
    def num_cells(self) -> int:
        return self.board_h * self.board_w

    @property
    def pass_index(self) -> int:
        """パスに割り当てた出力インデックス（最後の1つ）。"""
        return self.action_size - 1


# 8×8 盤、入力は1プレーン（自分の石 +1 / 相手の石 -1 / 空 0）、出力 64マス + パス
OTHELLO_CONFIG = NetworkConfig(board_h=8, board_w=8, in_channels=1, action_size=65)
