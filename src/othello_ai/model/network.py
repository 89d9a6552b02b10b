"""Convolutional policy network that scores every cell plus pass."""

from __future__ import annotations

import torch
from torch import Tensor, nn

from othello_ai.model.config import NetworkConfig


def _conv_bn(in_ch: int, out_ch: int, kernel: int) -> nn.Sequential:
    """畳み込み + バッチ正規化（padding で盤面サイズを保つ）。"""
    return nn.Sequential(
        nn.Conv2d(in_ch, out_ch, kernel, padding=kernel // 2, bias=False),
        nn.BatchNorm2d(out_ch),
    )


class ResBlock(nn.Module):
    """Two 3x3 conv layers with an identity shortcut.

    残差ブロック。body の出力に入力をそのまま足してから ReLU を通す。
    """

    def __init__(self, channels: int) -> None:
        super().__init__()
        self.body = nn.Sequential(
            _conv_bn(channels, channels, 3),
            nn.ReLU(),
            _conv_bn(channels, channels, 3),
        )

    def forward(self, x: Tensor) -> Tensor:
        return torch.relu(self.body(x) + x)


class PolicyNetwork(nn.Module):
    """Board in, one score per action out.

    オセロ用の方策ネットワーク（推論専用。このパッケージでは学習しない）。

    [入力 (batch, 1, 8, 8)] → stem → [残差ブロック × N]
         → 1×1 畳み込み (2ch) → 全結合 → [スコア (batch, 65)]

    出力の 0〜63 はマス x * 8 + y、64 はパス。
    """

    def __init__(self, config: NetworkConfig) -> None:
        super().__init__()
        self.config = config
        cells = config.board_h * config.board_w

        self.stem = nn.Sequential(_conv_bn(config.in_channels, config.num_channels, 3), nn.ReLU())
        self.res_blocks = nn.Sequential(*(ResBlock(config.num_channels) for _ in range(config.num_res_blocks)))
        self.head = nn.Sequential(_conv_bn(config.num_channels, 2, 1), nn.ReLU(), nn.Flatten())
        self.policy_fc = nn.Linear(2 * cells, config.action_size)

    def forward(self, x: Tensor) -> Tensor:
        features = self.res_blocks(self.stem(x))
        return self.policy_fc(self.head(features))  # (batch, action_size)
