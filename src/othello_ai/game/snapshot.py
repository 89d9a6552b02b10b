"""Immutable saved game states.

対局状態のスナップショット（保存・復元用）。
生成後は変更されない。盤面がイミュータブルなので、
盤面と所有マスのタプルを持つだけで完全に独立したコピーになる。
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from othello_ai.game.board import Board, Cell
from othello_ai.game.types import Color


@dataclass(frozen=True)
class GameSnapshot:
    """Board, both players' owned cells (in order) and the side to move.

    black_owned / white_owned: 所有マスの並び順もそのまま保存する。
    各 Cell の色はスナップショット盤面の色に合わせ直してある。
    """

    board: Board
    black_owned: tuple[Cell, ...]
    white_owned: tuple[Cell, ...]
    to_move: Color = Color.BLACK

    def __post_init__(self) -> None:
        # 所有マスは盤面上のその色の石とちょうど一致していなければならない
        for color, owned in ((Color.BLACK, self.black_owned), (Color.WHITE, self.white_owned)):
            coords = [c.coords for c in owned]
            expected = {c.coords for c in self.board.cells_of(color)}
            if len(coords) != len(set(coords)) or set(coords) != expected:
                raise ValueError(f"Owned cells for {color.name} do not match the board")

    @classmethod
    def capture(
        cls,
        board: Board,
        black_owned: Iterable[Cell],
        white_owned: Iterable[Cell],
        to_move: Color = Color.BLACK,
    ) -> GameSnapshot:
        """Build a snapshot, rebinding owned cells to the board's colors.

        所有マスを座標で盤面に引き直してからタプル化する。
        呼び出し側のリストを後で変更してもスナップショットには影響しない。
        """
        return cls(
            board=board,
            black_owned=tuple(board.cell(c.x, c.y) for c in black_owned),
            white_owned=tuple(board.cell(c.x, c.y) for c in white_owned),
            to_move=to_move,
        )

    def owned_by(self, color: Color) -> tuple[Cell, ...]:
        if color == Color.BLACK:
            return self.black_owned
        if color == Color.WHITE:
            return self.white_owned
        raise ValueError(f"No owned cells for {color.name}")
