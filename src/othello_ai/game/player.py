"""Players: a color, the cells it owns, and who decides its moves.

プレイヤーは「人間（外部から着手が与えられる）」と
「コンピュータ（Strategy が着手を決める）」の2種類。
継承ではなく kind で区別する（タグ付きバリアント）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from othello_ai.game.board import Board, Cell
from othello_ai.game.protocol import Strategy
from othello_ai.game.types import Color


class PlayerKind(Enum):
    HUMAN = "human"
    COMPUTER = "computer"


@dataclass(eq=False)
class Player:
    """A participant bound to one color.

    owned: このプレイヤーの石があるマスのリスト（取得順）。
           盤面との同期はゲーム側の着手処理（OthelloGame.take_space）が担う。
    strategy: COMPUTER のときのみ設定される思考エンジン。

    Players compare by identity; two players with the same color are still
    different participants.
    """

    color: Color
    kind: PlayerKind = PlayerKind.HUMAN
    strategy: Strategy | None = None
    owned: list[Cell] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.kind == PlayerKind.COMPUTER and self.strategy is None:
            raise ValueError("A computer player needs a strategy")
        if self.kind == PlayerKind.HUMAN and self.strategy is not None:
            raise ValueError("A human player cannot have a strategy")

    @classmethod
    def human(cls, color: Color) -> Player:
        return cls(color=color, kind=PlayerKind.HUMAN)

    @classmethod
    def computer(cls, color: Color, strategy: Strategy) -> Player:
        return cls(color=color, kind=PlayerKind.COMPUTER, strategy=strategy)

    @property
    def is_computer(self) -> bool:
        return self.kind == PlayerKind.COMPUTER

    def choose_move(self, board: Board, opponent: Player) -> Cell | None:
        """Ask the bound strategy for a destination (None = pass).

        コンピュータプレイヤーの思考エンジンに着手を問い合わせる。
        """
        if self.strategy is None:
            raise ValueError(f"{self.color.name} is a human player and has no strategy")
        return self.strategy.choose_move(board, self, opponent)

    def owns(self, x: int, y: int) -> bool:
        return Cell(x, y) in self.owned

    def sync_owned(self, board: Board) -> None:
        """Rebuild the owned list from the board (row-major order).

        盤面から所有マスを作り直す。任意の局面からゲームを始めるときに使う。
        """
        self.owned = board.cells_of(self.color)

    def __repr__(self) -> str:
        return f"Player({self.color.name}, {self.kind.value}, discs={len(self.owned)})"
