"""Board representation for Othello.

盤面のデータ構造。イミュータブル（frozen=True）設計で、
盤面を変更するメソッドはすべて新しい Board オブジェクトを返す。

探索（ミニマックス・MCTS）では分岐ごとに盤面を複製する必要があるが、
イミュータブルなら「新しい盤面を作る」ことがそのまま独立したコピーになる。
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from othello_ai.game.types import BOARD_SIZE, NUM_CELLS, Color, on_board


@dataclass(frozen=True)
class Cell:
    """A board position together with the color seen there.

    盤面上の1マス。座標 (x, y) と色を持つ。

    等価性とハッシュは座標のみで決まる（color は比較に含めない）。
    そのため合法手の辞書や所有マスのリストで、色が変わった後の
    Cell でも同じマスとして検索できる。
    """

    x: int
    y: int
    color: Color = field(default=Color.EMPTY, compare=False)

    @property
    def coords(self) -> tuple[int, int]:
        return (self.x, self.y)

    @property
    def label(self) -> str:
        """Algebraic label, e.g. (2, 3) -> "d3".

        列 y を a〜h、行 x を 1〜8 で表す。
        """
        return f"{chr(ord('a') + self.y)}{self.x + 1}"


def _index(x: int, y: int) -> int:
    if not on_board(x, y):
        raise IndexError(f"({x}, {y}) is off the board")
    return x * BOARD_SIZE + y


@dataclass(frozen=True)
class Board:
    """Immutable 8x8 Othello board.

    8×8 = 64マスの盤面を表すイミュータブルなデータ構造。

    colors: 64要素のタプル（行優先）。colors[x * 8 + y] でマス(x, y)の色。
    """

    colors: tuple[Color, ...] = field(default_factory=lambda: Board._initial_colors())

    def __post_init__(self) -> None:
        if len(self.colors) != NUM_CELLS:
            raise ValueError(f"Board needs {NUM_CELLS} cells, got {len(self.colors)}")

    @staticmethod
    def _initial_colors() -> tuple[Color, ...]:
        """Return the standard starting position.

        標準的な初期配置を返す。中央 2×2 に白黒2枚ずつ。

        (3,3)=W (3,4)=B
        (4,3)=B (4,4)=W
        """
        colors = [Color.EMPTY] * NUM_CELLS
        mid_hi = BOARD_SIZE // 2  # 4
        mid_lo = mid_hi - 1       # 3
        colors[_index(mid_lo, mid_lo)] = Color.WHITE
        colors[_index(mid_hi, mid_hi)] = Color.WHITE
        colors[_index(mid_lo, mid_hi)] = Color.BLACK
        colors[_index(mid_hi, mid_lo)] = Color.BLACK
        return tuple(colors)

    @classmethod
    def initial(cls) -> Board:
        return cls()

    @classmethod
    def empty(cls) -> Board:
        """Return a board with no discs on it."""
        return cls(colors=(Color.EMPTY,) * NUM_CELLS)

    def color_at(self, x: int, y: int) -> Color:
        """マス(x, y)の色を返す。"""
        return self.colors[_index(x, y)]

    def cell(self, x: int, y: int) -> Cell:
        """マス(x, y)を Cell として返す（現在の色つき）。"""
        return Cell(x, y, self.color_at(x, y))

    def cells(self) -> Iterator[Cell]:
        """Iterate over all 64 cells in row-major order."""
        for idx, color in enumerate(self.colors):
            yield Cell(idx // BOARD_SIZE, idx % BOARD_SIZE, color)

    def cells_of(self, color: Color) -> list[Cell]:
        """指定色のマスを行優先で列挙する。"""
        return [cell for cell in self.cells() if cell.color == color]

    def count(self, color: Color) -> int:
        return self.colors.count(color)

    def has_empty(self) -> bool:
        return Color.EMPTY in self.colors

    def set_color(self, x: int, y: int, color: Color) -> Board:
        """Return a new Board with the cell at (x, y) recolored.

        マス(x, y)の色を変更した新しい Board を返す。
        元の Board は変更されない（イミュータブル）。
        """
        return self.set_colors([(x, y)], color)

    def set_colors(self, coords: Iterable[tuple[int, int]], color: Color) -> Board:
        """Return a new Board with every coordinate in coords recolored.

        複数マスをまとめて塗り替える。1手で複数の石が裏返るため、
        タプルの再構築を1回で済ませる。
        """
        colors = list(self.colors)
        for x, y in coords:
            colors[_index(x, y)] = color
        return Board(colors=tuple(colors))
