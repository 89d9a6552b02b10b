"""Types and constants for Othello.

オセロの基本型・定数定義。
盤面は 8×8（64マス）固定で、各マスは 空・黒・白 のいずれか。
"""

from __future__ import annotations

from enum import IntEnum, unique

# 盤面のサイズ: 8 × 8
BOARD_SIZE = 8
NUM_CELLS = BOARD_SIZE * BOARD_SIZE


@unique
class Color(IntEnum):
    """Cell / disc colors.

    マスの状態。EMPTY は石が置かれていないマス。
    黒（BLACK）が先手、白（WHITE）が後手。
    """

    EMPTY = 0
    BLACK = 1  # 先手
    WHITE = 2  # 後手

    @property
    def opponent(self) -> Color:
        """相手の色を返す。BLACK ↔ WHITE の切り替え。"""
        if self == Color.EMPTY:
            raise ValueError("EMPTY has no opponent")
        return Color.WHITE if self == Color.BLACK else Color.BLACK

    @property
    def symbol(self) -> str:
        """表示・保存用の1文字（"." / "B" / "W"）。"""
        return _SYMBOLS[self]

    @classmethod
    def from_symbol(cls, char: str) -> Color:
        """Parse a display character back into a Color."""
        for color, symbol in _SYMBOLS.items():
            if symbol == char.upper():
                return color
        raise ValueError(f"Unknown cell symbol: {char!r}")


_SYMBOLS = {
    Color.EMPTY: ".",
    Color.BLACK: "B",
    Color.WHITE: "W",
}

# 8方向の移動ベクトル: (dx, dy)
# x は行、y は列。北西から南東へ行優先で並べる。合法手の列挙順はこの並びに従う。
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


def on_board(x: int, y: int) -> bool:
    """座標 (x, y) が盤内かどうか。"""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE
