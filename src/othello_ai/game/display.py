"""Terminal display for Othello boards.

オセロの盤面をターミナルに表示・読み込みするためのモジュール。
"""

from __future__ import annotations

from othello_ai.game.board import Board, Cell
from othello_ai.game.types import BOARD_SIZE, Color

# 合法手の候補を示す記号（盤面表示のみ。保存形式には使わない）
HINT_CHAR = "*"


def board_to_str(board: Board, hints: list[Cell] | None = None) -> str:
    """Convert a board to a human-readable string.

    盤面を人間が読みやすい文字列に変換する。

    Example output (initial position):
          a b c d e f g h
        1 . . . . . . . .
        ...
        4 . . . W B . . .
        5 . . . B W . . .
        ...

    - "B" = 黒、"W" = 白、"." = 空マス、"*" = hints で渡した候補マス
    - 列ラベル: a〜h（y）、行ラベル: 1〜8（x）
    """
    marked = {cell.coords for cell in hints or []}
    lines: list[str] = []

    col_labels = " ".join(chr(ord("a") + c) for c in range(BOARD_SIZE))
    lines.append(f"  {col_labels}")

    for x in range(BOARD_SIZE):
        row_chars: list[str] = []
        for y in range(BOARD_SIZE):
            if (x, y) in marked:
                row_chars.append(HINT_CHAR)
            else:
                row_chars.append(board.color_at(x, y).symbol)
        lines.append(f"{x + 1} {' '.join(row_chars)}")

    return "\n".join(lines)


def board_rows(board: Board) -> list[str]:
    """Eight compact strings such as "...WB...", one per row."""
    return [
        "".join(board.color_at(x, y).symbol for y in range(BOARD_SIZE))
        for x in range(BOARD_SIZE)
    ]


def board_from_rows(rows: list[str]) -> Board:
    """Build a board from eight row strings of ".", "B" and "W".

    空白は無視するので board_to_str() の行本体をそのまま渡してもよい。
    """
    cleaned = ["".join(row.split()) for row in rows]
    if len(cleaned) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in cleaned):
        raise ValueError(f"Expected {BOARD_SIZE} rows of {BOARD_SIZE} cells")
    colors = tuple(Color.from_symbol(char) for row in cleaned for char in row)
    return Board(colors=colors)


def parse_label(label: str) -> Cell:
    """Parse an algebraic label ("d3") into a Cell.

    Cell.label の逆変換。列 a〜h、行 1〜8。
    """
    text = label.strip().lower()
    if len(text) != 2 or not ("a" <= text[0] <= "h") or not ("1" <= text[1] <= "8"):
        raise ValueError(f"Not a cell label: {label!r}")
    return Cell(int(text[1]) - 1, ord(text[0]) - ord("a"))
