"""Legal move generation and move application for Othello.

合法手の生成と着手の適用。

合法手は「着手先マス → 起点マスのリスト」の辞書で表す。
起点（origin）は自分の石で、そこから一直線に相手の石が続き、
その先が空きマス（着手先 = destination）になっている。
着手すると、各起点と着手先の間にある相手の石がすべて裏返る。
"""

from __future__ import annotations

from othello_ai.game.board import Board, Cell
from othello_ai.game.errors import IllegalMoveError
from othello_ai.game.types import DIRECTIONS, Color, on_board

MoveMap = dict[Cell, list[Cell]]


def available_moves(board: Board, color: Color) -> MoveMap:
    """Generate every legal move for color.

    プレイヤー（color）のすべての合法手を生成する。

    自分の石それぞれから8方向に進み、
    - 相手の石が続く間は進み続ける
    - 相手の石を1枚以上挟んだ後に空きマスに着いたら合法手
    - それ以外（盤外・自分の石・相手を挟まずに空きマス）は打ち切り

    Returns a dict ordered by discovery. Each destination's origins are
    sorted by Manhattan distance to it (nearest first); the sort is stable,
    so equal distances keep discovery order.
    """
    opponent = color.opponent
    result: MoveMap = {}

    for origin in board.cells_of(color):
        for dx, dy in DIRECTIONS:
            nx, ny = origin.x + dx, origin.y + dy
            seen_opponent = False
            while on_board(nx, ny):
                current = board.color_at(nx, ny)
                if current == opponent:
                    seen_opponent = True
                elif current == Color.EMPTY and seen_opponent:
                    # 相手の石を挟んだ先の空きマス → 合法手
                    result.setdefault(Cell(nx, ny, Color.EMPTY), []).append(origin)
                    break
                else:
                    break  # 自分の石、または相手を挟まない空きマス
                nx += dx
                ny += dy

    for destination, origins in result.items():
        origins.sort(key=lambda o: _manhattan(o, destination))

    return result


def _manhattan(a: Cell, b: Cell) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def _step(origin: Cell, destination: Cell) -> tuple[int, int]:
    """起点から着手先へ向かう単位ベクトル（各成分 -1, 0, 1）。"""
    dx = (destination.x > origin.x) - (destination.x < origin.x)
    dy = (destination.y > origin.y) - (destination.y < origin.y)
    return dx, dy


def line_between(origin: Cell, destination: Cell) -> list[tuple[int, int]]:
    """Coordinates strictly between origin and destination.

    起点の次のマスから、着手先の手前までの座標を起点側から順に返す。
    """
    if origin == destination:
        return []
    dx, dy = _step(origin, destination)
    distance = max(abs(destination.x - origin.x), abs(destination.y - origin.y))
    if (origin.x + dx * distance, origin.y + dy * distance) != destination.coords:
        raise ValueError(f"{origin.coords} and {destination.coords} are not on a straight line")

    return [(origin.x + dx * i, origin.y + dy * i) for i in range(1, distance)]


def captured_cells(destination: Cell, origins: list[Cell]) -> list[tuple[int, int]]:
    """Return the coordinates a move claims, destination first.

    着手で自分の色になるマスの座標を返す。
    先頭が着手先、その後に各起点からの挟まれたマスが続く。
    """
    coords = [destination.coords]
    for origin in origins:
        coords.extend(line_between(origin, destination))
    return coords


def apply_move(board: Board, color: Color, destination: Cell, origins: list[Cell]) -> Board:
    """Apply a move and return the new board.

    着手を適用して新しい盤面を返す（元の盤面は変更しない）。
    origins は available_moves() が destination に対して返したリスト。
    """
    return board.set_colors(captured_cells(destination, origins), color)


def play_move(board: Board, color: Color, destination: Cell) -> Board:
    """Look up destination among color's legal moves and apply it.

    合法手でなければ IllegalMoveError。探索エンジンやテストで使う簡易版。
    """
    moves = available_moves(board, color)
    if destination not in moves:
        raise IllegalMoveError(f"{destination.label} is not a legal move for {color.name}")
    return apply_move(board, color, destination, moves[destination])


def has_moves(board: Board, color: Color) -> bool:
    return bool(available_moves(board, color))


def is_game_over(board: Board) -> bool:
    """Terminal check: board full, or neither color can move.

    終局判定: 空きマスがない、または両者とも合法手がない。
    """
    if not board.has_empty():
        return True
    return not has_moves(board, Color.BLACK) and not has_moves(board, Color.WHITE)


def disc_counts(board: Board) -> dict[Color, int]:
    """黒・白それぞれの石数。"""
    return {Color.BLACK: board.count(Color.BLACK), Color.WHITE: board.count(Color.WHITE)}


def winner(board: Board) -> Color | None:
    """石数の多い色を返す。同数なら None（引き分け）。"""
    counts = disc_counts(board)
    if counts[Color.BLACK] > counts[Color.WHITE]:
        return Color.BLACK
    if counts[Color.WHITE] > counts[Color.BLACK]:
        return Color.WHITE
    return None
