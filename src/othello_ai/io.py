"""Save and load game snapshots as JSON files.

スナップショットの保存形式（JSON）:

    {
      "board": ["........", ..., "...WB...", ...],   # 8行、"." / "B" / "W"
      "black": [[3, 4], [4, 3]],                     # 所有マス（順序を保持）
      "white": [[3, 3], [4, 4]],
      "to_move": "BLACK"
    }
"""

from __future__ import annotations

import json
from os import PathLike
from pathlib import Path
from typing import Any

from othello_ai.game.board import Cell
from othello_ai.game.display import board_from_rows, board_rows
from othello_ai.game.snapshot import GameSnapshot
from othello_ai.game.types import Color


def snapshot_to_dict(snapshot: GameSnapshot) -> dict[str, Any]:
    return {
        "board": board_rows(snapshot.board),
        "black": [[c.x, c.y] for c in snapshot.black_owned],
        "white": [[c.x, c.y] for c in snapshot.white_owned],
        "to_move": snapshot.to_move.name,
    }


def snapshot_from_dict(data: dict[str, Any]) -> GameSnapshot:
    """Rebuild a snapshot; malformed data raises ValueError.

    所有マスの座標が盤外のもの、盤面の石と食い違うものも ValueError。
    """
    try:
        board = board_from_rows(list(data["board"]))
        black = [Cell(int(x), int(y)) for x, y in data["black"]]
        white = [Cell(int(x), int(y)) for x, y in data["white"]]
        to_move = Color[data.get("to_move", "BLACK")]
        if to_move == Color.EMPTY:
            raise ValueError("EMPTY cannot move")
        return GameSnapshot.capture(board, black, white, to_move=to_move)
    except (KeyError, TypeError, IndexError, ValueError) as exc:
        raise ValueError(f"Malformed snapshot: {exc}") from exc


def save_to_file(snapshot: GameSnapshot, path: str | PathLike[str]) -> None:
    Path(path).write_text(json.dumps(snapshot_to_dict(snapshot), indent=2), encoding="utf-8")


def load_from_file(path: str | PathLike[str]) -> GameSnapshot:
    """Load a snapshot written by save_to_file().

    JSON として壊れている場合も ValueError（json.JSONDecodeError）になる。
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Malformed snapshot: expected a JSON object")
    return snapshot_from_dict(data)
