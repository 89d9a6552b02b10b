"""CLI entry point for othello-ai — play in the terminal.

コマンドラインで動くオセロ対局プログラム。
黒・白それぞれに human または戦略キー（minimax / mcts / random / cnn）を指定できる。

起動方法: `othello-cli --black human --white minimax`
"""

from __future__ import annotations

import argparse
import logging

from othello_ai.engine.factory import STRATEGY_KEYS, create_strategy, normalize_key
from othello_ai.engine.network_strategy import InferenceSession
from othello_ai.game.board import Cell
from othello_ai.game.display import board_to_str, parse_label
from othello_ai.game.errors import IllegalMoveError
from othello_ai.game.game import OthelloGame
from othello_ai.game.player import Player
from othello_ai.game.types import Color
from othello_ai.io import load_from_file, save_to_file
from othello_ai.model.config import OTHELLO_CONFIG
from othello_ai.model.network import PolicyNetwork

LOGGER = logging.getLogger("othello_ai.cli")

DEFAULT_SAVE_PATH = "othello_save.json"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Othello in the terminal.")
    sides = ["human", *STRATEGY_KEYS]
    parser.add_argument("--black", type=normalize_key, default="human", choices=sides, help="Who plays BLACK")
    parser.add_argument("--white", type=normalize_key, default="minimax", choices=sides, help="Who plays WHITE")
    parser.add_argument("--depth", type=int, default=4, help="Minimax depth (plies)")
    parser.add_argument("--iterations", type=int, default=1000, help="MCTS iterations per move")
    parser.add_argument("--seed", type=int, default=None, help="Seed for MCTS / random players")
    parser.add_argument("--model", type=str, default=None, help="State dict for the cnn strategy")
    parser.add_argument("--load", type=str, default=None, help="Resume from a saved game")
    parser.add_argument("--save", type=str, default=DEFAULT_SAVE_PATH, help="Where the 'save' command writes")
    parser.add_argument("--log-level", type=str, default="INFO", help="Python logging level")
    return parser.parse_args(argv)


def _open_session(model_path: str | None) -> InferenceSession:
    """学習済みモデルがあれば読み込む（なければランダム初期化のまま）。"""
    if model_path:
        return InferenceSession.load(model_path)
    LOGGER.warning("No --model given; the cnn player uses an untrained network")
    return InferenceSession(PolicyNetwork(OTHELLO_CONFIG))


def _make_player(color: Color, side: str, args: argparse.Namespace, session: InferenceSession | None) -> Player:
    if side == "human":
        return Player.human(color)
    strategy = create_strategy(
        side,
        depth=args.depth,
        iterations=args.iterations,
        seed=args.seed,
        session=session,
    )
    return Player.computer(color, strategy)


def _human_turn(game: OthelloGame, save_path: str) -> bool:
    """人間の手番。False を返したら対局を中断する。"""
    player = game.current_player
    moves = game.available_moves(player)
    if not moves:
        print(f"{player.color.name} has no legal move and passes.")
        game.pass_turn()
        return True

    choices = list(moves)
    print("Legal moves:")
    for i, cell in enumerate(choices):
        print(f"  {i}: {cell.label}")
    print("Commands: <number> | <cell, e.g. d3> | save | quit")

    # 入力検証ループ（正しい手が入力されるまで繰り返す）
    while True:
        try:
            command = input(f"{player.color.name} move> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print("\nGame aborted.")
            return False

        if command in ("quit", "exit"):
            return False
        if command == "save":
            save_to_file(game.save(), save_path)
            print(f"Saved to {save_path}")
            continue

        try:
            destination = choices[int(command)] if command.isdigit() else parse_label(command)
            game.play(destination)
            return True
        except IndexError:
            print(f"Invalid: choose 0-{len(choices) - 1}")
        except IllegalMoveError as exc:
            print(exc)
        except ValueError:
            print("Enter a number or a cell such as d3.")


def _computer_turn(game: OthelloGame) -> None:
    color = game.current_player.color
    move: Cell | None = game.play_computer_turn()
    if move is None:
        print(f"{color.name} (AI) passes.")
    else:
        print(f"{color.name} (AI) plays: {move.label}")


def run(args: argparse.Namespace) -> None:
    needs_session = "cnn" in (args.black, args.white) or "network" in (args.black, args.white)
    session = _open_session(args.model) if needs_session else None
    try:
        game = OthelloGame(
            _make_player(Color.BLACK, args.black, args, session),
            _make_player(Color.WHITE, args.white, args, session),
        )
        if args.load:
            game.restore(load_from_file(args.load))
            LOGGER.info("Resumed game from %s", args.load)

        LOGGER.info("Starting Othello: BLACK=%s WHITE=%s", args.black, args.white)
        while not game.is_over:
            player = game.current_player
            hints = list(game.available_moves(player)) if not player.is_computer else None
            print(board_to_str(game.board, hints))
            print()

            if player.is_computer:
                _computer_turn(game)
            elif not _human_turn(game, args.save):
                return
            print()

        # 終局: 結果を表示
        print(board_to_str(game.board))
        print()
        counts = game.score()
        print(f"BLACK {counts[Color.BLACK]} - WHITE {counts[Color.WHITE]}")
        winner = game.winner()
        print(f"{winner.color.name} wins!" if winner else "Draw!")
    finally:
        if session is not None:
            session.close()


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    run(args)


if __name__ == "__main__":
    main()
