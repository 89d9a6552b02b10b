"""Game controller for Othello.

対局の進行役。盤面と2人のプレイヤーを持ち、手番の交代・着手の適用・
終局判定・保存と復元を担当する。

状態遷移:
  Turn(P) --着手--> Turn(相手)
  Turn(P) --パス（合法手なし）--> Turn(相手)
  盤面が埋まる / 両者とも合法手なし --> GameOver（以後の遷移なし）
"""

from __future__ import annotations

import logging

from othello_ai.game.board import Board, Cell
from othello_ai.game.errors import GameOverError, IllegalMoveError
from othello_ai.game.moves import MoveMap, available_moves, captured_cells, disc_counts, is_game_over
from othello_ai.game.player import Player
from othello_ai.game.snapshot import GameSnapshot
from othello_ai.game.types import Color

LOGGER = logging.getLogger(__name__)


class OthelloGame:
    """Owns the live board and both players and drives the turns.

    player_one は黒（先手）、player_two は白（後手）でなければならない。
    """

    def __init__(self, player_one: Player, player_two: Player) -> None:
        if player_one.color not in (Color.BLACK, Color.WHITE) or player_two.color not in (
            Color.BLACK,
            Color.WHITE,
        ):
            raise ValueError("Players have to choose colors")
        if player_one.color == player_two.color:
            raise ValueError("Players have to have different colors")
        if player_one.color != Color.BLACK:
            raise ValueError("Player one has to use BLACK")
        if player_two.color != Color.WHITE:
            raise ValueError("Player two has to use WHITE")

        self.player_one = player_one
        self.player_two = player_two
        self.board = Board.initial()
        # 所有マスは初期配置から行優先で作る
        player_one.sync_owned(self.board)
        player_two.sync_owned(self.board)
        self._current = player_one  # 黒から開始
        self._over = False

    # ------------------------------------------------------------------
    # 参照系
    # ------------------------------------------------------------------

    @property
    def current_player(self) -> Player:
        return self._current

    @property
    def is_over(self) -> bool:
        return self._over

    def opponent_of(self, player: Player) -> Player:
        if player is self.player_one:
            return self.player_two
        if player is self.player_two:
            return self.player_one
        raise ValueError(f"{player!r} does not play in this game")

    def player_for(self, color: Color) -> Player:
        if color == self.player_one.color:
            return self.player_one
        if color == self.player_two.color:
            return self.player_two
        raise ValueError(f"No player uses {color.name}")

    def available_moves(self, player: Player) -> MoveMap:
        """Legal moves for player on the live board (destination -> origins)."""
        return available_moves(self.board, player.color)

    def score(self) -> dict[Color, int]:
        return disc_counts(self.board)

    def winner(self) -> Player | None:
        """終局後、石数の多いプレイヤーを返す。対局中・引き分けは None。"""
        if not self._over:
            return None
        counts = self.score()
        if counts[Color.BLACK] == counts[Color.WHITE]:
            return None
        return self.player_for(max(counts, key=lambda c: counts[c]))

    # ------------------------------------------------------------------
    # 盤面の変更（プレイヤーの所有マスと常に同時に更新する）
    # ------------------------------------------------------------------

    def take_space(self, actor: Player, opponent: Player, x: int, y: int) -> None:
        """Claim the cell at (x, y) for actor.

        すでに actor の石なら何もしない。相手の石なら相手の所有マスから外す。
        """
        self._claim(actor, opponent, [(x, y)])

    def take_spaces(
        self,
        actor: Player,
        opponent: Player,
        moves: MoveMap,
        destination: Cell,
    ) -> None:
        """Claim destination and flip every disc between it and its origins.

        着手先を取り、各起点から着手先までの間にある石を裏返す。
        moves に含まれない着手先は IllegalMoveError。
        """
        if destination not in moves:
            raise IllegalMoveError(f"{destination.label} is not an available move for {actor.color.name}")
        self._claim(actor, opponent, captured_cells(destination, moves[destination]))

    def _claim(self, actor: Player, opponent: Player, coords: list[tuple[int, int]]) -> None:
        """coords を順に actor のものにする。

        新しい盤面と所有マスのリストを作り終えてから入れ替えるので、
        途中で例外が出ても盤面・所有マスは変わらない。
        """
        board = self.board
        actor_owned = list(actor.owned)
        opponent_owned = list(opponent.owned)
        for x, y in coords:
            current = board.color_at(x, y)
            if current == actor.color:
                continue
            target = Cell(x, y, actor.color)
            if current == opponent.color:
                if target not in opponent_owned:
                    raise ValueError(f"{target.label} is on the board but not owned by {opponent.color.name}")
                opponent_owned.remove(target)  # Cell は座標で比較される
            actor_owned.append(target)
            board = board.set_color(x, y, actor.color)
        self.board = board
        actor.owned = actor_owned
        opponent.owned = opponent_owned

    # ------------------------------------------------------------------
    # 手番の進行
    # ------------------------------------------------------------------

    def computer_decision(self, computer: Player) -> Cell | None:
        """Ask a computer player's strategy for its move; does not mutate.

        思考エンジンの答え（着手先 or None=パス）をそのまま返す。
        """
        opponent = self.opponent_of(computer)
        return computer.choose_move(self.board, opponent)

    def play(self, destination: Cell) -> None:
        """Apply destination for the player to move and pass the turn on."""
        self._ensure_running()
        actor = self._current
        opponent = self.opponent_of(actor)
        self.take_spaces(actor, opponent, self.available_moves(actor), destination)
        LOGGER.debug("%s plays %s", actor.color.name, destination.label)
        self._advance()

    def pass_turn(self) -> None:
        """Pass; only allowed when the player to move has no legal move."""
        self._ensure_running()
        actor = self._current
        if self.available_moves(actor):
            raise IllegalMoveError(f"{actor.color.name} has legal moves and cannot pass")
        LOGGER.debug("%s passes", actor.color.name)
        self._advance()

    def play_computer_turn(self) -> Cell | None:
        """Let the computer to move decide, validate the answer, apply it.

        思考エンジンの答えを合法手と照合してから適用する。
        合法手にないマスや、合法手があるのにパスした場合は IllegalMoveError。
        """
        self._ensure_running()
        actor = self._current
        if not actor.is_computer:
            raise ValueError(f"{actor.color.name} is not a computer player")

        moves = self.available_moves(actor)
        choice = self.computer_decision(actor)
        if choice is None:
            if moves:
                raise IllegalMoveError(f"Strategy for {actor.color.name} passed with moves available")
            self.pass_turn()
            return None
        if choice not in moves:
            raise IllegalMoveError(f"Strategy for {actor.color.name} chose illegal cell {choice.label}")
        self.play(choice)
        return choice

    def play_out(self, max_turns: int | None = None) -> Player | None:
        """Drive a computer-vs-computer game until it ends.

        両者コンピュータの対局を終局まで進め、勝者を返す。
        max_turns に達したら途中でも打ち切る（winner() は None のまま）。
        """
        turns = 0
        while not self._over and (max_turns is None or turns < max_turns):
            self.play_computer_turn()
            turns += 1
        return self.winner()

    def _advance(self) -> None:
        self._current = self.opponent_of(self._current)
        if is_game_over(self.board):
            self._over = True
            counts = self.score()
            LOGGER.info(
                "Game over: BLACK %d - WHITE %d",
                counts[Color.BLACK],
                counts[Color.WHITE],
            )

    def _ensure_running(self) -> None:
        if self._over:
            raise GameOverError("The game is already over")

    # ------------------------------------------------------------------
    # 保存と復元
    # ------------------------------------------------------------------

    def save(self) -> GameSnapshot:
        """Capture the board, both owned lists and the side to move."""
        return GameSnapshot.capture(
            self.board,
            self.player_for(Color.BLACK).owned,
            self.player_for(Color.WHITE).owned,
            to_move=self._current.color,
        )

    def restore(self, snapshot: GameSnapshot) -> None:
        """Replace the live state with snapshot.

        盤面・両者の所有マス・手番をすべてスナップショットの内容で置き換える。
        """
        self.board = snapshot.board
        for player in (self.player_one, self.player_two):
            player.owned = list(snapshot.owned_by(player.color))
        self._current = self.player_for(snapshot.to_move)
        self._over = is_game_over(self.board)
