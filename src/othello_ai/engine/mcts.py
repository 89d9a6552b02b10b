"""Monte Carlo Tree Search (MCTS) with random rollouts."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field

from othello_ai.game.board import Board, Cell
from othello_ai.game.moves import apply_move, available_moves, disc_counts
from othello_ai.game.player import Player
from othello_ai.game.types import Color

LOGGER = logging.getLogger(__name__)


@dataclass(eq=False)
class MCTSNode:
    """A node in the MCTS tree.

    MCTSの探索木の1ノード。各ノードは1つの局面に対応する。

    board:    このノードの局面
    color:    このノードで手番のプレイヤー
    move:     親からこのノードに至った着手（ルートは None）
    wins:     ルート手番の色が勝ったシミュレーション数（このノードの手番がルートと同じ色のときだけ数える）
    visits:   このノードを通ったシミュレーション数
    """

    board: Board
    color: Color
    parent: MCTSNode | None = field(default=None, repr=False)
    move: Cell | None = None
    children: list[MCTSNode] = field(default_factory=list, repr=False)
    wins: int = 0
    visits: int = 0

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def win_rate(self) -> float:
        """勝率 = wins / visits（未訪問なら 0）。"""
        if self.visits == 0:
            return 0.0
        return self.wins / self.visits

    def ucb1(self, exploration: float) -> float:
        """UCB1 = wins/visits + C * sqrt(ln(N_parent) / visits).

        活用（勝率）と探索（訪問の少なさ）のバランスを取るスコア。
        未訪問の子は +inf として必ず優先する。
        """
        if self.visits == 0:
            return math.inf
        assert self.parent is not None
        return self.win_rate + exploration * math.sqrt(math.log(self.parent.visits) / self.visits)


@dataclass(frozen=True)
class MCTSConfig:
    """Configuration for MCTS search."""

    num_iterations: int = 1000  # 1手あたりの反復（シミュレーション）回数
    exploration: float = math.sqrt(2)  # UCB1 の探索係数 C
    seed: int | None = None  # 乱数シード（rng を直接渡さない場合に使う）

    def __post_init__(self) -> None:
        if self.num_iterations < 1:
            raise ValueError(f"num_iterations must be positive, got {self.num_iterations}")


class MCTS:
    """UCT Monte Carlo Tree Search.

    アルゴリズムの4ステップ（1反復）:
    1. 選択 (Selection):       UCB1 最大の子を葉まで辿る
    2. 展開 (Expansion):       葉の合法手すべてについて子ノードを作る
    3. シミュレーション (Rollout): 新しい子を1つ選び、終局までランダムに打つ
    4. バックアップ (Backprop):   結果を根まで伝播する

    最後に訪問回数が最も多いルートの子を選ぶ（robust child）。
    乱数は rng（random.Random）からのみ取るので、シードを固定すれば再現できる。
    """

    def __init__(self, config: MCTSConfig | None = None, rng: random.Random | None = None) -> None:
        self.config = config or MCTSConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)

    def choose_move(self, board: Board, me: Player, opponent: Player) -> Cell | None:
        return self.search(board, me.color)

    def search(self, board: Board, color: Color) -> Cell | None:
        """Run the search for color and return the chosen cell (None = pass).

        合法手がなければ反復を1回も行わずに None を返す。
        """
        if not available_moves(board, color):
            return None

        root = self.search_tree(board, color)
        # 訪問回数最大の子を選ぶ（同数なら先に展開された手）
        best = max(root.children, key=lambda child: child.visits)
        LOGGER.debug(
            "MCTS chose %s (visits=%d, win_rate=%.3f) after %d iterations",
            best.move.label if best.move else "pass",
            best.visits,
            best.win_rate,
            self.config.num_iterations,
        )
        return best.move

    def search_tree(self, board: Board, color: Color) -> MCTSNode:
        """Run num_iterations iterations from a fresh root and return it."""
        root = MCTSNode(board=board, color=color)
        for _ in range(self.config.num_iterations):
            leaf = self._select(root)
            node = self._expand(leaf)
            win = self._rollout(node.board, node.color, color)
            self._backpropagate(node, win, color)
        return root

    def _select(self, node: MCTSNode) -> MCTSNode:
        """子を持たないノードに着くまで UCB1 最大の子を辿る。"""
        while node.children:
            node = max(node.children, key=lambda child: child.ucb1(self.config.exploration))
        return node

    def _expand(self, leaf: MCTSNode) -> MCTSNode:
        """Expand leaf one layer and return the child to simulate.

        葉の手番プレイヤーの合法手ごとに子ノードを作り、その中から1つを
        ランダムに選んで返す。合法手がなければ葉自身をそのまま返す。
        """
        moves = available_moves(leaf.board, leaf.color)
        if not moves:
            return leaf
        for destination, origins in moves.items():
            leaf.children.append(
                MCTSNode(
                    board=apply_move(leaf.board, leaf.color, destination, origins),
                    color=leaf.color.opponent,
                    parent=leaf,
                    move=destination,
                )
            )
        return self.rng.choice(leaf.children)

    def _rollout(self, board: Board, color: Color, root_color: Color) -> bool:
        """Play uniformly random moves until both sides pass in a row.

        ランダムプレイアウト。color から交互に打ち、合法手がない側はパスする。
        2回連続でパスになったら終了し、root_color の石数が相手より
        多ければ勝ち（True）。引き分けは勝ちに数えない。
        """
        current = color
        passes = 0
        while passes < 2:
            moves = available_moves(board, current)
            if not moves:
                passes += 1
                current = current.opponent
                continue
            passes = 0
            destination = self.rng.choice(list(moves))
            board = apply_move(board, current, destination, moves[destination])
            current = current.opponent
        counts = disc_counts(board)
        return counts[root_color] > counts[root_color.opponent]

    def _backpropagate(self, node: MCTSNode | None, win: bool, root_color: Color) -> None:
        """シミュレーション結果を根まで伝播する。

        経路上のすべてのノードの訪問回数を1増やす。勝ち（win）のときは
        手番の色が root_color のノードだけ勝ち数を増やす。
        """
        while node is not None:
            node.visits += 1
            if win and node.color == root_color:
                node.wins += 1
            node = node.parent
