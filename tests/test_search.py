import math
import random

import pytest

from echiquier.board import Board, GameType
from echiquier.moves import Move
from echiquier.pieces import Piece, PieceType
from echiquier.search import Node, depth_limit


def _key(node):
    return tuple((m.x2, m.y2) for m in node.moves)


class TreeNode(Node):
    """A node whose tree and leaf scores come from class-level tables."""

    tree: dict = {}
    leaves: dict = {}
    endless = False

    def apply(self, board):
        pass

    def undo(self, board):
        pass

    def heuristic(self, board, ai_symbol):
        if self.endless:
            return float(self.depth)
        return float(self.leaves.get(_key(self), 0.0))

    def generate_children(self, board, ai_symbol):
        if self.endless:
            return self._spawn_children([Move(-1, -1, 0, self.depth)])
        options = self.tree.get(_key(self))
        if not options:
            return False
        return self._spawn_children(Move(-1, -1, x, y) for x, y in options)


class SmallTree(TreeNode):
    tree = {
        (): [(0, 0), (0, 1)],
        ((0, 0),): [(1, 0), (1, 1)],
        ((0, 1),): [(2, 0), (2, 1)],
    }
    leaves = {
        ((0, 0), (1, 0)): 3,
        ((0, 0), (1, 1)): 5,
        ((0, 1), (2, 0)): 2,
        ((0, 1), (2, 1)): 9,
    }


class TiedTree(TreeNode):
    tree = {(): [(0, 0), (0, 1)]}
    leaves = {((0, 0),): 4, ((0, 1),): 4}


class EndlessTree(TreeNode):
    endless = True


def _tictactoe():
    return Board(GameType.TIC_TAC_TOE)


def test_depth_limits():
    assert depth_limit(GameType.TIC_TAC_TOE) == 10
    assert depth_limit(GameType.CHESS) == 2


def test_node_is_abstract():
    with pytest.raises(TypeError):
        Node([])


def test_root_last_move_is_invalid():
    root = SmallTree([])
    assert root.last_move() == Move(-1, -1, -1, -1)
    assert root.children() == []


def test_children_inherit_and_extend():
    root = SmallTree([])
    root.initial_player = 0
    assert root.generate_children(_tictactoe(), "X") is True
    kids = root.children()
    assert [k.last_move() for k in kids] == [Move(-1, -1, 0, 0), Move(-1, -1, 0, 1)]
    for kid in kids:
        assert kid.depth == root.depth + 1
        assert kid.maximise is not root.maximise
        assert kid.initial_player == 0
        assert len(kid.moves) == 1


def test_minimax_on_fixed_tree():
    root = SmallTree([])
    assert root.minimax(_tictactoe(), "X") == 3


def test_alpha_beta_matches_minimax():
    board = _tictactoe()
    assert SmallTree([]).alpha_beta(board, -math.inf, math.inf, "X") == SmallTree(
        []
    ).minimax(board, "X")


@pytest.mark.parametrize("use_alpha_beta", [True, False])
def test_best_move_picks_highest_child(use_alpha_beta):
    best = SmallTree([]).best_move(_tictactoe(), use_alpha_beta, "X", random.Random(1))
    assert best.last_move() == Move(-1, -1, 0, 0)


def test_best_move_without_children_is_none():
    class Leaf(TreeNode):
        tree = {}

    assert Leaf([]).best_move(_tictactoe(), True, "X") is None


def test_best_move_breaks_ties_at_random():
    seen = {
        TiedTree([]).best_move(_tictactoe(), True, "X", random.Random(seed)).last_move()
        for seed in range(40)
    }
    assert seen == {Move(-1, -1, 0, 0), Move(-1, -1, 0, 1)}


def test_search_stops_at_depth_limit():
    board = _tictactoe()
    assert EndlessTree([]).minimax(board, "X") == depth_limit(GameType.TIC_TAC_TOE)
    assert EndlessTree([]).alpha_beta(board, -math.inf, math.inf, "X") == depth_limit(
        GameType.TIC_TAC_TOE
    )


def test_terminal_positions_are_scored():
    board = _tictactoe()
    for j in range(3):
        board.grid[0][j] = Piece(PieceType.TIC_TAC_X, True, 0, j)
    assert SmallTree([]).minimax(board, "X") == math.inf
    assert SmallTree([]).minimax(board, "O") == -math.inf


def test_draw_scores_zero():
    board = _tictactoe()
    layout = ["XOX", "XOO", "OXX"]
    for i, row in enumerate(layout):
        for j, mark in enumerate(row):
            kind = PieceType.TIC_TAC_X if mark == "X" else PieceType.TIC_TAC_O
            board.grid[i][j] = Piece(kind, mark == "X", i, j)
    assert SmallTree([]).alpha_beta(board, -math.inf, math.inf, "X") == 0