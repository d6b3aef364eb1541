"""Game-tree search shared by the tic-tac-toe and chess players."""

from __future__ import annotations

import abc
import math
import random
from collections.abc import Iterable

from echiquier.board import Board, GameType
from echiquier.moves import Move
from echiquier.outcome import DRAW, winner

_DEPTH_LIMITS = {GameType.TIC_TAC_TOE: 10, GameType.CHESS: 2}


def depth_limit(game_type: GameType) -> int:
    """Deepest ply the search explores for that game."""
    return _DEPTH_LIMITS[game_type]


class Node(abc.ABC):
    """A position reached from a reference board by playing ``moves`` in order.

    ``maximise`` tells whether the side to move at this node is the one the
    search plays for; ``initial_player`` is the player restored on the board
    after the moves are undone.
    """

    def __init__(self, moves: Iterable[Move] = ()) -> None:
        self.moves: list[Move] = list(moves)
        self.maximise = True
        self.depth = 0
        self.initial_player = 1
        self._children: list[Node] = []

    def children(self) -> list[Node]:
        """The child nodes generated so far, in generation order."""
        return list(self._children)

    def last_move(self) -> Move:
        """The move that led to this node, or an all -1 move at the root."""
        if not self.moves:
            return Move(-1, -1, -1, -1)
        return self.moves[-1]

    def _spawn_children(self, moves: Iterable[Move]) -> bool:
        """Replace the children with one node per move; True if any were made."""
        children = []
        for move in moves:
            child = type(self)(self.moves + [move])
            child.maximise = not self.maximise
            child.depth = self.depth + 1
            child.initial_player = self.initial_player
            children.append(child)
        self._children = children
        return bool(children)

    @abc.abstractmethod
    def apply(self, board: Board) -> None:
        """Play this node's moves on the board."""

    @abc.abstractmethod
    def undo(self, board: Board) -> None:
        """Take this node's moves back off the board."""

    @abc.abstractmethod
    def heuristic(self, board: Board, ai_symbol: str) -> float:
        """Score of this position from the point of view of ``ai_symbol``."""

    @abc.abstractmethod
    def generate_children(self, board: Board, ai_symbol: str) -> bool:
        """Create the child nodes; return False when there is no move."""

    def _terminal_score(self, board: Board, ai_symbol: str) -> float | None:
        self.apply(board)
        result = winner(board)
        self.undo(board)
        if result == ai_symbol:
            return math.inf
        if result == board.opponent_symbol(ai_symbol):
            return -math.inf
        if result == DRAW:
            return 0.0
        return None

    def minimax(self, board: Board, ai_symbol: str) -> float:
        """Plain minimax value of this node."""
        terminal = self._terminal_score(board, ai_symbol)
        if terminal is not None:
            return terminal
        if self.depth >= depth_limit(board.game_type):
            return self.heuristic(board, ai_symbol)
        if not self.generate_children(board, ai_symbol):
            return self.heuristic(board, ai_symbol)
        values = (child.minimax(board, ai_symbol) for child in self._children)
        if self.maximise:
            return max(values, default=-math.inf)
        return min(values, default=math.inf)

    def alpha_beta(
        self, board: Board, alpha: float, beta: float, ai_symbol: str
    ) -> float:
        """Minimax value of this node with alpha-beta pruning."""
        terminal = self._terminal_score(board, ai_symbol)
        if terminal is not None:
            return terminal
        if self.depth >= depth_limit(board.game_type):
            return self.heuristic(board, ai_symbol)
        if not self.generate_children(board, ai_symbol):
            return self.heuristic(board, ai_symbol)

        best = -math.inf if self.maximise else math.inf
        for child in self._children:
            value = child.alpha_beta(board, alpha, beta, ai_symbol)
            if self.maximise:
                if value > best:
                    best = value
                    alpha = max(alpha, value)
                if value >= beta:
                    return value
            else:
                if value < best:
                    best = value
                    beta = min(beta, value)
                if value <= alpha:
                    return value
        return best

    def best_move(
        self,
        board: Board,
        use_alpha_beta: bool,
        ai_symbol: str,
        rng: random.Random | None = None,
    ) -> Node | None:
        """The child with the highest value, ties broken at random; None without moves."""
        if not self.generate_children(board, ai_symbol):
            return None
        rng = rng if rng is not None else random.Random()
        best_value = -math.inf
        best: list[Node] = []
        for child in self._children:
            if use_alpha_beta:
                value = child.alpha_beta(board, -math.inf, math.inf, ai_symbol)
            else:
                value = child.minimax(board, ai_symbol)
            if value > best_value:
                best_value = value
                best = [child]
            elif value == best_value:
                best.append(child)
        if not best:
            return None
        return rng.choice(best)