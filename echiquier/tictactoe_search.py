"""Search nodes for tic-tac-toe."""

from __future__ import annotations

import math

from echiquier.board import Board, IllegalMoveError
from echiquier.moves import Move
from echiquier.outcome import DRAW, count_near_lines, winner
from echiquier.pieces import Piece
from echiquier.search import Node


class TicTacToeNode(Node):
    """A tic-tac-toe position reached by placing marks on a reference board."""

    def possible_moves(self, board: Board) -> list[Move]:
        """One placing move for every empty square of this position."""
        self.apply(board)
        moves = [
            Move(-1, -1, i, j, white=not self.maximise)
            for i, row in enumerate(board.grid[:3])
            for j, square in enumerate(row[:3])
            if square.is_empty()
        ]
        self.undo(board)
        return moves

    def generate_children(self, board: Board, ai_symbol: str = "O") -> bool:
        return self._spawn_children(self.possible_moves(board))

    def heuristic(self, board: Board, ai_symbol: str) -> float:
        self.apply(board)
        result = winner(board)
        self.undo(board)
        if result == ai_symbol:
            return math.inf
        if result == board.opponent_symbol(ai_symbol):
            return -math.inf
        if result == DRAW:
            return 0.0
        score = count_near_lines(board, self.maximise) * 10
        score += count_near_lines(board, not self.maximise) * 10
        return float(score)

    def apply(self, board: Board) -> None:
        for move in self.moves:
            try:
                board.play(move)
            except IllegalMoveError:
                pass

    def undo(self, board: Board) -> None:
        if not self.moves:
            return
        for move in reversed(self.moves):
            board.grid[move.x2][move.y2] = Piece()
        board.current_player = self.initial_player