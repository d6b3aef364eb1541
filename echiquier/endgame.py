"""King and queen against lone king, with the search playing both sides."""

from __future__ import annotations

import random
from collections.abc import Iterator

from echiquier.board import Board, GameType, IllegalMoveError
from echiquier.chess_search import ChessNode
from echiquier.moves import Move
from echiquier.outcome import ONGOING, winner
from echiquier.pieces import Piece, PieceType


def _starting_board() -> Board:
    board = Board(GameType.CHESS)
    board.clear_standard_pieces()
    board.grid[0][0] = Piece(PieceType.KING, False, 0, 0)
    board.grid[7][7] = Piece(PieceType.KING, True, 7, 7)
    board.grid[6][6] = Piece(PieceType.QUEEN, True, 6, 6)
    board.current_player = 0
    return board


def queen_endgame(rng: random.Random) -> Iterator[tuple[Board, Move, str]]:
    """Play the endgame move by move, White first.

    Yields (board, move, outcome) after each move and stops once the outcome
    is no longer ' ' or a side has no move left.
    """
    board = _starting_board()
    while True:
        white_to_move = board.current_player == 0
        node = ChessNode()
        node.initial_player = 0 if white_to_move else 1
        best = node.best_move(board, True, "B" if white_to_move else "N", rng)
        if best is None:
            return
        move = best.moves[0]
        try:
            board.play(move)
        except IllegalMoveError:
            pass
        if white_to_move:
            board.current_player = 1
        result = winner(board)
        yield board, move, result
        if result != ONGOING:
            return