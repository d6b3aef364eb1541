"""Search nodes for chess."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

from echiquier.board import Board, IllegalMoveError
from echiquier.moves import Move
from echiquier.outcome import DRAW, winner
from echiquier.pieces import Piece, PieceType
from echiquier.search import Node

MAX_MOVES_PER_PIECE = 100

_ORTHOGONAL = ((1, 0), (-1, 0), (0, 1), (0, -1))
_DIAGONAL = ((1, 1), (-1, -1), (1, -1), (-1, 1))


def _rays(directions: Iterable[tuple[int, int]]) -> tuple[tuple[int, int], ...]:
    return tuple((dx * k, dy * k) for dx, dy in directions for k in range(1, 9))


_OFFSETS: dict[PieceType, tuple[tuple[int, int], ...]] = {
    PieceType.KING: _ORTHOGONAL + _DIAGONAL,
    PieceType.QUEEN: _rays(_ORTHOGONAL + _DIAGONAL),
    PieceType.ROOK: _rays(_ORTHOGONAL),
    PieceType.BISHOP: _rays(_DIAGONAL),
    PieceType.KNIGHT: (
        (1, 2), (1, -2), (-1, 2), (-1, -2),
        (2, 1), (2, -1), (-2, 1), (-2, -1),
    ),
}
_PAWN_DOWN = ((1, 0), (2, 0), (1, -1), (1, 1))
_PAWN_UP = ((-1, 0), (-2, 0), (-1, -1), (-1, 1))
_UNKNOWN = ((1, 1),)

# Weights of the evaluation terms.
_MATERIAL = 0.7
_COUNT = 0.3
_MOBILITY = 0.3
_CENTRE = 0.2


class ChessNode(Node):
    """A chess position reached by playing moves on a reference board.

    The search side is Black when the AI symbol is 'N' and White when it is 'B'.
    """

    def __init__(self, moves: Iterable[Move] = ()) -> None:
        super().__init__(moves)
        self._saved_last_move: Move | None = None

    def _offsets(self, piece: Piece) -> tuple[tuple[int, int], ...]:
        if piece.kind is PieceType.PAWN:
            return _PAWN_DOWN if self.maximise else _PAWN_UP
        return _OFFSETS.get(piece.kind, _UNKNOWN)

    @staticmethod
    def _castlings(board: Board, king: Piece) -> Iterator[Move]:
        row = king.x
        for target in (6, 2):
            move = Move(row, 4, row, target, king, Piece(), castling=True, white=king.white)
            if not board.is_castling(move):
                continue
            trial = board.copy()
            try:
                trial.play(move)
            except IllegalMoveError:
                pass
            if not trial.in_check(king.white):
                yield move

    @staticmethod
    def _en_passants(board: Board, pawn: Piece) -> Iterator[Move]:
        direction = -1 if pawn.white else 1
        x2 = pawn.x + direction
        for dy in (-1, 1):
            y2 = pawn.y + dy
            if 0 <= x2 < 8 and 0 <= y2 < 8:
                move = Move(pawn.x, pawn.y, x2, y2, pawn, Piece(), en_passant=True, white=pawn.white)
                if board.is_en_passant(move):
                    yield move

    def possible_moves(self, board: Board, piece: Piece) -> list[Move]:
        """Moves the piece can make in this position, special moves first."""
        moves: list[Move] = []
        self.apply(board)
        try:
            if piece.kind is PieceType.KING and piece.y == 4:
                moves.extend(self._castlings(board, piece))
            if piece.kind is PieceType.PAWN:
                moves.extend(self._en_passants(board, piece))
            for dx, dy in self._offsets(piece):
                x2, y2 = piece.x + dx, piece.y + dy
                if board.move_valid(piece.x, piece.y, x2, y2):
                    moves.append(
                        Move(piece.x, piece.y, x2, y2, piece, board.grid[x2][y2], white=piece.white)
                    )
        finally:
            self.undo(board)
        return moves

    def generate_children(self, board: Board, ai_symbol: str) -> bool:
        self.apply(board)
        pieces = board.pieces()
        self.undo(board)
        colour = self.maximise if ai_symbol == "B" else not self.maximise
        moves: list[Move] = []
        for piece in pieces:
            if piece.white == colour:
                moves.extend(self.possible_moves(board, piece)[:MAX_MOVES_PER_PIECE])
        return self._spawn_children(moves)

    def heuristic(self, board: Board, ai_symbol: str) -> float:
        self.apply(board)
        try:
            result = winner(board)
            pieces = board.pieces()
        finally:
            self.undo(board)
        if result == ai_symbol:
            return math.inf
        if result == board.opponent_symbol(ai_symbol):
            return -math.inf
        if result == DRAW:
            return 0.0

        # index 0 for Black, 1 for White
        material = [0, 0]
        count = [0, 0]
        mobility = [0, 0]
        centre = [0, 0]
        for piece in pieces:
            side = int(piece.white)
            count[side] += 1
            material[side] += piece.value()
            mobility[side] += len(self.possible_moves(board, piece))
            if piece.x in (3, 4) and piece.y in (3, 4):
                centre[side] += 1
        score = (
            _MATERIAL * (material[0] - material[1])
            + _COUNT * (count[0] - count[1])
            + _MOBILITY * (mobility[0] - mobility[1])
            + _CENTRE * (centre[0] - centre[1])
        )
        return score if ai_symbol == "N" else -score

    def apply(self, board: Board) -> None:
        if self.moves:
            self._saved_last_move = board.last_move
        for move in self.moves:
            try:
                board.play(move)
            except IllegalMoveError:
                pass

    def undo(self, board: Board) -> None:
        if not self.moves:
            return
        grid = board.grid
        for move in reversed(self.moves):
            x1, y1, x2, y2 = move.x1, move.y1, move.x2, move.y2
            grid[x1][y1] = move.piece.moved_to(x1, y1)
            if move.captured.is_empty():
                grid[x2][y2] = Piece()
            else:
                grid[x2][y2] = move.captured.moved_to(x2, y2)
            if move.castling:
                direction = 1 if y2 > y1 else -1
                rook_col = 7 if direction == 1 else 0
                moved_col = y1 + direction
                rook = grid[x1][moved_col]
                if rook.kind is PieceType.ROOK:
                    grid[x1][rook_col] = rook.moved_to(x1, rook_col)
                    grid[x1][moved_col] = Piece()
            if move.en_passant:
                grid[x1][y2] = Piece(PieceType.PAWN, not move.piece.white, x1, y2)
        board.current_player = self.initial_player
        if self._saved_last_move is not None:
            board.last_move = self._saved_last_move