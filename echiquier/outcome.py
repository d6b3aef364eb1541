"""Deciding how a tic-tac-toe or chess position stands: win, draw or still open."""

from __future__ import annotations

from echiquier.board import Board, GameType
from echiquier.pieces import Piece, PieceType

DRAW = "V"
ONGOING = " "

_TICTACTOE_LINES: tuple[tuple[tuple[int, int], ...], ...] = (
    *(tuple((i, j) for j in range(3)) for i in range(3)),
    *(tuple((i, j) for i in range(3)) for j in range(3)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


def _find_king(board: Board, white: bool) -> tuple[int, int] | None:
    for i, row in enumerate(board.grid):
        for j, p in enumerate(row):
            if p.kind is PieceType.KING and p.white == white:
                return i, j
    return None


def _after_shift(board: Board, x1: int, y1: int, x2: int, y2: int) -> Board:
    """A copy of the board with the piece on (x1, y1) lifted onto (x2, y2)."""
    trial = board.copy()
    trial.grid[x2][y2] = trial.grid[x1][y1]
    trial.grid[x1][y1] = Piece()
    return trial


def _has_safe_move(board: Board, white: bool, include_king: bool) -> bool:
    """Whether some piece of that colour has a move that leaves its king safe."""
    for i, row in enumerate(board.grid):
        for j, p in enumerate(row):
            if p.is_empty() or p.white != white:
                continue
            if not include_king and p.kind is PieceType.KING:
                continue
            for x in range(8):
                for y in range(8):
                    if board.move_valid(i, j, x, y) and not _after_shift(
                        board, i, j, x, y
                    ).in_check(white):
                        return True
    return False


def is_checkmate(board: Board, white: bool) -> bool:
    """Whether the king of that colour is in check with no way out."""
    if not board.in_check(white):
        return False
    king = _find_king(board, white)
    if king is None:
        return False
    kx, ky = king
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            nx, ny = kx + dx, ky + dy
            if not (0 <= nx < 8 and 0 <= ny < 8):
                continue
            target = board.grid[nx][ny]
            if target.is_empty() or target.white != white:
                if not _after_shift(board, kx, ky, nx, ny).in_check(white):
                    return False
    return not _has_safe_move(board, white, include_king=False)


def is_stalemate(board: Board, white: bool) -> bool:
    """Whether that colour is not in check yet has no safe move at all."""
    if board.in_check(white):
        return False
    return not _has_safe_move(board, white, include_king=True)


def insufficient_material(board: Board) -> bool:
    """True when nothing but kings is left on the board."""
    return all(p.kind is PieceType.KING for p in board.pieces())


def tictactoe_winner(board: Board) -> str:
    """'X' or 'O' for a completed line, 'V' for a full board, ' ' otherwise."""
    grid = board.grid
    for line in _TICTACTOE_LINES:
        first = grid[line[0][0]][line[0][1]]
        if first.is_empty():
            continue
        if all(grid[x][y].kind is first.kind for x, y in line):
            return "X" if first.white else "O"
    if board.is_full():
        return DRAW
    return ONGOING


def chess_winner(board: Board) -> str:
    """'N' if White is mated, 'B' if Black is mated, 'V' for a draw, ' ' otherwise."""
    if is_checkmate(board, True):
        return "N"
    if is_checkmate(board, False):
        return "B"
    if is_stalemate(board, True) or is_stalemate(board, False):
        return DRAW
    if insufficient_material(board):
        return DRAW
    return ONGOING


def winner(board: Board) -> str:
    """The outcome symbol for the game the board is laid out for."""
    if board.game_type is GameType.TIC_TAC_TOE:
        return tictactoe_winner(board)
    return chess_winner(board)


def count_near_lines(board: Board, maximise: bool) -> int:
    """Tic-tac-toe lines holding two marks of one side and one empty square.

    Counts O's lines as a positive number when maximising, X's as negative otherwise.
    """
    kind = PieceType.TIC_TAC_O if maximise else PieceType.TIC_TAC_X
    sign = 1 if maximise else -1
    grid = board.grid
    count = 0
    for line in _TICTACTOE_LINES:
        cells = [grid[x][y] for x, y in line]
        marks = sum(1 for c in cells if c.kind is kind)
        empties = sum(1 for c in cells if c.is_empty())
        if marks == 2 and empties == 1:
            count += 1
    return count * sign