"""Game board shared by tic-tac-toe and chess, with the chess move rules."""

from __future__ import annotations

import copy
import enum

from echiquier.moves import Move
from echiquier.openings import OpeningBook
from echiquier.pieces import Piece, PieceType


class GameType(enum.Enum):
    """Which game a board is laid out for."""

    TIC_TAC_TOE = 0
    CHESS = 1


class IllegalMoveError(ValueError):
    """Raised when a move breaks the rules of the game."""


_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

_SLIDERS = (PieceType.ROOK, PieceType.BISHOP, PieceType.QUEEN)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _on_chessboard(*coordinates: int) -> bool:
    return all(0 <= c < 8 for c in coordinates)


class Board:
    """A square grid of pieces plus the state needed to play on it.

    Player 0 plays X or White and player 1 plays O or Black.
    """

    def __init__(self, game: GameType) -> None:
        self.game_type = game
        self.size = 3 if game is GameType.TIC_TAC_TOE else 8
        self.current_player = 0
        self.last_move = Move(-10, -10)
        self.history: list[str] = []
        self.openings = OpeningBook() if game is GameType.CHESS else None
        self.grid: list[list[Piece]] = []
        self.reset()

    def copy(self) -> Board:
        """An independent copy of the board."""
        clone = copy.copy(self)
        clone.grid = [list(row) for row in self.grid]
        clone.history = list(self.history)
        return clone

    def reset(self) -> None:
        """Empty the grid, give the move to player 0 and set up chess pieces."""
        self.grid = [[Piece() for _ in range(self.size)] for _ in range(self.size)]
        self.current_player = 0
        if self.game_type is GameType.CHESS:
            self._place_chess_pieces()

    def _place_chess_pieces(self) -> None:
        for col, kind in enumerate(_BACK_RANK):
            self.grid[0][col] = Piece(kind, False, 0, col)
            self.grid[1][col] = Piece(PieceType.PAWN, False, 1, col)
            self.grid[6][col] = Piece(PieceType.PAWN, True, 6, col)
            self.grid[7][col] = Piece(kind, True, 7, col)

    def clear_standard_pieces(self) -> None:
        """Empty the four ranks that hold the pieces at the start of a chess game."""
        for row in (0, 1, 6, 7):
            self.grid[row] = [Piece() for _ in range(8)]

    def render(self) -> str:
        """The grid drawn with box characters, rows lettered and columns numbered."""
        n = self.size
        cell = "═════"
        lines = ["  " + "".join(f"   {i}  " for i in range(1, n + 1))]
        lines.append("  ╔" + "╦".join([cell] * n) + "╗")
        for i, row in enumerate(self.grid):
            squares = "".join(f"  {p.symbol()}  ║" for p in row)
            lines.append(f"{chr(ord('A') + i)} ║{squares}")
            if i < n - 1:
                lines.append("  ╠" + "╬".join([cell] * n) + "╣")
        lines.append("  ╚" + "╩".join([cell] * n) + "╝")
        return "\n".join(lines) + "\n"

    def opponent_symbol(self, ai_symbol: str) -> str:
        """The symbol of the side playing against ``ai_symbol``."""
        if self.game_type is GameType.TIC_TAC_TOE:
            return "O" if ai_symbol == "X" else "X"
        return "B" if ai_symbol == "N" else "N"

    def path_clear(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """True when every square strictly between the two squares is empty."""
        dx, dy = _sign(x2 - x1), _sign(y2 - y1)
        x, y = x1 + dx, y1 + dy
        while (x, y) != (x2, y2):
            if not self.grid[x][y].is_empty():
                return False
            x += dx
            y += dy
        return True

    def pawn_move_valid(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """Pawn step, first double step or diagonal capture."""
        pawn = self.grid[x1][y1]
        direction = -1 if pawn.white else 1
        target = self.grid[x2][y2]
        if x2 == x1 + direction and y1 == y2 and target.is_empty():
            return True
        start_row = 6 if pawn.white else 1
        if (
            x1 == start_row
            and x2 == x1 + 2 * direction
            and y1 == y2
            and self.grid[x1 + direction][y2].is_empty()
            and target.is_empty()
        ):
            return True
        return (
            x2 == x1 + direction
            and abs(y2 - y1) == 1
            and not target.is_empty()
            and target.white != pawn.white
        )

    def move_valid(self, x1: int, y1: int, x2: int, y2: int) -> bool:
        """Whether the piece on (x1, y1) may move to (x2, y2) by its own rules."""
        if not _on_chessboard(x1, y1, x2, y2):
            return False
        piece = self.grid[x1][y1]
        target = self.grid[x2][y2]
        if not target.is_empty() and target.white == piece.white:
            return False
        dx, dy = abs(x2 - x1), abs(y2 - y1)
        kind = piece.kind
        if kind is PieceType.KING:
            if dx <= 1 and dy <= 1:
                trial = self.copy()
                trial.grid[x2][y2] = trial.grid[x1][y1]
                trial.grid[x1][y1] = Piece()
                return not trial.in_check(piece.white)
            return False
        if kind is PieceType.QUEEN:
            return (dx == dy or x1 == x2 or y1 == y2) and self.path_clear(x1, y1, x2, y2)
        if kind is PieceType.ROOK:
            return (x1 == x2 or y1 == y2) and self.path_clear(x1, y1, x2, y2)
        if kind is PieceType.BISHOP:
            return dx == dy and self.path_clear(x1, y1, x2, y2)
        if kind is PieceType.KNIGHT:
            return (dx, dy) in ((2, 1), (1, 2))
        if kind is PieceType.PAWN:
            return self.pawn_move_valid(x1, y1, x2, y2)
        return False

    def _castling_allowed(self, move: Move) -> bool:
        if move.piece.kind is not PieceType.KING or abs(move.y2 - move.y1) != 2:
            return False
        row = move.x1
        if not 0 <= row < 8:
            return False
        white = move.piece.white
        direction = 1 if move.y2 > move.y1 else -1
        rook_col = 7 if direction == 1 else 0
        king = self.grid[row][4]
        rook = self.grid[row][rook_col]
        if king.kind is not PieceType.KING or king.white != white:
            return False
        if rook.kind is not PieceType.ROOK or rook.white != white:
            return False
        if any(not self.grid[row][c].is_empty() for c in range(4 + direction, rook_col, direction)):
            return False
        if self.in_check(white):
            return False
        for step in (1, 2):
            trial = self.copy()
            trial.grid[row][4 + step * direction] = trial.grid[row][4]
            trial.grid[row][4] = Piece()
            if trial.in_check(white):
                return False
        return True

    def is_castling(self, move: Move) -> bool:
        """Whether the move is a castling that the position allows."""
        return self._castling_allowed(move)

    def play_castling(self, move: Move) -> None:
        """Castle king and rook; raise IllegalMoveError if castling is not allowed."""
        if not self._castling_allowed(move):
            raise IllegalMoveError("castling is not allowed here")
        row = move.x1
        direction = 1 if move.y2 > move.y1 else -1
        rook_col = 7 if direction == 1 else 0
        king_col = 4 + 2 * direction
        new_rook_col = 4 + direction
        self.grid[row][king_col] = self.grid[row][4].moved_to(row, king_col)
        self.grid[row][4] = Piece()
        self.grid[row][new_rook_col] = self.grid[row][rook_col].moved_to(row, new_rook_col)
        self.grid[row][rook_col] = Piece()
        self.last_move = move
        self._switch_player()

    def _en_passant_shape(self, move: Move) -> bool:
        x1, y1, x2, y2 = move.x1, move.y1, move.x2, move.y2
        if not _on_chessboard(x1, y1, x2, y2):
            return False
        pawn = self.grid[x1][y1]
        if pawn.kind is not PieceType.PAWN or pawn.white != (self.current_player == 0):
            return False
        if abs(x2 - x1) != 1 or abs(y2 - y1) != 1 or not self.grid[x2][y2].is_empty():
            return False
        last = self.last_move
        return (
            last.piece.kind is PieceType.PAWN
            and abs(last.x2 - last.x1) == 2
            and last.y2 == last.y1
        )

    def is_en_passant(self, move: Move) -> bool:
        """Whether the move is an en passant capture the position allows."""
        if not self._en_passant_shape(move):
            return False
        pawn = self.grid[move.x1][move.y1]
        return move.x1 == (3 if pawn.white else 4)

    def play_en_passant(self, move: Move) -> None:
        """Capture en passant; raise IllegalMoveError if it is not allowed."""
        if not self._en_passant_shape(move):
            raise IllegalMoveError("en passant is not allowed here")
        if self._simulate(move).in_check(self.current_player == 0):
            raise IllegalMoveError("move leaves the king in check")
        x1, y1, x2, y2 = move.x1, move.y1, move.x2, move.y2
        self.grid[self.last_move.x2][self.last_move.y2] = Piece()
        self.grid[x2][y2] = self.grid[x1][y1].moved_to(x2, y2)
        self.grid[x1][y1] = Piece()
        self.last_move = move
        self._switch_player()

    def _simulate(self, move: Move) -> Board:
        trial = self.copy()
        trial.grid[move.x2][move.y2] = trial.grid[move.x1][move.y1].moved_to(move.x2, move.y2)
        trial.grid[move.x1][move.y1] = Piece()
        return trial

    def _basic_problem(self, move: Move) -> str | None:
        x1, y1, x2, y2 = move.x1, move.y1, move.x2, move.y2
        if not all(0 <= c < self.size for c in (x1, y1, x2, y2)):
            return "square outside the board"
        piece = self.grid[x1][y1]
        if piece.is_empty():
            return "no piece on the starting square"
        if piece.white != (self.current_player == 0):
            return "piece belongs to the other player"
        target = self.grid[x2][y2]
        if not target.is_empty() and target.kind is PieceType.KING:
            return "a king cannot be captured"
        return None

    def is_legal(self, move: Move) -> bool:
        """Whether the current player may play the chess move."""
        if self._basic_problem(move) is not None:
            return False
        if self.is_castling(move) or self.is_en_passant(move):
            return True
        if not self.move_valid(move.x1, move.y1, move.x2, move.y2):
            return False
        return not self._simulate(move).in_check(self.current_player == 0)

    def play(self, move: Move) -> None:
        """Play a move for the current player; raise IllegalMoveError if it is illegal.

        A move whose source is (-1, -1) places a tic-tac-toe mark on (x2, y2).
        """
        x2, y2 = move.x2, move.y2
        if move.x1 == -1 and move.y1 == -1:
            if not (0 <= x2 < self.size and 0 <= y2 < self.size) or not self.grid[x2][y2].is_empty():
                raise IllegalMoveError("square outside the board or already taken")
            first = self.current_player == 0
            kind = PieceType.TIC_TAC_X if first else PieceType.TIC_TAC_O
            self.grid[x2][y2] = Piece(kind, first, x2, y2)
            self._switch_player()
            return

        problem = self._basic_problem(move)
        if problem is not None:
            raise IllegalMoveError(problem)
        if self.is_castling(move):
            self.play_castling(move)
            return
        if self.is_en_passant(move):
            self.play_en_passant(move)
            return
        if not self.move_valid(move.x1, move.y1, x2, y2):
            raise IllegalMoveError("the piece cannot move that way")
        if self._simulate(move).in_check(self.current_player == 0):
            raise IllegalMoveError("move leaves the king in check")

        moved = self.grid[move.x1][move.y1].moved_to(x2, y2)
        self.grid[move.x1][move.y1] = Piece()
        if moved.kind is PieceType.PAWN and x2 == (0 if moved.white else 7):
            moved = Piece(PieceType.QUEEN, moved.white, x2, y2)
        self.grid[x2][y2] = moved
        self.last_move = move
        self._switch_player()

    def _switch_player(self) -> None:
        self.current_player = 1 - self.current_player if self.current_player in (0, 1) else 0

    def is_full(self) -> bool:
        """True when no square is empty."""
        return all(not p.is_empty() for row in self.grid for p in row)

    def _find_king(self, white: bool) -> tuple[int, int] | None:
        for i, row in enumerate(self.grid):
            for j, p in enumerate(row):
                if p.kind is PieceType.KING and p.white == white:
                    return i, j
        return None

    def in_check(self, white: bool) -> bool:
        """Whether the king of that colour is attacked; False if it has no king."""
        king = self._find_king(white)
        if king is None:
            return False
        kx, ky = king
        for i, row in enumerate(self.grid):
            for j, p in enumerate(row):
                if p.is_empty() or p.white == white:
                    continue
                if self.move_valid(i, j, kx, ky):
                    if p.kind not in _SLIDERS or self.path_clear(i, j, kx, ky):
                        return True
        return False

    def pieces(self) -> list[Piece]:
        """All pieces on the board, row by row."""
        return [p for row in self.grid for p in row if not p.is_empty()]

    def record(self, move: Move) -> None:
        """Append the move, in notation, to the game history."""
        self.history.append(move.to_notation())