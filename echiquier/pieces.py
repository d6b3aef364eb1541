"""Pieces for chess and tic-tac-toe boards."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass


class PieceType(enum.Enum):
    """Kinds of piece a board square can hold."""

    NONE = "none"
    TIC_TAC_X = "x"
    TIC_TAC_O = "o"
    KING = "king"
    QUEEN = "queen"
    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    PAWN = "pawn"


_VALUES = {
    PieceType.NONE: 0,
    PieceType.TIC_TAC_X: 0,
    PieceType.TIC_TAC_O: 0,
    PieceType.KING: 0,
    PieceType.QUEEN: 9,
    PieceType.ROOK: 5,
    PieceType.BISHOP: 3,
    PieceType.KNIGHT: 3,
    PieceType.PAWN: 1,
}

# (black glyph, white glyph)
_GLYPHS = {
    PieceType.KING: ("♔", "♚"),
    PieceType.QUEEN: ("♕", "♛"),
    PieceType.ROOK: ("♖", "♜"),
    PieceType.BISHOP: ("♗", "♝"),
    PieceType.KNIGHT: ("♘", "♞"),
    PieceType.PAWN: ("♙", "♟"),
}


@dataclass(frozen=True)
class Piece:
    """A piece on a square; the default instance is an empty square."""

    kind: PieceType = PieceType.NONE
    white: bool = True
    x: int = 0
    y: int = 0

    def value(self) -> int:
        """Material value of the piece."""
        return _VALUES[self.kind]

    def is_empty(self) -> bool:
        """True when this stands for an empty square."""
        return self.kind is PieceType.NONE

    def symbol(self) -> str:
        """Single character used to draw the piece."""
        if self.kind is PieceType.TIC_TAC_X:
            return "X"
        if self.kind is PieceType.TIC_TAC_O:
            return "O"
        if self.kind is PieceType.NONE:
            return " "
        black_glyph, white_glyph = _GLYPHS[self.kind]
        return white_glyph if self.white else black_glyph

    def moved_to(self, x: int, y: int) -> Piece:
        """Return the same piece standing on another square."""
        return dataclasses.replace(self, x=x, y=y)