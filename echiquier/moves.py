"""Moves and their text notations."""

from __future__ import annotations

from dataclasses import dataclass, field

from echiquier.pieces import Piece


@dataclass(frozen=True, eq=False)
class Move:
    """A move from (x1, y1) to (x2, y2); for tic-tac-toe x1 and y1 are -1."""

    x1: int = -1
    y1: int = -1
    x2: int = -1
    y2: int = -1
    piece: Piece = field(default_factory=Piece)
    captured: Piece = field(default_factory=Piece)
    castling: bool = False
    en_passant: bool = False
    white: bool = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (
            other.x1,
            other.y1,
            other.x2,
            other.y2,
        )

    def __hash__(self) -> int:
        return hash((self.x1, self.y1, self.x2, self.y2))

    def to_notation(self) -> str:
        """Colour letter followed by the two squares, e.g. ``Wg5e5``."""
        colour = "W" if self.white else "B"
        return (
            f"{colour}{chr(ord('a') + self.x1)}{self.y1 + 1}"
            f"{chr(ord('a') + self.x2)}{self.y2 + 1}"
        )


def from_notation(text: str) -> Move:
    """Parse the five-character form produced by :meth:`Move.to_notation`."""
    if len(text) != 5:
        raise ValueError(f"expected five characters, got {text!r}")
    return Move(
        ord(text[1]) - ord("a"),
        ord(text[2]) - ord("1"),
        ord(text[3]) - ord("a"),
        ord(text[4]) - ord("1"),
        white=text[0] == "W",
    )


def parse_coordinates(text: str) -> Move:
    """Parse four characters naming the source and destination squares."""
    if len(text) != 4:
        raise ValueError(f"expected four characters, got {text!r}")
    return Move(
        ord(text[0]) - ord("a"),
        ord(text[1]) - ord("1"),
        ord(text[2]) - ord("a"),
        ord(text[3]) - ord("1"),
    )