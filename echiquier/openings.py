"""A small book of chess openings in colour-prefixed move notation."""

from __future__ import annotations

import random
from collections.abc import Mapping, Sequence

from echiquier.moves import Move, from_notation

STANDARD_OPENINGS: dict[str, list[str]] = {
    "italienne": ["Wg5e5", "Bb5d5", "Wh7f6", "Ba2c3", "Wh6e3", "Ba6d3"],
    "gambit_du_roi": ["Wg5e5", "Bb5d5", "Wg6e6"],
    "sicilienne": ["Wg5e5", "Bb3d3"],
    "francaise": ["Wg5e5", "Bb5c5"],
    "gambit_dame": ["Wg4e4", "Bb4d4", "Wg3e3"],
    "ruy_lopez": ["Wg5e5", "Bb5d5", "Wh7f6", "Ba2c3", "Wh6d2"],
    "caro_kann": ["Wg5e5", "Bb3c3"],
    "Scandinavian Defense": ["Wg5e5", "Bb4d4"],
    "pirc": ["Wg5e5", "Bb5c5", "Wg4f4", "Ba6f6"],
    "Alekhine's Defense": ["Wg5e5", "Ba7c6"],
    "scotch": ["Wg5e5", "Bb5d5", "Wh7f6", "Ba2c3", "Wg4e4"],
    "vienna": ["Wg5e5", "Bb5d5", "Wh2f3"],
    "slav": ["Wg4e4", "Bb4d4", "Wg3e3", "Bb3c3"],
    "kings_indian": ["Wg4e4", "Ba7c6", "Wg3e3", "Bb7c5"],
    "nimzo_indian": ["Wg4e4", "Ba7c6", "Wg3e3", "Bb5c5", "Wh2f2", "Ba6e2"],
    "queens_indian": ["Wg4e4", "Ba7c6", "Wg3e3", "Bb5c5", "Wh7f6", "Bb2c2"],
    "catalan": ["Wg4e4", "Ba7c6", "Wg3e3", "Bb5c5", "Wg7f7"],
    "bogo_indian": ["Wg4e4", "Ba7c6", "Wg3e3", "Bb5c5", "Wh7f6", "Ba6e2"],
    "grunfeld": ["Wg4e4", "Ba7c6", "Wg3e3", "Bb7c7", "Wh2f2", "Bb4d4"],
    "Dutch Defense": ["Wg4e4", "Bb6d6"],
    "trompowsky": ["Wg4e4", "Ba7c6", "Wh3d7"],
    "benko_gambit": ["Wg4e4", "Ba7c6", "Wg3e3", "Bb3d3", "We4d4", "Bb2d2"],
    "london_system": ["Wg4e4", "Bb4d4", "Wh7f6", "Ba7c6", "Wh3e6"],
    "benoni_modern": [
        "Wg4e4", "Ba7c6", "Wg3e3", "Bb3d3", "We4d4",
        "Bb5c5", "Wh2f2", "Bc5d4", "We3d4", "Bb4c4",
    ],
    "kings_indian_attack": ["Wh7f6", "Bb4d4", "Wg7f7"],
}


class OpeningBook:
    """Chooses the next move of a known opening that continues a game."""

    def __init__(
        self,
        lines: Mapping[str, Sequence[str]] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        source = STANDARD_OPENINGS if lines is None else lines
        self.lines: dict[str, list[str]] = {
            name: list(source[name]) for name in sorted(source)
        }
        self.rng = rng if rng is not None else random.Random()
        self.last_opening: str | None = None

    def candidates(self, history: Sequence[str]) -> list[tuple[str, str]]:
        """(opening name, next move) for every line that the history begins."""
        history = list(history)
        depth = len(history)
        return [
            (name, moves[depth])
            for name, moves in self.lines.items()
            if depth < len(moves) and moves[:depth] == history
        ]

    def next_move(self, history: Sequence[str]) -> Move | None:
        """A random book continuation of the history, or None once out of book."""
        options = self.candidates(history)
        if not options:
            self.last_opening = None
            return None
        name, notation = self.rng.choice(options)
        self.last_opening = name
        return from_notation(notation)