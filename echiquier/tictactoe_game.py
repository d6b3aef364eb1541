"""Interactive tic-tac-toe: a human plays X against the search playing O."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable

from echiquier.board import Board
from echiquier.moves import Move
from echiquier.outcome import DRAW, ONGOING, winner
from echiquier.tictactoe_search import TicTacToeNode

_ENDINGS = {
    "X": "You won, well done!\n",
    "O": "Game over, the AI won!\n",
    DRAW: "Draw!\n",
}


def _parse_cell(text: str) -> tuple[int, int]:
    """Row letter then column number, e.g. ``A1`` for the top-left square."""
    cleaned = text.replace(" ", "").strip()
    if len(cleaned) < 2 or not cleaned[0].isalpha():
        raise ValueError(f"not a square: {text!r}")
    x = ord(cleaned[0].upper()) - ord("A")
    y = int(cleaned[1:]) - 1
    if not (0 <= x < 3 and 0 <= y < 3):
        raise ValueError(f"square outside the board: {text!r}")
    return x, y


def _cell_name(move: Move) -> str:
    return f"{chr(ord('A') + move.x2)}{move.y2 + 1}"


def play_tictactoe(
    board: Board,
    read: Callable[[str], str] = input,
    write: Callable[[str], object] = sys.stdout.write,
    rng: random.Random | None = None,
) -> str:
    """Play until the game ends or input runs out; return the outcome symbol.

    Player 0 is the human (X), player 1 the search (O). The result is 'X',
    'O', 'V' for a draw, or ' ' when the game stopped unfinished.
    """
    rng = rng if rng is not None else random.Random()
    while True:
        write(board.render())
        if board.current_player == 0:
            try:
                line = read("\nPlayer X, enter your move (e.g. A1): ")
            except EOFError:
                return ONGOING
            try:
                x, y = _parse_cell(line)
                board.play(Move(-1, -1, x, y))
            except ValueError:
                write("Invalid move!\n")
                continue
        else:
            write("\nThe AI is thinking...\n")
            node = TicTacToeNode()
            options = node.possible_moves(board)
            write(f"Possible moves for the AI: {len(options)}\n")
            write("".join(f"  -> ({_cell_name(m)})" for m in options) + "\n")
            best = node.best_move(board, True, "O", rng)
            if best is None:
                write("No move left for the AI!\n")
                return ONGOING
            move = best.moves[0]
            write(f"\nThe AI plays: ({_cell_name(move)})\n")
            board.play(move)

        result = winner(board)
        if result != ONGOING:
            write(board.render())
            write(_ENDINGS[result])
            return result