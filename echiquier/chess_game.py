"""Interactive chess: a human plays White against the search playing Black."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable

from echiquier.board import Board, IllegalMoveError
from echiquier.chess_search import ChessNode
from echiquier.moves import Move
from echiquier.outcome import DRAW, ONGOING, winner
from echiquier.pieces import Piece, PieceType

_ENDINGS = {
    "B": "You won, well done!\n",
    "N": "Oops, the AI won!\n",
    DRAW: "Draw!\n",
}

_CASTLINGS = {"Rp": 6, "Rg": 2}


def parse_square(text: str) -> tuple[int, int]:
    """Row letter A-H then column digit 1-8, e.g. ``G5`` gives (6, 4)."""
    if len(text) != 2:
        raise ValueError(f"a square is two characters, got {text!r}")
    x = ord(text[0].upper()) - ord("A")
    y = ord(text[1]) - ord("1")
    if not (0 <= x < 8 and 0 <= y < 8):
        raise ValueError(f"square outside the board: {text!r}")
    return x, y


def _square_name(x: int, y: int) -> str:
    return f"{chr(ord('A') + x)}{y + 1}"


def _human_turn(board: Board, read: Callable[[str], str], write: Callable[[str], object]) -> bool:
    """Play the human's move; False if it must be asked for again."""
    line = read("\nHuman player, enter your move (e.g. A2 A4, Rp, Rg): ")
    tokens = line.split()
    if tokens and tokens[0] in _CASTLINGS:
        move = Move(
            7, 4, 7, _CASTLINGS[tokens[0]],
            Piece(PieceType.KING, True, 7, 4), Piece(),
            castling=True, white=True,
        )
        try:
            board.play_castling(move)
        except IllegalMoveError:
            write("Invalid castling.\n")
        else:
            board.record(move)
        write(board.render())
        return True

    try:
        if len(tokens) != 2:
            raise ValueError("two squares expected")
        x1, y1 = parse_square(tokens[0])
        x2, y2 = parse_square(tokens[1])
    except ValueError:
        write("Invalid format.\n")
        return False
    piece = board.grid[x1][y1]
    move = Move(x1, y1, x2, y2, piece, board.grid[x2][y2], white=piece.white)
    try:
        board.play(move)
    except IllegalMoveError:
        write("Invalid move.\n")
        return False
    board.record(move)
    write(board.render())
    return True


def play_chess(
    board: Board,
    read: Callable[[str], str] = input,
    write: Callable[[str], object] = sys.stdout.write,
    rng: random.Random | None = None,
) -> str:
    """Play until the game ends or input runs out; return the outcome symbol.

    Player 0 is the human (White), player 1 the AI (Black), which follows the
    opening book while it can and then searches. The result is 'B', 'N',
    'V' for a draw, or ' ' when the game stopped unfinished.
    """
    rng = rng if rng is not None else random.Random()
    in_opening = board.openings is not None
    write(board.render())
    while True:
        if board.current_player == 0:
            try:
                if not _human_turn(board, read, write):
                    continue
            except EOFError:
                return ONGOING
        else:
            write("\nThe AI is thinking...\n")
            move: Move | None = None
            if in_opening and board.openings is not None:
                move = board.openings.next_move(board.history)
                if move is None or not board.is_legal(move):
                    write("\nThe AI switches to alpha-beta search\n")
                    in_opening = False
                    move = None
                else:
                    write(f"\nThe AI plays the opening: {board.openings.last_opening}\n")
            if move is None:
                saved = board.last_move
                best = ChessNode().best_move(board, True, "N", rng)
                board.last_move = saved
                if best is None:
                    write("No move for the AI!\n")
                    return ONGOING
                move = best.moves[0]
            write(
                f"The AI plays: {_square_name(move.x1, move.y1)}"
                f" -> {_square_name(move.x2, move.y2)}\n"
            )
            try:
                board.play(move)
            except IllegalMoveError:
                pass
            board.record(move)
            write(board.render())

        result = winner(board)
        if result != ONGOING:
            write(board.render())
            write(_ENDINGS[result])
            return result