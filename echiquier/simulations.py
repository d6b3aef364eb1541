"""Batches of tic-tac-toe games played by the search against other players."""

from __future__ import annotations

import random
from dataclasses import dataclass

from echiquier.board import Board, GameType
from echiquier.moves import Move
from echiquier.outcome import DRAW, ONGOING, winner
from echiquier.tictactoe_search import TicTacToeNode


@dataclass
class MatchStats:
    """Results of a batch of games."""

    games: int
    ai_wins: int = 0
    opponent_wins: int = 0
    draws: int = 0


def play_random_move(board: Board, rng: random.Random) -> Move | None:
    """Place a mark on a random empty square; None when the board is full."""
    empty = [
        Move(-1, -1, i, j)
        for i, row in enumerate(board.grid[:3])
        for j, square in enumerate(row[:3])
        if square.is_empty()
    ]
    if not empty:
        return None
    move = rng.choice(empty)
    board.play(move)
    return move


def _ai_move(board: Board, symbol: str, initial_player: int, rng: random.Random) -> bool:
    node = TicTacToeNode()
    node.initial_player = initial_player
    best = node.best_move(board, True, symbol, rng)
    if best is None:
        return False
    board.play(best.moves[0])
    return True


def _check_games(games: int) -> None:
    if games < 0:
        raise ValueError("the number of games cannot be negative")


def ai_vs_random(games: int, rng: random.Random) -> MatchStats:
    """The search plays O against a random X; the first player is drawn at random."""
    _check_games(games)
    stats = MatchStats(games)
    for _ in range(games):
        board = Board(GameType.TIC_TAC_TOE)
        board.current_player = rng.randrange(2)
        while True:
            if board.current_player == 1:
                if not _ai_move(board, "O", 1, rng):
                    break
            else:
                play_random_move(board, rng)
            result = winner(board)
            if result == "X":
                stats.opponent_wins += 1
            elif result == "O":
                stats.ai_wins += 1
            elif result == DRAW:
                stats.draws += 1
            if result != ONGOING:
                break
    return stats


def ai_vs_ai(games: int, rng: random.Random) -> MatchStats:
    """The search plays both sides; any win is counted in ``ai_wins``."""
    _check_games(games)
    stats = MatchStats(games)
    for _ in range(games):
        board = Board(GameType.TIC_TAC_TOE)
        board.current_player = rng.randrange(2)
        while True:
            if board.current_player == 0:
                played = _ai_move(board, "X", 0, rng)
            else:
                played = _ai_move(board, "O", 1, rng)
            if not played:
                break
            result = winner(board)
            if result in ("X", "O"):
                stats.ai_wins += 1
                break
            if result == DRAW:
                stats.draws += 1
                break
    return stats