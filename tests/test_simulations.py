import random

import pytest

from echiquier.board import Board, GameType
from echiquier.pieces import PieceType
from echiquier.simulations import MatchStats, ai_vs_ai, ai_vs_random, play_random_move


def test_random_move_places_mark_and_switches_player():
    board = Board(GameType.TIC_TAC_TOE)
    move = play_random_move(board, random.Random(5))
    assert board.grid[move.x2][move.y2].kind is PieceType.TIC_TAC_X
    assert board.current_player == 1


def test_random_moves_fill_board_then_stop():
    board = Board(GameType.TIC_TAC_TOE)
    rng = random.Random(11)
    played = [play_random_move(board, rng) for _ in range(9)]
    assert len({(m.x2, m.y2) for m in played}) == 9
    assert board.is_full()
    assert play_random_move(board, rng) is None


def test_zero_games():
    assert ai_vs_random(0, random.Random(1)) == MatchStats(0, 0, 0, 0)
    assert ai_vs_ai(0, random.Random(1)) == MatchStats(0, 0, 0, 0)


def test_negative_games_rejected():
    with pytest.raises(ValueError):
        ai_vs_random(-1, random.Random(1))
    with pytest.raises(ValueError):
        ai_vs_ai(-2, random.Random(1))


def test_ai_never_loses_to_random_player():
    stats = ai_vs_random(1, random.Random(2))
    assert stats.games == 1
    assert stats.opponent_wins == 0
    assert stats.ai_wins + stats.draws == 1


def test_perfect_players_draw():
    stats = ai_vs_ai(1, random.Random(3))
    assert stats.draws == 1
    assert stats.ai_wins == 0