import itertools
import random

from echiquier.endgame import queen_endgame
from echiquier.pieces import PieceType


def first_ply(seed):
    return next(iter(queen_endgame(random.Random(seed))))


def test_white_moves_first():
    board, move, result = first_ply(4)
    assert move.piece.white
    assert board.current_player == 1
    assert result in (" ", "B", "N", "V")


def test_black_king_stays_on_board():
    board, _, _ = first_ply(4)
    kinds = [(p.kind, p.white) for p in board.pieces()]
    assert (PieceType.KING, False) in kinds
    assert (PieceType.KING, True) in kinds


def test_same_seed_same_first_move():
    _, first, _ = first_ply(9)
    _, again, _ = first_ply(9)
    assert (first.x1, first.y1, first.x2, first.y2) == (again.x1, again.y1, again.x2, again.y2)


def test_moved_piece_lands_on_target():
    board, move, _ = first_ply(1)
    landed = board.grid[move.x2][move.y2]
    assert landed.white
    assert landed.kind is move.piece.kind


def test_plies_alternate_colours():
    plies = list(itertools.islice(queen_endgame(random.Random(6)), 2))
    colours = [move.piece.white for _, move, _ in plies]
    assert colours == [True, False][: len(plies)]
    assert len(plies) >= 1