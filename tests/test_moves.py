import pytest

from echiquier.moves import Move, from_notation, parse_coordinates
from echiquier.pieces import Piece, PieceType


def test_default_move_is_all_minus_one():
    move = Move()
    assert (move.x1, move.y1, move.x2, move.y2) == (-1, -1, -1, -1)
    assert move.piece.is_empty()
    assert move.captured.is_empty()
    assert not move.castling and not move.en_passant and not move.white


def test_to_notation_white_pawn():
    move = Move(6, 4, 4, 4, Piece(PieceType.PAWN, True, 6, 4), white=True)
    assert move.to_notation() == "Wg5e5"


def test_to_notation_black_knight():
    move = Move(0, 6, 2, 5, white=False)
    assert move.to_notation() == "Ba7c6"


@pytest.mark.parametrize(
    "text", ["Wg5e5", "Bb5d5", "Wh7f6", "Ba2c3", "Wh6e3", "We4d4", "Bc5d4"]
)
def test_notation_round_trip(text):
    move = from_notation(text)
    assert move.to_notation() == text
    assert move.white == (text[0] == "W")


def test_from_notation_rejects_wrong_length():
    with pytest.raises(ValueError):
        from_notation("")
    with pytest.raises(ValueError):
        from_notation("Wg5e55")


def test_parse_coordinates_matches_notation():
    assert parse_coordinates("g5e5") == from_notation("Wg5e5")
    assert parse_coordinates("a7c6") == from_notation("Ba7c6")


def test_parse_coordinates_rejects_wrong_length():
    with pytest.raises(ValueError):
        parse_coordinates("g5e")


def test_equality_ignores_pieces_and_flags():
    a = Move(7, 4, 7, 6, Piece(PieceType.KING, True, 7, 4), castling=True, white=True)
    b = Move(7, 4, 7, 6)
    assert a == b
    assert hash(a) == hash(b)
    assert a != Move(7, 4, 7, 2)


def test_moves_usable_in_sets():
    moves = {Move(1, 2, 3, 4), Move(1, 2, 3, 4, white=True), Move(0, 0, 1, 1)}
    assert len(moves) == 2