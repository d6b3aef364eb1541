import pytest

from echiquier.pieces import Piece, PieceType


def test_default_piece_is_empty_white_square():
    piece = Piece()
    assert piece.is_empty()
    assert piece.white is True
    assert (piece.x, piece.y) == (0, 0)
    assert piece.value() == 0


def test_real_piece_is_not_empty():
    assert not Piece(PieceType.PAWN, False, 1, 3).is_empty()


def test_queen_value():
    assert Piece(PieceType.QUEEN, True, 7, 3).value() == 9


def test_value_ordering():
    def v(kind):
        return Piece(kind, True, 0, 0).value()

    assert v(PieceType.QUEEN) > v(PieceType.ROOK) > v(PieceType.BISHOP)
    assert v(PieceType.BISHOP) == v(PieceType.KNIGHT)
    assert v(PieceType.KNIGHT) > v(PieceType.PAWN) > v(PieceType.KING)
    assert v(PieceType.TIC_TAC_X) == v(PieceType.TIC_TAC_O) == v(PieceType.KING)


@pytest.mark.parametrize(
    "kind, black, white",
    [
        (PieceType.KING, "♔", "♚"),
        (PieceType.QUEEN, "♕", "♛"),
        (PieceType.ROOK, "♖", "♜"),
        (PieceType.BISHOP, "♗", "♝"),
        (PieceType.KNIGHT, "♘", "♞"),
        (PieceType.PAWN, "♙", "♟"),
    ],
)
def test_chess_symbols(kind, black, white):
    assert Piece(kind, False, 0, 0).symbol() == black
    assert Piece(kind, True, 0, 0).symbol() == white


def test_tictactoe_and_empty_symbols():
    assert Piece(PieceType.TIC_TAC_X, True, 0, 0).symbol() == "X"
    assert Piece(PieceType.TIC_TAC_O, False, 0, 0).symbol() == "O"
    assert Piece().symbol() == " "


def test_moved_to_keeps_kind_and_colour():
    piece = Piece(PieceType.KNIGHT, False, 0, 1)
    moved = piece.moved_to(2, 2)
    assert (moved.x, moved.y) == (2, 2)
    assert moved.kind is piece.kind
    assert moved.white is piece.white
    assert (piece.x, piece.y) == (0, 1)


def test_pieces_compare_by_value():
    assert Piece(PieceType.ROOK, True, 7, 0) == Piece(PieceType.ROOK, True, 7, 0)
    assert Piece(PieceType.ROOK, True, 7, 0) != Piece(PieceType.ROOK, False, 7, 0)