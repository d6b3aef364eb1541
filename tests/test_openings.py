import random

from echiquier.moves import from_notation
from echiquier.openings import STANDARD_OPENINGS, OpeningBook


def test_candidates_from_empty_history_cover_every_line():
    book = OpeningBook()
    options = book.candidates([])
    assert [name for name, _ in options] == sorted(STANDARD_OPENINGS)
    for name, move in options:
        assert move == STANDARD_OPENINGS[name][0]


def test_candidates_follow_history_prefix():
    book = OpeningBook()
    options = book.candidates(["Wg5e5", "Bb5d5"])
    names = {name for name, _ in options}
    assert "italienne" in names
    assert "sicilienne" not in names
    for name, move in options:
        line = STANDARD_OPENINGS[name]
        assert line[:2] == ["Wg5e5", "Bb5d5"]
        assert move == line[2]


def test_next_move_is_one_of_candidates():
    book = OpeningBook(rng=random.Random(3))
    history = ["Wg4e4", "Ba7c6"]
    allowed = {move for _, move in book.candidates(history)}
    move = book.next_move(history)
    assert move.to_notation() in allowed
    assert book.last_opening in STANDARD_OPENINGS


def test_next_move_out_of_book_returns_none():
    book = OpeningBook()
    assert book.next_move(["Wa1a2"]) is None
    assert book.last_opening is None


def test_custom_line_single_choice():
    book = OpeningBook({"line": ["Wg5e5", "Bb5d5"]}, rng=random.Random(0))
    move = book.next_move(["Wg5e5"])
    assert move == from_notation("Bb5d5")
    assert move.white is False
    assert book.last_opening == "line"


def test_finished_line_gives_no_move():
    book = OpeningBook({"line": ["Wg5e5", "Bb5d5"]})
    assert book.candidates(["Wg5e5", "Bb5d5"]) == []
    assert book.next_move(["Wg5e5", "Bb5d5"]) is None


def test_every_book_move_parses_back():
    for line in STANDARD_OPENINGS.values():
        for notation in line:
            assert from_notation(notation).to_notation() == notation