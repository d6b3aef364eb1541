from unittest import mock

import pytest

from echiquier.cli import main


def test_chess_checks_all_pass(capsys):
    assert main(["chess-tests"]) == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if " : " in line]
    assert len(lines) == 8
    assert all(line.endswith("Success") for line in lines)


def test_tictactoe_checks_report_each_case(capsys):
    assert main(["tic-tests", "--seed", "1"]) == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if " : " in line]
    assert len(lines) == 4
    by_name = dict(line.rsplit(" : ", 1) for line in lines)
    assert by_name["TicTacToe - Draw"] == "Success"
    assert by_name["TicTacToe - Invalid move (square taken)"] == "Success"
    assert by_name["TicTacToe - Blocking move via alpha-beta"] == "Success"


@mock.patch("builtins.input", side_effect=["3"])
def test_invalid_game_choice(_input, capsys):
    assert main(["play"]) == 1
    assert "Invalid choice" in capsys.readouterr().out


@mock.patch("builtins.input", side_effect=EOFError)
def test_no_game_choice(_input, capsys):
    assert main([]) == 1
    assert "Invalid choice" in capsys.readouterr().out


def test_unknown_mode_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["nonsense"])
    assert info.value.code == 2


def test_negative_games_rejected():
    with pytest.raises(SystemExit) as info:
        main(["ai-vs-ai", "--games", "-1"])
    assert info.value.code == 2


def test_zero_games_prints_empty_stats(capsys):
    assert main(["ai-vs-random", "--games", "0"]) == 0
    out = capsys.readouterr().out
    assert "Results after 0 games (AI vs Random)" in out
    assert "AI wins (O) : 0 (0.00%)" in out