"""Tic-tac-toe and chess in the terminal with a minimax / alpha-beta computer player."""

__version__ = "0.1.0"