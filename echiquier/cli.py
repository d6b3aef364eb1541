"""Command line: play a game, or run the built-in checks and AI matches."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable

from echiquier.board import Board, GameType, IllegalMoveError
from echiquier.chess_game import play_chess
from echiquier.chess_search import ChessNode
from echiquier.endgame import queen_endgame
from echiquier.moves import Move
from echiquier.outcome import winner
from echiquier.pieces import Piece, PieceType
from echiquier.simulations import MatchStats, ai_vs_ai, ai_vs_random
from echiquier.tictactoe_game import play_tictactoe
from echiquier.tictactoe_search import TicTacToeNode

_MODES = ("play", "tic-tests", "ai-vs-random", "ai-vs-ai", "chess-tests", "endgame", "all")


def _write(text: str) -> None:
    sys.stdout.write(text)


def _format_result(name: str, success: bool) -> str:
    return f"{name} : {'Success' if success else 'Failure'}"


def _raises_illegal(action: Callable[[], object]) -> bool:
    try:
        action()
    except IllegalMoveError:
        return True
    return False


def _tictactoe_board(cells: list[tuple[int, int]]) -> Board:
    board = Board(GameType.TIC_TAC_TOE)
    for x, y in cells:
        board.play(Move(-1, -1, x, y))
    return board


def _first_search_move(board: Board, initial_player: int | None, rng: random.Random) -> Move | None:
    node = TicTacToeNode()
    if initial_player is not None:
        node.initial_player = initial_player
    best = node.best_move(board, True, "X", rng)
    return best.moves[0] if best is not None and best.moves else None


def _tictactoe_checks(rng: random.Random) -> list[str]:
    results = []

    board = _tictactoe_board([(0, 0)])
    occupied = _raises_illegal(lambda: board.play(Move(-1, -1, 0, 0)))
    results.append(_format_result("TicTacToe - Invalid move (square taken)", occupied))

    board = _tictactoe_board([(0, 0), (1, 0), (0, 1), (1, 1)])
    move = _first_search_move(board, None, rng)
    winning = move is not None and (move.x2, move.y2) == (0, 2)
    results.append(_format_result("TicTacToe - Winning move via alpha-beta", winning))

    board = _tictactoe_board([(0, 0), (1, 2), (1, 1), (2, 2)])
    move = _first_search_move(board, 0, rng)
    blocking = move is not None and (move.x2, move.y2) == (0, 2)
    results.append(_format_result("TicTacToe - Blocking move via alpha-beta", blocking))

    board = _tictactoe_board(
        [(0, 0), (1, 1), (0, 1), (0, 2), (2, 0), (1, 0), (1, 2), (2, 2), (2, 1)]
    )
    results.append(_format_result("TicTacToe - Draw", winner(board) == "V"))
    return results


def _empty_chessboard() -> Board:
    board = Board(GameType.CHESS)
    board.clear_standard_pieces()
    return board


def _plays(board: Board, move: Move) -> bool:
    return not _raises_illegal(lambda: board.play(move))


def _chess_checks() -> list[str]:
    results = []

    board = Board(GameType.CHESS)
    board.grid[7][5] = Piece()
    board.grid[7][6] = Piece()
    castle = Move(7, 4, 7, 6, board.grid[7][4], Piece(), castling=True, white=True)
    results.append(_format_result("Chess - Kingside castling", _plays(board, castle)))

    board = Board(GameType.CHESS)
    for col in (1, 2, 3):
        board.grid[7][col] = Piece()
    castle = Move(7, 4, 7, 2, board.grid[7][4], Piece(), castling=True, white=True)
    results.append(_format_result("Chess - Queenside castling", _plays(board, castle)))

    board = Board(GameType.CHESS)
    board.grid[7][5] = Piece(PieceType.PAWN, True, 7, 5)
    castle = Move(7, 4, 7, 6, board.grid[7][4], Piece(), castling=True, white=True)
    results.append(_format_result("Chess - Castling refused (path blocked)", not _plays(board, castle)))

    board = _empty_chessboard()
    black_pawn = Piece(PieceType.PAWN, False, 3, 4)
    white_pawn = Piece(PieceType.PAWN, True, 3, 5)
    board.grid[3][4] = black_pawn
    board.grid[3][5] = white_pawn
    board.current_player = 0
    board.last_move = Move(1, 4, 3, 4, black_pawn, Piece(), white=False)
    capture = Move(3, 5, 2, 4, white_pawn, black_pawn, en_passant=True, white=True)
    results.append(_format_result("Chess - En passant capture", _plays(board, capture)))

    board = _empty_chessboard()
    pawn = Piece(PieceType.PAWN, True, 1, 4)
    board.grid[1][4] = pawn
    board.current_player = 0
    _plays(board, Move(1, 4, 0, 4, pawn, Piece(), white=True))
    results.append(_format_result("Chess - Pawn promotion", board.grid[0][4].kind is PieceType.QUEEN))

    board = _empty_chessboard()
    knight = Piece(PieceType.KNIGHT, True, 4, 4)
    board.grid[4][4] = knight
    knight_moves = ChessNode().possible_moves(board, knight)
    results.append(_format_result("Chess - Knight moves (8 moves)", len(knight_moves) == 8))

    board = _empty_chessboard()
    board.grid[0][0] = Piece(PieceType.KING, False, 0, 0)
    board.grid[2][2] = Piece(PieceType.KING, True, 2, 2)
    results.append(_format_result("Chess - Stalemate detected (draw)", winner(board) == "V"))

    board = _empty_chessboard()
    board.grid[0][4] = Piece(PieceType.KING, False, 0, 4)
    board.grid[1][4] = Piece(PieceType.QUEEN, True, 1, 4)
    board.grid[0][5] = Piece(PieceType.ROOK, True, 0, 5)
    board.grid[1][3] = Piece(PieceType.ROOK, True, 1, 3)
    results.append(_format_result("Chess - Checkmate detected (win)", winner(board) == "B"))
    return results


def _percent(count: int, games: int) -> str:
    return f"{100.0 * count / games:.2f}%" if games else "0.00%"


def _print_random_stats(stats: MatchStats) -> None:
    print("\n\n----------------------------------------")
    print(f"  Results after {stats.games} games (AI vs Random)")
    print("----------------------------------------")
    print(f"AI wins (O) : {stats.ai_wins} ({_percent(stats.ai_wins, stats.games)})")
    print(f"Random wins (X) : {stats.opponent_wins} ({_percent(stats.opponent_wins, stats.games)})")
    print(f"Draws : {stats.draws} ({_percent(stats.draws, stats.games)})")


def _print_self_play_stats(stats: MatchStats) -> None:
    print("\n\n----------------------------------------")
    print(f"  Results after {stats.games} games (AI vs AI)")
    print("----------------------------------------")
    print(f"AI wins : {stats.ai_wins}")
    print(f"Draws : {stats.draws}")


def _run_endgame(rng: random.Random) -> None:
    messages = {
        "B": "\nWhite AI mated with king and queen!",
        "N": "\nBlack AI won!",
        "V": "\nDraw detected!",
    }
    for board, _move, result in queen_endgame(rng):
        if result in messages:
            _write(board.render())
            print(messages[result])


def _run_play(rng: random.Random) -> int:
    print("Choose a game:")
    print("1. Tic-Tac-Toe (3x3)")
    print("2. Chess (8x8)")
    try:
        choice = int(input("Enter your choice (1 or 2): "))
    except (EOFError, ValueError):
        choice = 0
    if choice not in (1, 2):
        print("Invalid choice. Please restart.")
        return 1
    game = GameType.TIC_TAC_TOE if choice == 1 else GameType.CHESS
    board = Board(game)
    board.current_player = rng.randrange(2)
    if game is GameType.TIC_TAC_TOE:
        print("\n\n=== Tic-Tac-Toe ===")
        play_tictactoe(board, input, _write, rng)
    else:
        print("\n\n                === Chess ===")
        play_chess(board, input, _write, rng)
    print("\n\nThanks for playing!")
    return 0


def _print_results(title: str, lines: list[str]) -> None:
    print(f"\n==== {title} ====\n")
    for line in lines:
        print(line)


def main(argv: list[str] | None = None) -> int:
    """Run the mode named on the command line; return the exit status."""
    parser = argparse.ArgumentParser(prog="echiquier", description="Tic-tac-toe and chess against a search AI.")
    parser.add_argument("mode", nargs="?", default="play", choices=_MODES)
    parser.add_argument("--games", type=int, default=50, help="games per AI match")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random choices")
    args = parser.parse_args(argv)
    if args.games < 0:
        parser.error("--games cannot be negative")
    rng = random.Random(args.seed)

    if args.mode == "play":
        return _run_play(rng)
    if args.mode in ("tic-tests", "all"):
        _print_results("Tic-tac-toe checks", _tictactoe_checks(rng))
    if args.mode in ("ai-vs-random", "all"):
        _print_random_stats(ai_vs_random(args.games, rng))
    if args.mode in ("ai-vs-ai", "all"):
        _print_self_play_stats(ai_vs_ai(args.games, rng))
    if args.mode in ("chess-tests", "all"):
        _print_results("Chess checks", _chess_checks())
    if args.mode in ("endgame", "all"):
        _run_endgame(rng)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())