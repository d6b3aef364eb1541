# echiquier

Play tic-tac-toe or chess in the terminal against a computer player.
The computer searches the game tree with alpha-beta pruning (plain minimax
is available from the library as well). In chess it first follows a small
book of classical openings and switches to search once the game leaves the
book.

## Installation

```
pip install .
```

## Playing

```
echiquier
```

You choose a game: `1` for tic-tac-toe (3×3) or `2` for chess (8×8). Who
moves first is decided at random.

Squares are given as a row letter followed by a column number; `A1` is the
top-left square.

- **Tic-tac-toe**: you play `X`, the computer plays `O`. Enter one square,
  for example `B2`.
- **Chess**: you play White, the computer plays Black. Enter the start and
  end squares separated by a space, for example `G5 E5`. Enter `Rp` to
  castle kingside or `Rg` to castle queenside. The game ends on checkmate,
  stalemate, or when only the two kings are left.

The game also stops when input runs out.

## Other modes

`echiquier` takes an optional mode and two options:

```
echiquier [MODE] [--games N] [--seed S]
```

| Mode           | What it does                                                     |
|----------------|------------------------------------------------------------------|
| `play`         | the interactive game described above (the default)               |
| `tic-tests`    | runs a few tic-tac-toe checks and prints Success / Failure       |
| `ai-vs-random` | the computer (`O`) plays `--games` games against random moves    |
| `ai-vs-ai`     | the computer plays both sides for `--games` games                |
| `chess-tests`  | runs castling, en passant, promotion, knight, stalemate and checkmate checks |
| `endgame`      | king and queen against a lone king, the computer playing both sides |
| `all`          | every mode above except `play`, in that order                    |

`--games` defaults to 50 and may not be negative. `--seed` fixes the random
choices (who starts, tie-breaking between equally good moves, the random
player and the opening chosen) so a run can be repeated.

## Using the library

```python
from echiquier.board import Board, GameType
from echiquier.moves import Move
from echiquier.outcome import winner

board = Board(GameType.TIC_TAC_TOE)
board.play(Move(-1, -1, 1, 1))  # X in the centre
print(board.render())
print(repr(winner(board)))      # ' ' while the game is still in progress
```

- `echiquier.pieces` — `PieceType` and the immutable `Piece`.
- `echiquier.moves` — `Move`, its `to_notation()` form (`Wg5e5`),
  `from_notation` and `parse_coordinates`.
- `echiquier.board` — `Board` with the chess move rules (`move_valid`,
  `is_legal`, `is_castling`, `is_en_passant`, `in_check`, ...). `Board.play`
  raises `IllegalMoveError` for a move that breaks the rules. A tic-tac-toe
  move gives `-1, -1` as its start square.
- `echiquier.outcome` — `winner` returns `'X'` or `'O'` for tic-tac-toe,
  `'B'` (White wins) or `'N'` (Black wins) for chess, `'V'` for a draw and
  `' '` while the game is still in progress; also `is_checkmate`,
  `is_stalemate` and `insufficient_material`.
- `echiquier.openings` — `OpeningBook`, whose `next_move(history)` picks a
  random book continuation or returns `None` once out of book.
- `echiquier.tictactoe_search.TicTacToeNode` and
  `echiquier.chess_search.ChessNode` — search nodes. `best_move` returns
  the child node whose first move is the one to play, or `None` when there
  is no move.
- `echiquier.simulations` (`ai_vs_random`, `ai_vs_ai`, returning
  `MatchStats`) and `echiquier.endgame.queen_endgame` (a generator of
  `(board, move, outcome)`) run games without any user input.
- `echiquier.tictactoe_game.play_tictactoe` and
  `echiquier.chess_game.play_chess` run an interactive game with any
  `read` and `write` callables.

## Limitations

- Pawns always promote to a queen.
- Castling is allowed whenever the king and rook stand on their starting
  squares with a clear, unattacked path; whether they moved earlier is not
  tracked.
- The only draws recognised are stalemate and a board holding nothing but
  the two kings; there is no threefold-repetition or fifty-move rule.
- The chess search looks two plies ahead, so its play is weak.
- There is no saving or loading of games.

## Tests

```
pip install .[test]
pytest
```