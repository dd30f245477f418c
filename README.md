# msgboard

An unbounded text board. Messages go onto it at any row and column, running
horizontally or vertically, and any stretch of it can be read back. Cells that
have never been written read as `_`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the board from Python

```python
from msgboard.board import Board, Direction

board = Board()
board.post(0, 0, Direction.HORIZONTAL, "hello")
board.post(0, 4, Direction.VERTICAL, "over")

board.read(0, 0, Direction.HORIZONTAL, 6)   # 'hello_'
board.read(0, 4, Direction.VERTICAL, 4)     # 'over'
board.char_at(10, 10)                       # '_'

print(board.render())
```

- `Board.post(row, column, direction, message)` writes the message one
  character per cell; later posts overwrite the cells they cover.
- `Board.read(row, column, direction, length)` returns `length` characters,
  with `_` for empty cells.
- `Board.render()` returns the written cells row by row, one line for each
  row that holds anything, each row's cells in column order.
- `Board.show(file)` writes that same text to an open text stream
  (standard output when `file` is `None`).
- `Board.max_row` and `Board.max_column` give the farthest row and column
  any post has reached.

A direction that is not a `Direction` member raises `ValueError`.

`msgboard.cli.extend(board, row, column, input_length)` pads the board with
space characters so that a post of `input_length` characters at
`(row, column)` lies inside the area already filled.

## Interactive use

```
msgboard
```

The command clears the screen, starts with a one-row board of seven spaces,
and offers a menu:

- `Y` – type a line of text, then the row and column to post it at;
- `P` – name a text file and a starting row and column; each line of the
  file is posted on its own row, one below the other (a file that does not
  exist is created empty);
- `S` – (after the first post) name a file to save the rendered board to;
- any other key – quit.

Before each post the board is padded with spaces as `extend` describes, and
after each post the whole board is printed. Non-numeric row or column input
is asked for again. End of input ends the session.

## What it does not do

The board lives only in memory for the length of a session. Saving writes
its rendered text; there is no way to load a saved board back other than
posting the file's lines again with `P`.