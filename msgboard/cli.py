"""Interactive text board: post typed lines or file contents, then save the result."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TextIO

from msgboard.board import Board, Direction

_CLEAR = "\033[H\033[2J"
_FIRST_PROMPT = (
    "Want to add something to the board ?\n"
    "Y - for entering manually, \n"
    "P - for reading from a text file ,\n"
    "Every other letter on the keyboard - for exiting.\n\n"
)
_MORE_PROMPT = (
    "Want to add something more ?\n"
    " Y - for entering manually,\n"
    " P - for reading from a text file ,\n"
    " S - for saving ,\n"
    " Every other letter on the keyboard - for exiting. \n"
)
_AFTER_SAVE_PROMPT = (
    "Want to add something more ?\n"
    " Y - for entering manually,\n"
    " P - for reading from a text file ,\n"
    " Every other letter on the keyboard - for exiting.\n\n"
)
_ROW_PROMPT = "Enter the number of the row you wish to public you post.\n"
_COLUMN_PROMPT = "Enter the number of the column you wish to public you post.\n"


def extend(board: Board, row: int, column: int, input_length: int) -> None:
    """Pad the board with spaces so that a post at (row, column) fits inside it."""
    column_target = column + input_length
    max_column = board.max_column
    max_row = board.max_row
    if row > max_row:
        for i in range(max_row + 1, row + 2):
            for j in range(max_column + 1):
                board.post(i, j, Direction.HORIZONTAL, " ")
    if column_target > max_column:
        for i in range(row + 1):
            for j in range(max_column + 1, column_target + 2):
                board.post(i, j, Direction.HORIZONTAL, " ")


class _Console:
    """Whitespace-token and line reader over a text stream."""

    def __init__(self, stream: TextIO, out: TextIO) -> None:
        self._stream = stream
        self._out = out
        self._pending: str | None = None

    def _next_line(self) -> str:
        line = self._stream.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def token(self) -> str:
        while True:
            if self._pending is None:
                self._pending = self._next_line()
            parts = self._pending.split(None, 1)
            if parts:
                self._pending = parts[1] if len(parts) > 1 else ""
                return parts[0]
            self._pending = None

    def integer(self) -> int:
        while True:
            text = self.token()
            try:
                return int(text)
            except ValueError:
                self._out.write("Please enter a whole number.\n")

    def line(self) -> str:
        if self._pending is not None:
            text, self._pending = self._pending, None
            return text
        return self._next_line()

    def skip_line(self) -> None:
        if self._pending is None:
            self._next_line()
        else:
            self._pending = None


def _list_files(out: TextIO) -> None:
    for name in sorted(os.listdir(".")):
        out.write(name + "\n")


def _run(board: Board, console: _Console, out: TextIO) -> int:
    out.write(_CLEAR)
    out.write("Welcome to the text board.\n")
    last_input = ""
    out.write(_FIRST_PROMPT)
    status = console.token()
    if status not in ("Y", "P"):
        return 0
    while True:
        out.write(_CLEAR)
        console.skip_line()
        out.write(_CLEAR)
        if status == "Y":
            out.write("Please enter what you wish to be shown on the board.\n")
            last_input = console.line()
            out.write(_CLEAR)
            out.write(_ROW_PROMPT)
            row = console.integer()
            out.write(_COLUMN_PROMPT)
            column = console.integer()
            extend(board, row, column, len(last_input))
            board.post(row, column, Direction.HORIZONTAL, last_input)
            out.write(_CLEAR)
            board.show(out)
        else:
            out.write("List of files:\n")
            _list_files(out)
            out.write("\n\nEnter the name of a file you want to read from:\n")
            path = Path(console.token())
            if not path.exists():
                path.touch()
            out.write(_CLEAR)
            out.write(_ROW_PROMPT)
            row = console.integer()
            out.write(_COLUMN_PROMPT)
            column = console.integer()
            with path.open(encoding="utf-8") as source:
                for text in source:
                    extend(board, row, column, len(last_input))
                    board.post(row, column, Direction.HORIZONTAL, text.rstrip("\r\n"))
                    row += 1
            out.write(_CLEAR)
            board.show(out)

        out.write(_MORE_PROMPT)
        status = console.token()
        if status not in ("Y", "P", "S"):
            return 0
        if status == "S":
            out.write(_CLEAR)
            _list_files(out)
            out.write("\nEnter the name of a file you want to save to:\n\n")
            target = Path(console.token())
            out.write(_CLEAR)
            with target.open("w", encoding="utf-8") as saved:
                board.show(saved)
            out.write(_AFTER_SAVE_PROMPT)
            status = console.token()
            if status not in ("Y", "P"):
                return 0


def main(argv: list[str] | None = None) -> int:
    """Run the interactive board on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="msgboard", description="Post messages onto a text board interactively."
    )
    parser.parse_args(argv)

    board = Board()
    for width in range(7):
        board.post(0, width, Direction.HORIZONTAL, " ")

    out = sys.stdout
    console = _Console(sys.stdin, out)
    try:
        return _run(board, console, out)
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())