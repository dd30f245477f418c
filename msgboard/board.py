"""A sparse board of characters onto which text messages are posted."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

EMPTY_CELL = "_"


class Direction(Enum):
    """The direction in which a message runs on the board."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Board:
    """An unbounded grid of characters, stored sparsely by row and column."""

    def __init__(self) -> None:
        self._rows: dict[int, dict[int, str]] = {}
        self._max_row = 0
        self._max_column = 0

    @property
    def max_row(self) -> int:
        """The farthest row reached by any posted message."""
        return self._max_row

    @property
    def max_column(self) -> int:
        """The farthest column reached by any posted message."""
        return self._max_column

    def post(self, row: int, column: int, direction: Direction, message: str) -> None:
        """Write ``message`` starting at (row, column), overwriting existing cells."""
        if direction is Direction.HORIZONTAL:
            self._max_row = max(self._max_row, row)
            self._max_column = max(self._max_column, column + len(message))
            cells = self._rows.setdefault(row, {})
            for offset, char in enumerate(message):
                cells[column + offset] = char
        elif direction is Direction.VERTICAL:
            self._max_row = max(self._max_row, row + len(message))
            self._max_column = max(self._max_column, column)
            for offset, char in enumerate(message):
                self._rows.setdefault(row + offset, {})[column] = char
        else:
            raise ValueError("Invalid direction .")

    def char_at(self, row: int, column: int) -> str:
        """Return the character at (row, column), or an underscore if the cell is empty."""
        return self._rows.get(row, {}).get(column, EMPTY_CELL)

    def read(self, row: int, column: int, direction: Direction, length: int) -> str:
        """Read ``length`` characters from (row, column) in the given direction."""
        if direction is Direction.HORIZONTAL:
            return "".join(self.char_at(row, column + offset) for offset in range(length))
        if direction is Direction.VERTICAL:
            return "".join(self.char_at(row + offset, column) for offset in range(length))
        raise ValueError("Invalid direction .")

    def render(self) -> str:
        """Return every stored row, in order, with its filled cells joined and a newline after each."""
        return "".join(
            "".join(cells[col] for col in sorted(cells)) + "\n"
            for _, cells in sorted(self._rows.items())
        )

    def show(self, file: TextIO | None = None) -> None:
        """Write the rendered board to ``file`` (standard output by default)."""
        out = sys.stdout if file is None else file
        out.write(self.render())