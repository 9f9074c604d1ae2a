"""
Plain-text grid format.

A grid is 9 lines of 9 digits, each digit followed by a space, each line
terminated with a newline; 0 marks an empty cell:

1 2 3 4 5 6 7 8 9
4 5 6 7 8 9 1 2 3
...

Reading accepts any spacing as long as the input contains only digits,
spaces and newlines, and exactly 81 digits.
"""

import sys
from typing import TextIO

from .grid import SIZE, Grid


class GridFormatError(ValueError):
    """The text could not be read as a 9x9 grid."""


class InvalidCharacterError(GridFormatError):
    """The text contains a character other than a digit, a space or a newline."""


class WrongCountError(GridFormatError):
    """The text does not contain exactly 81 digits."""


def parse_grid(text: str) -> Grid:
    """
    Parse a grid from text.

    Raises:
        InvalidCharacterError: on any character that is not a digit, space or newline
        WrongCountError: when the number of digits is not 81
    """
    digits = []
    line = 1
    for ch in text:
        if ch.isdigit() and ch.isascii():
            digits.append(int(ch))
        elif ch == "\n":
            line += 1
        elif ch != " ":
            raise InvalidCharacterError(f"Wrong input for sudoku: unexpected character {ch!r} on line {line}")

    if len(digits) != SIZE * SIZE:
        raise WrongCountError(f"Input must be {SIZE * SIZE} numbers, got {len(digits)}")

    rows = [digits[i:i + SIZE] for i in range(0, SIZE * SIZE, SIZE)]
    return Grid.from_rows(rows)


def read_grid(stream: TextIO = sys.stdin) -> Grid:
    """Read a grid from stream until end of input."""
    return parse_grid(stream.read())


def format_grid(grid: Grid) -> str:
    """Render grid in the same format parse_grid reads."""
    lines = []
    for row in grid.to_list():
        lines.append("".join(f"{val} " for val in row))
    return "\n".join(lines) + "\n"


def print_grid(stream: TextIO, grid: Grid) -> None:
    stream.write(format_grid(grid))


def format_board(grid: Grid) -> str:
    """Render the 9x9 board as a human-friendly string."""
    lines = []
    for r, row in enumerate(grid.to_list()):
        parts = []
        for c, val in enumerate(row):
            parts.append(str(val) if val != 0 else ".")
            if c in {2, 5}:
                parts.append("|")
        line = " ".join(parts)
        lines.append(line)
        if r in {2, 5}:
            lines.append("-" * len(line))
    return "\n".join(lines)
