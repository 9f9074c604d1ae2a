"""
Row, column and block validation.

Works on complete and partial grids alike: empty cells never conflict, so a
grid with blanks is correct as long as its filled values do not repeat.
"""

import sys
from dataclasses import dataclass
from itertools import combinations
from typing import List, TextIO, Tuple

import numpy as np

from .grid import SIZE, Cell, Grid, block_cells, col_cells, row_cells


@dataclass(frozen=True)
class Violation:
    """Two filled cells of the same group holding the same value."""

    kind: str  # 'row', 'column' or 'block'
    index: int  # row/column index (0-based) or block number (1-based)
    cells: Tuple[Cell, Cell]
    value: int

    def __str__(self):
        return f"The number ({self.value}) exists more than once in {self.kind} ({self.index})"


def _as_board(grid) -> np.ndarray:
    if isinstance(grid, Grid):
        return grid.values
    board = np.asarray(grid)
    if board.shape != (SIZE, SIZE):
        raise ValueError(f"Expected a {SIZE}x{SIZE} board, got shape {board.shape}")
    return board


def _groups():
    for r in range(SIZE):
        yield "row", r, row_cells(r)
    for c in range(SIZE):
        yield "column", c, col_cells(c)
    for b in range(1, SIZE + 1):
        yield "block", b, block_cells(b)


def find_violations(grid) -> List[Violation]:
    """
    Compare every pair of filled cells within each row, column and block.

    A digit appearing k times in one group is reported once per pair, so the
    same underlying mistake may show up more than once.

    Args:
        grid: A Grid or any 9x9 array-like of ints (0 = empty)

    Returns:
        List of Violation, in row, column, block order
    """
    board = _as_board(grid)
    violations: List[Violation] = []
    for kind, index, cells in _groups():
        filled = [cell for cell in cells if board[cell] != 0]
        for a, b in combinations(filled, 2):
            if board[a] == board[b]:
                violations.append(Violation(kind, index, (a, b), int(board[a])))
    return violations


def is_correct(grid) -> bool:
    """True iff no filled value repeats in any row, column or block."""
    return not find_violations(grid)


def print_errors(grid, stream: TextIO = sys.stderr) -> bool:
    """Write every violation to stream, one per line. Returns is_correct(grid)."""
    violations = find_violations(grid)
    for violation in violations:
        print(str(violation), file=stream)
    if not violations:
        print("The sudoku puzzle has no errors!", file=stream)
    return not violations
