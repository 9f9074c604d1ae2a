"""
Grid state for the constraint engine.

A Grid keeps three numpy arrays side by side:
1) values  - 9x9 ints, 0 = empty cell
2) choices - 9x9x10 bools, choices[r, c, n] is True when digit n is still legal
             for cell (r, c); index 0 is never used
3) counts  - 9x9 ints, the cached number of legal digits per cell

plus the puzzle-level `unique` flag. Coordinates are 0-based (row, col).
"""

from typing import List, Tuple

import numpy as np

SIZE = 9
BLOCK = 3

Cell = Tuple[int, int]


def which_block(r: int, c: int) -> int:
    """Return the 1-based block index of (r, c), numbered row-major."""
    return (r // BLOCK) * BLOCK + (c // BLOCK) + 1


def block_origin(b: int) -> Cell:
    """Top-left coordinate of block b (1..9)."""
    return BLOCK * ((b - 1) // BLOCK), BLOCK * ((b - 1) % BLOCK)


def row_cells(r: int) -> List[Cell]:
    return [(r, c) for c in range(SIZE)]


def col_cells(c: int) -> List[Cell]:
    return [(r, c) for r in range(SIZE)]


def block_cells(b: int) -> List[Cell]:
    r0, c0 = block_origin(b)
    return [(r0 + i, c0 + j) for i in range(BLOCK) for j in range(BLOCK)]


def peers(r: int, c: int) -> List[Cell]:
    """Return the 20 coordinates sharing a row, column or block with (r, c)."""
    ps = [(r, j) for j in range(SIZE) if j != c]
    ps += [(i, c) for i in range(SIZE) if i != r]
    for rr, cc in block_cells(which_block(r, c)):
        if rr != r and cc != c:
            ps.append((rr, cc))
    return ps


class Grid:
    """
    A 9x9 Sudoku grid with per-cell candidate sets.

    Every mutation of a candidate set goes through set_choice/clear_choice/
    remove_choice or the bulk reset helpers so that `counts` never drifts
    from the number of True entries in `choices`.
    """

    def __init__(self, values=None):
        """
        Create a grid.

        Args:
            values: Optional 9x9 array-like of ints in 0..9. Defaults to an
                empty grid. Candidate sets start empty; call
                constraints.init_choices before searching.
        """
        if values is None:
            board = np.zeros((SIZE, SIZE), dtype=np.int8)
        else:
            board = np.array(values, dtype=np.int64)
            if board.shape != (SIZE, SIZE):
                raise ValueError(f"Grid must be {SIZE}x{SIZE}, got shape {board.shape}")
            if board.min() < 0 or board.max() > SIZE:
                raise ValueError(f"Grid values must lie in 0..{SIZE}")
            board = board.astype(np.int8)

        self.values = board
        self.choices = np.zeros((SIZE, SIZE, SIZE + 1), dtype=bool)
        self.counts = np.zeros((SIZE, SIZE), dtype=np.int8)
        self.unique = False

    @classmethod
    def empty(cls) -> "Grid":
        return cls()

    @classmethod
    def from_rows(cls, rows) -> "Grid":
        return cls(rows)

    def copy(self) -> "Grid":
        """Independent snapshot; mutating the copy never touches self."""
        other = Grid.__new__(Grid)
        other.values = self.values.copy()
        other.choices = self.choices.copy()
        other.counts = self.counts.copy()
        other.unique = self.unique
        return other

    # values

    def read_value(self, r: int, c: int) -> int:
        return int(self.values[r, c])

    def update_value(self, r: int, c: int, n: int) -> None:
        self.values[r, c] = n

    # choices

    def choice_is_valid(self, r: int, c: int, n: int) -> bool:
        return bool(self.choices[r, c, n])

    def set_choice(self, r: int, c: int, n: int) -> None:
        if not self.choices[r, c, n]:
            self.choices[r, c, n] = True
            self.counts[r, c] += 1

    def clear_choice(self, r: int, c: int, n: int) -> None:
        if self.choices[r, c, n]:
            self.choices[r, c, n] = False
            self.counts[r, c] -= 1

    def remove_choice(self, r: int, c: int, n: int) -> None:
        """Remove n from the candidates of (r, c); a no-op when already absent."""
        self.clear_choice(r, c, n)

    def reset_choices(self, r: int, c: int) -> None:
        """Mark every digit legal for (r, c), count 9."""
        self.choices[r, c, 1:] = True
        self.choices[r, c, 0] = False
        self.counts[r, c] = SIZE

    def clear_choices(self, r: int, c: int) -> None:
        self.choices[r, c, :] = False
        self.counts[r, c] = 0

    def candidates(self, r: int, c: int) -> List[int]:
        return [int(n) for n in np.flatnonzero(self.choices[r, c])]

    # counts

    def read_count(self, r: int, c: int) -> int:
        return int(self.counts[r, c])

    def set_count(self, r: int, c: int) -> None:
        """Reset (r, c) to the full count of 9, keeping choices in step."""
        self.reset_choices(r, c)

    def clear_count(self, r: int, c: int) -> None:
        """Reset (r, c) to a count of 0, keeping choices in step."""
        self.clear_choices(r, c)

    # unique flag

    def read_unique(self) -> bool:
        return self.unique

    def set_unique(self) -> None:
        self.unique = True

    def clear_unique(self) -> None:
        self.unique = False

    # whole-grid queries

    def empty_cells(self) -> List[Cell]:
        return [(int(r), int(c)) for r, c in np.argwhere(self.values == 0)]

    def filled_count(self) -> int:
        return int(np.count_nonzero(self.values))

    def is_full(self) -> bool:
        return self.filled_count() == SIZE * SIZE

    def to_list(self) -> List[List[int]]:
        return self.values.astype(int).tolist()

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    def __repr__(self):
        return f"Grid(filled={self.filled_count()}, unique={self.unique})"
