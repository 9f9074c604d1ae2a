"""
Candidate bookkeeping: initialize candidate sets from the filled cells and
propagate eliminations to the peers of an assigned cell.
"""

from .grid import SIZE, Grid, peers


def init_choices(grid: Grid) -> None:
    """
    Populate the candidate sets of every cell from the current values.

    Empty cells start with all nine digits, filled cells with none; each
    filled value is then eliminated from its peers. Also sets the unique flag.
    """
    grid.set_unique()
    for r in range(SIZE):
        for c in range(SIZE):
            if grid.read_value(r, c) == 0:
                grid.reset_choices(r, c)
            else:
                grid.clear_choices(r, c)

    for r in range(SIZE):
        for c in range(SIZE):
            val = grid.read_value(r, c)
            if val != 0:
                eliminate_choice(grid, r, c, val)


def eliminate_choice(grid: Grid, r: int, c: int, n: int) -> None:
    """Remove n from every peer of (r, c). (r, c) itself is left alone."""
    for rr, cc in peers(r, c):
        grid.remove_choice(rr, cc, n)


def update_choice(grid: Grid, r: int, c: int, n: int) -> int:
    """Remove n from the candidates of (r, c) and return the count it had before."""
    before = grid.read_count(r, c)
    grid.remove_choice(r, c, n)
    return before


def assign_value(grid: Grid, r: int, c: int, n: int) -> None:
    """Fill (r, c) with n: the cell loses its candidates and its peers lose n."""
    grid.update_value(r, c, n)
    grid.clear_choices(r, c)
    eliminate_choice(grid, r, c, n)
