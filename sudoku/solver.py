"""
Randomized backtracking Sudoku solver with constraint propagation.

The search keeps candidate sets up to date on every assignment, always works
on the empty cell with the fewest candidates (ties broken at random) and only
copies the grid when it has to guess between two or more digits.
"""

from typing import List, Optional, Tuple

import numpy as np

from .constraints import assign_value, init_choices, update_choice
from .grid import SIZE, Cell, Grid
from .validator import find_violations, is_correct


class UnsolvableError(Exception):
    """The search exhausted every branch without finding a solution."""


class SearchLimitError(UnsolvableError):
    """The search was stopped after reaching its step limit."""


class SearchSession:
    """
    State shared by every branch of one solve call.

    Args:
        rng: numpy random Generator used for tie-breaking (fresh one if None)
        max_steps: Stop after this many assignments (None = no limit)
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, max_steps: Optional[int] = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_steps = max_steps
        self.steps = 0
        self.branched = False

    def count_step(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise SearchLimitError(f"Stopped after {self.steps - 1} steps (limit {self.max_steps})")


class _DeadEnd(Exception):
    """An empty cell has no legal digit left on the current branch."""


def _min_count_cells(grid: Grid) -> Tuple[int, List[Cell]]:
    """Return the smallest candidate count among empty cells and every cell having it."""
    masked = np.where(grid.values == 0, grid.counts, SIZE + 1)
    best = int(masked.min())
    cells = [(int(r), int(c)) for r, c in np.argwhere(masked == best)]
    return best, cells


def _try_next(grid: Grid, session: SearchSession) -> Optional[Tuple[int, int, int]]:
    """
    Pick the next (row, col, digit) to try.

    Returns None when the grid has no empty cell left. Raises _DeadEnd when
    some empty cell has run out of candidates.
    """
    if grid.is_full():
        return None

    best, cells = _min_count_cells(grid)
    if best == 0:
        raise _DeadEnd(cells[0])

    r, c = cells[session.rng.integers(len(cells))]
    options = grid.candidates(r, c)
    n = options[session.rng.integers(len(options))]
    return r, c, n


def _search(grid: Grid, session: SearchSession) -> Optional[Grid]:
    """Solve grid in place. Returns the completed grid or None on a dead end."""
    while True:
        try:
            move = _try_next(grid, session)
        except _DeadEnd:
            return None
        if move is None:
            return grid

        r, c, n = move
        session.count_step()
        if update_choice(grid, r, c, n) == 1:
            assign_value(grid, r, c, n)
            continue

        # Guess: try n on a copy. On failure n is already gone from (r, c)
        # here, so the loop moves on to the remaining candidates.
        session.branched = True
        grid.clear_unique()
        attempt = grid.copy()
        assign_value(attempt, r, c, n)
        result = _search(attempt, session)
        if result is not None and is_correct(result):
            return result


def solve(grid: Grid, rng: Optional[np.random.Generator] = None, max_steps: Optional[int] = None) -> Grid:
    """
    Solve grid and return the solved copy; the argument is left untouched.

    If the puzzle has several solutions one of them is returned, chosen by
    the random tie-breaking. The returned grid's unique flag tells whether
    every assignment was forced (see solution_is_unique).

    Raises:
        UnsolvableError: the givens conflict or no assignment completes the grid
        SearchLimitError: max_steps assignments were made without finishing
    """
    return _run(grid, SearchSession(rng=rng, max_steps=max_steps))


def _run(grid: Grid, session: SearchSession) -> Grid:
    violations = find_violations(grid)
    if violations:
        raise UnsolvableError(f"Given grid has conflicts: {violations[0]}")

    work = grid.copy()
    init_choices(work)
    result = _search(work, session)
    if result is None or not is_correct(result):
        raise UnsolvableError("No solution found")

    if session.branched:
        result.clear_unique()
    else:
        result.set_unique()
    return result


def solution_is_unique(grid: Grid) -> bool:
    """
    True if grid, as returned by solve, was reached without guessing.

    This describes how the grid was solved; it is not a proof that the
    puzzle has no other solution.
    """
    return grid.read_unique()


def solve_puzzle(grid: Grid, max_steps: int = 200000,
                 rng: Optional[np.random.Generator] = None) -> Tuple[Optional[Grid], str]:
    """
    Return (solution, message), or (None, reason) if unsolvable or invalid.
    Limits the search to max_steps assignments to avoid runaway searches.
    """
    session = SearchSession(rng=rng, max_steps=max_steps)
    try:
        solution = _run(grid, session)
    except UnsolvableError as e:
        return None, str(e)
    return solution, f"Solved in {session.steps} steps"
