"""
Puzzle generation: solve an empty grid, then blank cells until the requested
number of filled cells remains.
"""

from typing import Optional

import numpy as np

from .grid import SIZE, Grid
from .solver import solve


def generate_complete(rng: Optional[np.random.Generator] = None) -> Grid:
    """Return a random, completely filled and valid grid."""
    return solve(Grid.empty(), rng=rng)


def generate(nelts: int, rng: Optional[np.random.Generator] = None) -> Grid:
    """
    Generate a puzzle with nelts filled cells.

    Cells are removed in a random order without replacement, so the loop
    ends after at most 81 removals. Removed cells get all nine digits back
    as candidates; they are not re-derived from the remaining values.
    The puzzle is not guaranteed to have a unique solution.

    Args:
        nelts: Number of filled cells to keep (0..81). 81 returns a full solution.
        rng: numpy random Generator (fresh one if None)
    """
    if not 0 <= nelts <= SIZE * SIZE:
        raise ValueError(f"nelts must be between 0 and {SIZE * SIZE}, got {nelts}")

    rng = rng if rng is not None else np.random.default_rng()
    g = generate_complete(rng)

    filled = np.argwhere(g.values != 0)
    for idx in rng.permutation(len(filled)):
        if g.filled_count() <= nelts:
            break
        r, c = (int(v) for v in filled[idx])
        g.update_value(r, c, 0)
        g.set_count(r, c)

    return g
