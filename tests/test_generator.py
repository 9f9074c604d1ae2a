import numpy as np
import pytest

from sudoku.generator import generate, generate_complete
from sudoku.solver import solve
from sudoku.validator import find_violations, is_correct


# ---------- Generator Tests ----------


def test_generate_complete_is_full_and_valid(rng):
    g = generate_complete(rng)

    assert g.filled_count() == 81
    assert find_violations(g) == []


def test_generate_81_returns_a_solved_grid(rng):
    g = generate(81, rng=rng)

    assert g.is_full()
    assert is_correct(g)


def test_generate_0_empties_the_grid():
    for seed in range(3):
        g = generate(0, rng=np.random.default_rng(seed))
        assert g.filled_count() == 0


@pytest.mark.parametrize("nelts", [1, 17, 30, 80])
def test_generate_keeps_exactly_nelts(nelts, rng):
    g = generate(nelts, rng=rng)

    assert g.filled_count() == nelts
    assert is_correct(g)


def test_removed_cells_get_a_full_count(rng):
    g = generate(40, rng=rng)

    for r, c in g.empty_cells():
        assert g.read_count(r, c) == 9
        assert g.candidates(r, c) == list(range(1, 10))
    assert np.array_equal(g.counts, g.choices.sum(axis=2))


def test_generated_puzzle_is_solvable(rng):
    puzzle = generate(25, rng=rng)
    solution = solve(puzzle, rng=rng)

    assert solution.is_full()
    assert is_correct(solution)
    kept = puzzle.values != 0
    assert np.array_equal(solution.values[kept], puzzle.values[kept])


def test_generate_is_reproducible_with_a_seed():
    a = generate(30, rng=np.random.default_rng(99))
    b = generate(30, rng=np.random.default_rng(99))
    assert a == b


@pytest.mark.parametrize("nelts", [-1, 82])
def test_generate_rejects_out_of_range(nelts):
    with pytest.raises(ValueError):
        generate(nelts)
