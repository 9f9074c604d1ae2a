"""
Sudoku Solver - Main Application Module
"""

import argparse
import os
import sys

import numpy as np

from .board_io import GridFormatError, format_board, print_grid, read_grid
from .generator import generate
from .solver import solution_is_unique, solve_puzzle
from .validator import find_violations


class SudokuSolver:
    """
    Main class for the Sudoku Solver application.

    This class wires the text reader, the validator, the solver and the
    generator together. Diagnostics go to stderr so that stdout only ever
    carries grid text.
    """

    def __init__(self, max_steps=200000, verbose=True, seed=None):
        """
        Initialize the Sudoku Solver.

        Args:
            max_steps (int): Assignment limit for a single solve (default: 200000)
            verbose (bool): Whether to print progress to stderr
            seed (int): Seed for the random tie-breaking (default: unseeded)
        """
        self.max_steps = max_steps
        self.verbose = verbose
        self.rng = np.random.default_rng(seed)

    def _log(self, message=""):
        if self.verbose:
            print(message, file=sys.stderr)

    def _read(self, stream):
        grid = read_grid(stream if stream is not None else sys.stdin)
        self._log("Input puzzle:")
        self._log(format_board(grid))
        self._log(f"      Givens: {grid.filled_count()}")
        return grid

    def process_puzzle(self, stream=None, out=None):
        """
        Read a puzzle, solve it and print the solution.

        Pipeline steps:
        1. Read and echo the grid
        2. Check the givens for conflicts
        3. Solve
        4. Report uniqueness and print the solution to out

        Args:
            stream: Text stream holding the puzzle
            out: Text stream receiving the solved grid

        Returns:
            dict: 'puzzle', 'solution' (None if unsolved), 'unique', 'message'
        """
        self._log("\n[1/3] Reading puzzle...")
        grid = self._read(stream)

        self._log("\n[2/3] Checking givens...")
        violations = find_violations(grid)
        if violations:
            self._log(f"      ✗ {len(violations)} conflict(s) among the givens")
            for violation in violations:
                self._log(f"        - {violation}")
        else:
            self._log("      ✓ The sudoku puzzle is correct!")

        self._log("\n[3/3] Solving...")
        solution, message = solve_puzzle(grid, max_steps=self.max_steps, rng=self.rng)
        if solution is None:
            self._log(f"      ✗ Could not solve: {message}")
            return {'puzzle': grid, 'solution': None, 'unique': False, 'message': message}

        unique = solution_is_unique(solution)
        self._log(f"      ✓ Solved puzzle ({message}):")
        self._log(format_board(solution))
        if unique:
            self._log("      Sudoku has unique solution!")
        else:
            self._log("      Sudoku has at least one solution!")

        print_grid(out if out is not None else sys.stdout, solution)
        return {'puzzle': grid, 'solution': solution, 'unique': unique, 'message': message}

    def check_puzzle(self, stream=None):
        """
        Read a puzzle and report every row, column and block conflict.

        Returns:
            dict: 'puzzle', 'correct', 'violations'
        """
        grid = self._read(stream)
        violations = find_violations(grid)
        for violation in violations:
            self._log(str(violation))
        if violations:
            self._log(f"\n✗ Found {len(violations)} conflict(s)")
        else:
            self._log("\n✓ The sudoku puzzle is correct!")
        return {'puzzle': grid, 'correct': not violations, 'violations': violations}

    def generate_puzzle(self, nelts, out=None):
        """
        Generate a puzzle with nelts filled cells and print it to out.

        Returns:
            Grid: the generated puzzle
        """
        self._log(f"Generating puzzle with {nelts} filled cells...")
        grid = generate(nelts, rng=self.rng)
        self._log(format_board(grid))
        print_grid(out if out is not None else sys.stdout, grid)
        return grid


def main(argv=None):
    """
    Main entry point for the Sudoku Solver application.

    Handles command-line arguments and dispatches to solve, check or generate.
    """
    parser = argparse.ArgumentParser(
        description='Sudoku Solver - solve, check or generate 9x9 puzzles',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Solve a puzzle read from stdin:
    python -m sudoku < puzzle.txt

  Check a puzzle for row/column/block conflicts:
    python -m sudoku -c --input puzzle.txt

  Generate a puzzle with 30 filled cells:
    python -m sudoku -g 30 --seed 7
        """
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument('--check', '-c', action='store_true',
                      help='Only check the puzzle for conflicts')
    mode.add_argument('--generate', '-g', type=int, metavar='NELTS',
                      help='Generate a puzzle with NELTS filled cells (0-81)')
    parser.add_argument('--input', '-i', default=None,
                        help='Read the puzzle from this file (default: stdin)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the random number generator')
    parser.add_argument('--max-steps', type=int, default=200000,
                        help='Assignment limit for the search (default: 200000)')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Do not print diagnostics to stderr')

    args = parser.parse_args(argv)

    if args.generate is not None and not 0 <= args.generate <= 81:
        parser.error('--generate must be between 0 and 81')

    if args.input is not None and not os.path.exists(args.input):
        print(f"Error: Puzzle file not found: {args.input}", file=sys.stderr)
        sys.exit(1)

    solver = SudokuSolver(
        max_steps=args.max_steps,
        verbose=not args.quiet,
        seed=args.seed
    )

    try:
        if args.generate is not None:
            solver.generate_puzzle(args.generate)
            return

        if args.input is not None:
            with open(args.input, encoding='utf-8') as stream:
                result = _dispatch(solver, args, stream)
        else:
            result = _dispatch(solver, args, sys.stdin)

    except GridFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"\nError during processing: {str(e)}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)

    if args.check and not result['correct']:
        sys.exit(1)
    if not args.check and result['solution'] is None:
        sys.exit(1)


def _dispatch(solver, args, stream):
    if args.check:
        return solver.check_puzzle(stream)
    return solver.process_puzzle(stream)


if __name__ == '__main__':
    main()
