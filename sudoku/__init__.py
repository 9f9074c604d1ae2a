"""
Sudoku Solver - Constraint Propagation Engine

This package contains modules for:
- Grid state (values, candidate sets and cached candidate counts)
- Candidate initialization and peer elimination
- Randomized backtracking search with a minimum-remaining-candidates heuristic
- Row/column/block validation
- Puzzle generation
- Reading and printing the plain-text grid format
"""

from .board_io import GridFormatError, InvalidCharacterError, WrongCountError, format_grid, parse_grid, print_grid, read_grid
from .generator import generate
from .grid import Grid
from .solver import SearchLimitError, UnsolvableError, solution_is_unique, solve, solve_puzzle
from .validator import Violation, find_violations, is_correct

__version__ = "1.0.0"
__author__ = "Sudoku Solver Project Team"

__all__ = [
    "Grid",
    "Violation",
    "find_violations",
    "is_correct",
    "solve",
    "solve_puzzle",
    "solution_is_unique",
    "generate",
    "read_grid",
    "parse_grid",
    "print_grid",
    "format_grid",
    "GridFormatError",
    "InvalidCharacterError",
    "WrongCountError",
    "UnsolvableError",
    "SearchLimitError",
]
