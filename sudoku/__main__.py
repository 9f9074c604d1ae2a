"""
Entry point for running the sudoku package as a module.

Usage:
    python -m sudoku < puzzle.txt
    python -m sudoku -c < puzzle.txt
    python -m sudoku -g 30
"""

from .sudoku_solver import main

if __name__ == '__main__':
    main()
