#!/usr/bin/env python3
"""
Convenience script to solve, check or generate Sudoku puzzles.

This script provides a simple interface to the Sudoku Solver pipeline.

Usage:
    python process_puzzle.py < puzzle.txt
    python process_puzzle.py --input path/to/puzzle.txt --check
    python process_puzzle.py -g 30
"""

import sys
import os

# Add the repository root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku.sudoku_solver import main

if __name__ == '__main__':
    main()
