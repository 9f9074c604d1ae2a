#!/usr/bin/env python3
"""
Solve every Sudoku puzzle file in a directory and print a summary.
"""

import sys
import os
import glob
import io

# Add the repository root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sudoku.board_io import GridFormatError
from sudoku.sudoku_solver import SudokuSolver


def process_directory(directory=".", output_dir="output", solver=None):
    """
    Solve all .txt puzzles in directory, writing each solution to output_dir.

    Returns:
        dict: lists of file names under 'solved', 'unsolved' and 'error'
    """
    puzzle_files = sorted(glob.glob(os.path.join(directory, "*.txt")))

    results = {
        'solved': [],
        'unsolved': [],
        'error': []
    }

    if not puzzle_files:
        print(f"No .txt files found in {directory}!")
        return results

    print(f"Found {len(puzzle_files)} puzzles to process")
    print("=" * 60)

    if solver is None:
        solver = SudokuSolver(verbose=False)
    os.makedirs(output_dir, exist_ok=True)

    for i, puzzle_path in enumerate(puzzle_files, 1):
        print(f"\n[{i}/{len(puzzle_files)}] Processing {puzzle_path}...")

        try:
            out = io.StringIO()
            with open(puzzle_path, encoding="utf-8") as stream:
                result = solver.process_puzzle(stream, out)
            if result['solution'] is None:
                print(f"      ✗ {result['message']}")
                results['unsolved'].append(puzzle_path)
                continue

            base_name = os.path.splitext(os.path.basename(puzzle_path))[0]
            with open(os.path.join(output_dir, f"{base_name}_solved.txt"), "w", encoding="utf-8") as f:
                f.write(out.getvalue())
            kind = "unique" if result['unique'] else "guessed"
            print(f"      ✓ {result['message']} ({kind})")
            results['solved'].append(puzzle_path)
        except GridFormatError as e:
            print(f"Error processing {puzzle_path}: {e}")
            results['error'].append(puzzle_path)

    # Print summary
    total = len(puzzle_files)
    print("\n" + "=" * 60)
    print("SUMMARY")
    print("=" * 60)
    print(f"✅ Solved:    {len(results['solved'])}/{total}")
    print(f"❌ Unsolved:  {len(results['unsolved'])}/{total}")
    print(f"⚠️  Errors:    {len(results['error'])}/{total}")

    if results['solved']:
        print(f"\nSolved puzzles: {', '.join(results['solved'])}")

    print(f"\nSolutions saved to: {output_dir}/")
    return results


def main():
    """Solve all .txt puzzles in the directory given on the command line (default: current)."""
    directory = sys.argv[1] if len(sys.argv) > 1 else "."
    process_directory(directory)


if __name__ == '__main__':
    main()
