"""Queens Puzzle Solver.

Places one marker in every row, column and colored region of a grid so that no two
markers touch diagonally.  Uses backtracking with forward checking, a most-constrained-first
candidate order and a cache of dead partial assignments.
"""

from sys import argv, exit

from .puzzle_config import load_configs
from .solver import solver


def main() -> None:
    """Main entry point for the Queens solver."""
    # Expect a single argument: path to the puzzle file
    if len(argv) != 2:
        print("Usage: python -m queens <puzzles.json | layout.txt>")
        print("  .json: a game object or list with rows, cols, colors, idxToColor")
        print("  other: a 'rows cols' line, then boards of region symbols split by blank lines")
        exit(1)
    puzzle_path = argv[1]
    puzzles = load_configs(puzzle_path)

    for puzzle in puzzles:
        solver.run(puzzle)
