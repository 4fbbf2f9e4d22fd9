"""Classes and functions for representing the game board."""

from array import array
from collections.abc import Iterable

import numpy as np

from queens.puzzle_config import PuzzleConfig

REGION_SYMBOLS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPRSTUVWXYZ0123456789!$%&*+=?@^~"
"""Symbols used to draw regions.  'Q' is reserved for markers."""


class Board:
    """Store the region table of a puzzle as a 1D array.

    Contains support for both 1D and 2D indexing.
    """

    def __init__(self, puzzle: PuzzleConfig) -> None:
        self.data = array("I", puzzle.idx_to_color)
        self.grid = puzzle.grid()
        """Region ids as a (rows, cols) array."""

        self.n_rows = puzzle.rows
        self.n_cols = puzzle.cols
        self.n_colors = puzzle.n_colors

    def __getitem__(self, idx: int | tuple[int, int]) -> int:
        """Get the region id of a cell by 1D (row-major order) or 2D index."""
        if isinstance(idx, int):
            return self.data[idx]
        if isinstance(idx, tuple) and len(idx) == 2:
            row, col = idx
            return self.data[row * self.n_cols + col]
        raise IndexError("Invalid index type for Board.")

    def __len__(self) -> int:
        return len(self.data)

    def get_2d_idx(self, one_d_idx: int) -> tuple[int, int]:
        """Convert a 1D index to a (row, col) tuple."""
        return divmod(one_d_idx, self.n_cols)

    def get_1d_idx(self, row: int, col: int) -> int:
        """Convert a (row, col) tuple to a 1D index."""
        return row * self.n_cols + col

    def region_cells(self) -> list[list[int]]:
        """List the cell indices of each region, in row-major order.

        Regions that own no cells get an empty list.
        """
        cells: list[list[int]] = [[] for _ in range(self.n_colors)]
        for idx, color in enumerate(self.data):
            cells[color].append(idx)
        return cells

    def render(self, solution: Iterable[int] = ()) -> str:
        """Draw the board, one line per row, with markers shown as 'Q'."""
        marked = set(solution)
        lines = []
        for (row, col), color in np.ndenumerate(self.grid):
            if col == 0:
                lines.append([])
            if self.get_1d_idx(row, col) in marked:
                lines[-1].append("Q")
            else:
                lines[-1].append(REGION_SYMBOLS[color % len(REGION_SYMBOLS)])
        return "\n".join(" ".join(line) for line in lines)

    def print(self, solution: Iterable[int] = ()) -> None:
        """Print the board to the console."""
        print(self.render(solution))
