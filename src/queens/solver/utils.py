"""Utility functions for the Queens solver."""

from collections.abc import Sequence
from itertools import combinations

from queens.board import Board
from queens.puzzle_config import PuzzleConfig

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"


def validate_solution(puzzle: PuzzleConfig, cells: Sequence[int]) -> bool:
    """Validate that `cells` solves the puzzle.

    There must be exactly one cell per row, per column and per region, and no two cells
    may touch diagonally.
    """
    n = len(cells)
    if n != puzzle.rows or n != puzzle.cols or n != puzzle.n_colors:
        return False
    if any(not 0 <= idx < puzzle.rows * puzzle.cols for idx in cells):
        return False

    positions = [divmod(idx, puzzle.cols) for idx in cells]
    if len({row for row, _ in positions}) != n or len({col for _, col in positions}) != n:
        return False
    marked = set(cells)
    if any(len(marked.intersection(region)) != 1 for region in Board(puzzle).region_cells()):
        return False

    return not any(
        abs(r1 - r2) == 1 and abs(c1 - c2) == 1
        for (r1, c1), (r2, c2) in combinations(positions, 2)
    )
