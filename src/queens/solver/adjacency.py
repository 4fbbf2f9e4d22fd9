"""Diagonal neighbor lookup with live interference counts."""

from array import array

DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class AdjacencyTable:
    """Pre-computed table of diagonally adjacent cells.

    `counts[idx]` is the number of committed cells touching `idx` at a corner.  A cell
    with a non-zero count cannot take a marker.
    """

    def __init__(self, n_rows: int, n_cols: int) -> None:
        self.neighbors: list[tuple[int, ...]] = []
        """For each cell, the (at most four) cells sharing one of its corners."""

        for row in range(n_rows):
            for col in range(n_cols):
                self.neighbors.append(
                    tuple(
                        (row + dr) * n_cols + (col + dc)
                        for dr, dc in DIAGONALS
                        if 0 <= row + dr < n_rows and 0 <= col + dc < n_cols
                    )
                )

        self.counts: array[int] = array("I", [0] * (n_rows * n_cols))

    def is_blocked(self, idx: int) -> bool:
        """Whether `idx` touches a committed cell diagonally."""
        return self.counts[idx] > 0

    def increment(self, idx: int) -> None:
        """Record that `idx` has been committed."""
        for i in self.neighbors[idx]:
            self.counts[i] += 1

    def decrement(self, idx: int) -> None:
        """Record that `idx` has been uncommitted."""
        for i in self.neighbors[idx]:
            self.counts[i] -= 1
