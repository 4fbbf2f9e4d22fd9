"""Bit-set tracking of the rows, columns and regions holding a marker."""

from bitarray import bitarray
from bitarray.util import zeros

from queens.solver.config import config as solver_config


class AssignmentTracker:
    """Three fixed-width bit sets: rows used, columns used and regions used."""

    def __init__(
        self, n_rows: int, n_cols: int, n_colors: int, *, max_bits: int | None = None
    ) -> None:
        if max_bits is None:
            max_bits = solver_config.max_bits
        for label, size in (("rows", n_rows), ("cols", n_cols), ("regions", n_colors)):
            if size > max_bits:
                raise ValueError(f"Too many {label} ({size}); the maximum is {max_bits}.")

        self.rows: bitarray = zeros(n_rows)
        self.cols: bitarray = zeros(n_cols)
        self.colors: bitarray = zeros(n_colors)

    def is_used(self, row: int, col: int, color: int) -> bool:
        """Whether any of the row, the column or the region already holds a marker."""
        return bool(self.rows[row] or self.cols[col] or self.colors[color])

    def set(self, row: int, col: int, color: int, value: bool) -> None:
        """Set or clear all three bits of a (row, col, region) triple."""
        self.rows[row] = value
        self.cols[col] = value
        self.colors[color] = value

    def is_solved(self) -> bool:
        """Whether every row, column and region holds a marker."""
        return self.rows.all() and self.cols.all() and self.colors.all()
