"""Backtracking search for a single valid placement."""

from dataclasses import dataclass, field
from itertools import chain
from time import time
from typing import NamedTuple, TextIO

from queens.board import Board
from queens.puzzle_config import PuzzleConfig
from queens.solver.adjacency import AdjacencyTable
from queens.solver.candidates import get_candidates
from queens.solver.config import SolverConfig
from queens.solver.config import config as solver_config
from queens.solver.nogoods import NoGoods
from queens.solver.tracker import AssignmentTracker
from queens.solver.utils import int_comma, time_str


@dataclass
class SolverStats:
    """Statistics collected during solving."""

    nodes_visited: int = 0
    """Number of search nodes entered."""

    nogood_hits: int = 0
    """Number of candidates skipped because the no-goods cache recognized them."""

    nogoods_recorded: int = 0
    """Number of distinct dead partial assignments recorded."""

    forward_check_prunes: int = 0
    """Number of nodes rejected by the forward check."""

    max_depth_reached: int = 0
    """Maximum recursion depth reached during solving."""

    start_time: float = field(default_factory=time)
    """Timestamp when solving started."""


class _Move(NamedTuple):
    """A committed cell, with everything needed to uncommit it."""

    idx: int
    row: int
    col: int
    color: int


class SearchContext:
    """Mutable state of one solve call.

    Holds the board, the assignment bits, the interference counts, the no-goods cache and
    the partial solution.  Cells enter and leave the state only through `commit` and
    `uncommit`, which keep all of these in step.
    """

    def __init__(
        self,
        puzzle: PuzzleConfig,
        *,
        settings: SolverConfig | None = None,
        logf: TextIO | None = None,
    ) -> None:
        self.settings = settings if settings is not None else solver_config
        self.logf = logf

        self.used = AssignmentTracker(
            puzzle.rows, puzzle.cols, puzzle.n_colors, max_bits=self.settings.max_bits
        )
        self.board = Board(puzzle)
        self.adjacency = AdjacencyTable(puzzle.rows, puzzle.cols)
        self.nogoods = NoGoods()

        self.solution: list[int] = []
        """Committed cell indices, in the order they were chosen."""

        self.stats = SolverStats()

    def commit(self, idx: int) -> _Move:
        """Place a marker on cell `idx`."""
        row, col = self.board.get_2d_idx(idx)
        move = _Move(idx, row, col, self.board[idx])

        self.solution.append(idx)
        self.used.set(move.row, move.col, move.color, True)
        self.adjacency.increment(idx)
        return move

    def uncommit(self, move: _Move) -> None:
        """Remove the most recently committed marker."""
        if not self.solution or self.solution[-1] != move.idx:
            raise RuntimeError(f"Cell {move.idx} is not the most recently committed cell.")

        self.adjacency.decrement(move.idx)
        self.used.set(move.row, move.col, move.color, False)
        self.solution.pop()

    def solve(self) -> list[int]:
        """Search for a placement.

        Returns:
            The committed cell indices in the order chosen, or an empty list if the puzzle
            has no solution.
        """
        self.stats.start_time = time()
        if self._search(depth=0):
            return list(self.solution)
        return []

    def _report(self, depth: int) -> None:
        elapsed_time = time() - self.stats.start_time
        print(
            f"Checked {int_comma(self.stats.nodes_visited)} nodes "
            f"after {time_str(elapsed_time)}; max depth {self.stats.max_depth_reached}, "
            f"current depth {depth}; {int_comma(self.stats.nogoods_recorded)} no-goods.",
            file=self.logf,
            flush=True,
        )

    def _search(self, depth: int) -> bool:
        """Recursive helper for `solve()`.

        Returns True once the assignment is complete; the solution is then left committed.
        """
        self.stats.nodes_visited += 1
        self.stats.max_depth_reached = max(self.stats.max_depth_reached, depth)
        if self.logf is not None and self.stats.nodes_visited % self.settings.report_interval == 0:
            self._report(depth)

        if self.used.is_solved():
            return True

        candidates = get_candidates(
            self.board,
            self.used,
            self.adjacency,
            forward_check=self.settings.forward_check,
            mrv_ordering=self.settings.mrv_ordering,
        )
        if candidates.forward_check_failed:
            self.stats.forward_check_prunes += 1

        use_nogoods = self.settings.use_nogoods
        for idx in candidates.cells:
            if use_nogoods and self.nogoods.search(chain(self.solution, (idx,))):
                self.stats.nogood_hits += 1
                continue

            move = self.commit(idx)
            if self._search(depth + 1):
                return True
            self.uncommit(move)

        # Every extension of this assignment failed.
        if use_nogoods:
            self.nogoods.insert(self.solution)
            self.stats.nogoods_recorded = self.nogoods.size
        return False
