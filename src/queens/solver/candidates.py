"""Generation and ordering of legal next cells."""

from typing import NamedTuple

from sortedcontainers import SortedKeyList

from queens.board import Board
from queens.solver.adjacency import AdjacencyTable
from queens.solver.tracker import AssignmentTracker


class Candidates(NamedTuple):
    """Result of a candidate scan."""

    cells: list[int]
    """Legal cell indices, most constrained first.  Empty if the node is a dead end."""

    forward_check_failed: bool
    """Whether the scan was discarded because an open row, column or region had no spots."""


class RemainingSpots(NamedTuple):
    """Number of legal cells left for each row, column and region."""

    rows: list[int]
    cols: list[int]
    colors: list[int]


def forward_check_failure(used: AssignmentTracker, spots: RemainingSpots) -> bool:
    """Whether some unused row, column or region has no legal cell left."""
    if any(not used.rows[row] and n == 0 for row, n in enumerate(spots.rows)):
        return True

    if any(not used.cols[col] and n == 0 for col, n in enumerate(spots.cols)):
        return True

    if any(not used.colors[color] and n == 0 for color, n in enumerate(spots.colors)):
        return True

    return False


def get_candidates(
    board: Board,
    used: AssignmentTracker,
    adjacency: AdjacencyTable,
    *,
    forward_check: bool = True,
    mrv_ordering: bool = True,
) -> Candidates:
    """Scan the board for cells that can take the next marker.

    A cell is legal if its row, column and region are all unused and no committed cell
    touches it diagonally.  While scanning, count the legal cells available to each row,
    column and region.

    Args:
        board: The region table.
        used: Rows, columns and regions already holding a marker.
        adjacency: Diagonal interference counts for the current assignment.
        forward_check: Return no candidates if an unused row, column or region has no
            legal cell left.
        mrv_ordering: Sort candidates by the smallest spot count among their row, column
            and region.  Ties keep row-major order.  If False, candidates are returned in
            row-major order.

    Returns:
        A Candidates tuple.
    """
    spots = RemainingSpots([0] * board.n_rows, [0] * board.n_cols, [0] * board.n_colors)
    cells: list[int] = []

    idx = 0
    for row in range(board.n_rows):
        for col in range(board.n_cols):
            color = board[idx]
            if not used.is_used(row, col, color) and not adjacency.is_blocked(idx):
                spots.rows[row] += 1
                spots.cols[col] += 1
                spots.colors[color] += 1
                cells.append(idx)
            idx += 1

    if forward_check and forward_check_failure(used, spots):
        return Candidates([], True)

    if not mrv_ordering:
        return Candidates(cells, False)

    def _constrainedness(cell: int) -> int:
        row, col = board.get_2d_idx(cell)
        return min(spots.rows[row], spots.cols[col], spots.colors[board[cell]])

    # Initial bulk load sorts stably, so ties stay in row-major order.
    return Candidates(list(SortedKeyList(cells, key=_constrainedness)), False)
