from queens.board import Board
from queens.puzzle_config import PuzzleConfig
from queens.solver.adjacency import AdjacencyTable
from queens.solver.candidates import get_candidates
from queens.solver.tracker import AssignmentTracker


def _scan(puzzle: PuzzleConfig, **kwargs):
    used = AssignmentTracker(puzzle.rows, puzzle.cols, puzzle.n_colors)
    adjacency = AdjacencyTable(puzzle.rows, puzzle.cols)
    return get_candidates(Board(puzzle), used, adjacency, **kwargs), used, adjacency


def test_most_constrained_cell_comes_first():
    puzzle = PuzzleConfig.from_layout("bbb bab ccc", 3, 3)

    candidates, _, _ = _scan(puzzle)

    # The centre is the only cell of its region; all other cells tie in row-major order.
    assert candidates.cells == [4, 0, 1, 2, 3, 5, 6, 7, 8]
    assert not candidates.forward_check_failed


def test_row_major_order_without_ordering():
    puzzle = PuzzleConfig.from_layout("bbb bab ccc", 3, 3)

    candidates, _, _ = _scan(puzzle, mrv_ordering=False)

    assert candidates.cells == list(range(9))


def test_used_and_blocked_cells_are_excluded():
    puzzle = PuzzleConfig.from_layout("aaaa bbbb cccc dddd", 4, 4)
    board = Board(puzzle)
    used = AssignmentTracker(4, 4, 4)
    adjacency = AdjacencyTable(4, 4)

    # Marker at (0, 0): row 0, column 0 and region a are taken, (1, 1) is blocked.
    used.set(0, 0, 0, True)
    adjacency.increment(0)

    candidates = get_candidates(board, used, adjacency, mrv_ordering=False)

    assert candidates.cells == [6, 7, 9, 10, 11, 13, 14, 15]


def test_empty_region_fails_forward_check():
    puzzle = PuzzleConfig(rows=3, cols=3, colors=[0, 1, 2], idx_to_color=[0] * 6 + [1] * 3)

    candidates, _, _ = _scan(puzzle)
    assert candidates.cells == []
    assert candidates.forward_check_failed

    unchecked, _, _ = _scan(puzzle, forward_check=False)
    assert len(unchecked.cells) == 9
    assert not unchecked.forward_check_failed


def test_starved_row_fails_forward_check():
    puzzle = PuzzleConfig.from_layout("bbb bab ccc", 3, 3)
    board = Board(puzzle)
    used = AssignmentTracker(3, 3, 3)
    adjacency = AdjacencyTable(3, 3)

    # A marker in the centre blocks every remaining cell of rows 0 and 2.
    used.set(1, 1, board[4], True)
    adjacency.increment(4)

    candidates = get_candidates(board, used, adjacency)
    assert candidates.cells == []
    assert candidates.forward_check_failed
