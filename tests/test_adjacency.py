import pytest

from queens.solver.adjacency import AdjacencyTable
from queens.solver.tracker import AssignmentTracker


def test_neighbors_are_clipped_to_grid():
    table = AdjacencyTable(3, 3)

    assert table.neighbors[0] == (4,)
    assert table.neighbors[2] == (4,)
    assert table.neighbors[4] == (0, 2, 6, 8)
    assert table.neighbors[7] == (3, 5)


def test_single_row_has_no_diagonals():
    table = AdjacencyTable(1, 4)

    assert all(n == () for n in table.neighbors)


def test_counts_follow_commits():
    table = AdjacencyTable(3, 3)

    table.increment(4)
    table.increment(8)
    assert [table.is_blocked(i) for i in range(9)] == [
        True, False, True,
        False, True, False,
        True, False, True,
    ]
    assert table.counts[4] == 1

    table.decrement(4)
    assert list(table.counts) == [0, 0, 0, 0, 1, 0, 0, 0, 0]
    table.decrement(8)
    assert not any(table.counts)


def test_tracker_sets_and_clears_triples():
    used = AssignmentTracker(3, 3, 3)

    assert not used.is_used(0, 0, 0)
    used.set(0, 1, 2, True)
    assert used.is_used(0, 2, 0)
    assert used.is_used(2, 1, 0)
    assert used.is_used(1, 0, 2)
    assert not used.is_used(1, 0, 1)

    used.set(0, 1, 2, False)
    assert not used.is_used(0, 1, 2)


def test_tracker_is_solved_only_when_every_bit_is_set():
    used = AssignmentTracker(2, 2, 2)
    used.set(0, 0, 0, True)
    assert not used.is_solved()

    used.set(1, 1, 1, True)
    assert used.is_solved()


def test_tracker_rejects_too_many_rows():
    with pytest.raises(ValueError, match="rows"):
        AssignmentTracker(65, 3, 3)


def test_tracker_rejects_too_many_regions_for_custom_width():
    with pytest.raises(ValueError, match="regions"):
        AssignmentTracker(4, 4, 9, max_bits=8)
