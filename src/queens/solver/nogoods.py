"""Trie-based cache of partial assignments known to be dead ends."""

from collections.abc import Iterable


class TrieNode:
    """A node of the no-goods trie, with children keyed by cell index."""

    __slots__ = ("children", "is_leaf")

    def __init__(self) -> None:
        self.children: dict[int, TrieNode] = {}
        self.is_leaf: bool = False


class NoGoods:
    """Stores sets of cell indices that cannot lead to a valid solution.

    Each recorded set is stored as a root-to-node path of its indices in ascending order.
    A lookup walks the sorted query from the root and reports a hit as soon as it reaches
    the end of a recorded path.  This only recognizes a recorded set when it equals the
    smallest elements of the query; a recorded set interleaved with smaller query elements
    is missed.  A hit is always genuine, so a miss only costs extra search.
    """

    def __init__(self) -> None:
        self.root = TrieNode()
        self.size = 0
        """Number of distinct sets recorded."""

    def insert(self, cells: Iterable[int]) -> None:
        """Record a dead partial assignment."""
        current = self.root
        for idx in sorted(cells):
            child = current.children.get(idx)
            if child is None:
                child = current.children[idx] = TrieNode()
            current = child

        if not current.is_leaf:
            current.is_leaf = True
            self.size += 1

    def search(self, cells: Iterable[int]) -> bool:
        """Whether `cells` starts with a recorded dead partial assignment."""
        current = self.root
        for idx in sorted(cells):
            current = current.children.get(idx)
            if current is None:
                return False
            if current.is_leaf:
                return True
        return False
