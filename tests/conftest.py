import pytest

from queens.puzzle_config import PuzzleConfig
from queens.solver.config import SolverConfig

UNIQUE_5X5 = """
a e e e e
e e c e e
e e e e d
e f e e e
e e e e e
"""
"""Regions a, c, d and f each own one cell, which forces the placement."""

UNIQUE_5X5_SOLUTION = [0, 7, 14, 16, 23]

OVERLAPPING_BLOCK = """
a a c c
b b c c
c c c c
d d d d
"""
"""Regions a and b both live in the top-left 2x2 block, so they cannot both be placed."""


@pytest.fixture
def unique_puzzle() -> PuzzleConfig:
    return PuzzleConfig.from_layout(UNIQUE_5X5, 5, 5, name="unique")


@pytest.fixture
def blocked_puzzle() -> PuzzleConfig:
    return PuzzleConfig.from_layout(OVERLAPPING_BLOCK, 4, 4, name="blocked")


@pytest.fixture
def no_nogoods() -> SolverConfig:
    return SolverConfig(use_nogoods=False)


@pytest.fixture
def unique_solution() -> list[int]:
    return list(UNIQUE_5X5_SOLUTION)
