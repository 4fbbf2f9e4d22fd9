"""Main solver module for Queens puzzles."""

import json
import sys
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from time import time
from typing import TextIO

from queens.board import Board
from queens.puzzle_config import PuzzleConfig
from queens.solver.config import SolverConfig
from queens.solver.config import config as solver_config
from queens.solver.search import SearchContext
from queens.solver.utils import TIMESTAMP_FMT, int_comma, time_str, validate_solution


def _as_puzzle(puzzle: PuzzleConfig | Mapping) -> PuzzleConfig:
    if isinstance(puzzle, PuzzleConfig):
        return puzzle
    return PuzzleConfig.from_dict(puzzle)


def solve(
    puzzle: PuzzleConfig | Mapping, *, settings: SolverConfig | None = None
) -> list[int]:
    """Find one valid placement for the puzzle.

    Args:
        puzzle: A PuzzleConfig, or a mapping with keys `rows`, `cols`, `colors` and
            `idxToColor`.
        settings: Solver settings.  Defaults to the environment-derived configuration.

    Returns:
        The marked cell indices (row * cols + col) in the order they were chosen, or an
        empty list if the puzzle has no solution.

    Raises:
        ValueError: If the puzzle is malformed.
    """
    return SearchContext(_as_puzzle(puzzle), settings=settings).solve()


def solve_json(game_json: str) -> str:
    """Solve a puzzle given as a JSON game object; return the solution as a JSON array."""
    return json.dumps(solve(json.loads(game_json)))


def solve_one(puzzle: PuzzleConfig, *, logf: TextIO) -> list[int]:
    """Solve a puzzle, writing progress and the result to `logf`.

    Args:
        puzzle (PuzzleConfig): The puzzle to solve.
        logf: File object to log the solving process.
    """
    board = Board(puzzle)
    print(f"Selected puzzle: {puzzle.name}", file=logf, flush=True)
    print(f"Dimensions: {puzzle.rows}x{puzzle.cols}", file=logf, flush=True)
    print(f"Regions: {puzzle.n_colors}", file=logf, flush=True)
    print("Initial grid:", file=logf, flush=True)
    print("", file=logf, flush=True)
    print(board.render(), file=logf, flush=True)
    print("", file=logf, flush=True)

    context = SearchContext(puzzle, logf=logf)
    start_time_str = datetime.fromtimestamp(time()).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)

    solution = context.solve()
    stats = context.stats

    if solution:
        if not validate_solution(puzzle, solution):
            raise RuntimeError(f"Solver returned an invalid placement: {solution}")
        print("Solution found!", file=logf, flush=True)
        print(board.render(solution), file=logf, flush=True)
        print(f"Cells: {solution}", file=logf, flush=True)
    else:
        print("No solution found.", file=logf, flush=True)

    print(f"Nodes visited: {int_comma(stats.nodes_visited)}", file=logf, flush=True)
    print(f"Forward-check prunes: {int_comma(stats.forward_check_prunes)}", file=logf, flush=True)
    print(
        f"No-goods recorded: {int_comma(stats.nogoods_recorded)}, "
        f"hits: {int_comma(stats.nogood_hits)}",
        file=logf,
        flush=True,
    )
    print(f"Time taken: {time_str(time() - stats.start_time)}", file=logf, flush=True)
    return solution


def run(puzzle: PuzzleConfig) -> list[int]:
    """Run the solver on the given puzzle, logging to a file under the configured log dir.

    Args:
        puzzle (PuzzleConfig): The puzzle to solve.
    """
    print(f"puzzle: {puzzle}")

    logfile = Path(solver_config.log_dir) / f"{puzzle.name}-{puzzle.rows}x{puzzle.cols}.log"
    print(f"Log file: {logfile}")

    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            solution = solve_one(puzzle, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)

    if solution:
        print("Solution found:")
        Board(puzzle).print(solution)
    else:
        print("No solution found.")
    print()
    return solution
