"""Loader for puzzle files."""

import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

import numpy as np


@dataclass
class PuzzleConfig:
    """A puzzle configuration."""

    rows: int
    """Number of rows in the grid."""

    cols: int
    """Number of columns in the grid."""

    colors: Sequence[int]
    """The region labels.  Only its length (the region count) matters to the solver."""

    idx_to_color: Sequence[int]
    """The region id of each cell, in row-major order (cell index = row * cols + col).

    Region ids must lie in `[0, len(colors))`.
    """

    name: str = field(default="puzzle", compare=False)
    """A human-readable name, used for log file names."""

    def __post_init__(self) -> None:
        """Validate the puzzle."""
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.rows}x{self.cols}.")

        if len(self.idx_to_color) != self.rows * self.cols:
            raise ValueError(
                f"Region table length {len(self.idx_to_color)} does not match "
                f"dimensions {self.rows}x{self.cols}."
            )

        n_colors = len(self.colors)
        bad = [(idx, c) for idx, c in enumerate(self.idx_to_color) if not 0 <= c < n_colors]
        if bad:
            idx, c = bad[0]
            raise ValueError(
                f"Region id {c} at cell {idx} is out of range [0, {n_colors}) "
                f"({len(bad)} bad cells)."
            )

    def __str__(self) -> str:
        """Return a string representation of the PuzzleConfig."""
        return f"{self.name} ({self.rows}x{self.cols}, {self.n_colors} regions)"

    @property
    def n_colors(self) -> int:
        """Number of regions."""
        return len(self.colors)

    def grid(self) -> np.ndarray:
        """Return the region table as a (rows, cols) array."""
        return np.array(self.idx_to_color, dtype=np.int64).reshape(self.rows, self.cols)

    def to_dict(self) -> dict:
        """Return a dictionary representation, using the game JSON keys."""
        return {
            "rows": self.rows,
            "cols": self.cols,
            "colors": list(self.colors),
            "idxToColor": list(self.idx_to_color),
        }

    @classmethod
    def from_dict(cls, data: Mapping, *, name: str = "puzzle") -> "PuzzleConfig":
        """Create a PuzzleConfig from a game JSON object."""
        try:
            rows, cols = data["rows"], data["cols"]
            colors, idx_to_color = data["colors"], data["idxToColor"]
        except KeyError as e:
            raise ValueError(f"Puzzle is missing field {e}.") from None

        return cls(
            rows=int(rows),
            cols=int(cols),
            colors=list(colors),
            idx_to_color=[int(c) for c in idx_to_color],
            name=data.get("name", name),
        )

    @classmethod
    def from_layout(
        cls, layout: str, rows: int, cols: int, *, name: str = "puzzle"
    ) -> "PuzzleConfig":
        """Create a PuzzleConfig from a string of region symbols, one per cell.

        Symbols are numbered in order of first appearance.
        """
        layout = clean(layout)
        symbols: dict[str, int] = {}
        idx_to_color = [symbols.setdefault(ch, len(symbols)) for ch in layout]
        return cls(
            rows=rows,
            cols=cols,
            colors=list(range(len(symbols))),
            idx_to_color=idx_to_color,
            name=name,
        )


def clean(layout: str) -> str:
    """Clean a layout string by removing all whitespace."""
    return "".join(layout.split())


def _load_json(path: Path) -> list[PuzzleConfig]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, Mapping):
        data = [data]
    return [
        PuzzleConfig.from_dict(game, name=f"{path.stem}-{i}" if len(data) > 1 else path.stem)
        for i, game in enumerate(data)
    ]


def _load_layouts(path: Path) -> list[PuzzleConfig]:
    configs = []
    with open(path, "r", encoding="utf-8") as f:
        # Get dimensions from first line
        first_line = f.readline().strip()
        try:
            rows, cols = map(int, first_line.split())
        except ValueError:
            # Covers both incorrect number of values and non-integer values
            raise ValueError(f"Invalid dimensions line: '{first_line}'") from None

        # Read the board lines, each board is separated by one or more blank lines
        while True:
            board_lines = []
            while True:
                line = f.readline()
                if not line:
                    break
                if line.strip() == "":
                    if board_lines:
                        break
                    continue
                board_lines.append(line.strip())

            if not board_lines:
                break  # No more boards to read

            configs.append(
                PuzzleConfig.from_layout(
                    "\n".join(board_lines), rows, cols, name=f"{path.stem}-{len(configs)}"
                )
            )

    return configs


def load_configs(configs_path: PathLike | str) -> list[PuzzleConfig]:
    """Load puzzles from the given path.

    `.json` files hold a single game object or a list of them, with keys `rows`, `cols`,
    `colors` and `idxToColor`.  Any other file is read as a layout file: a `rows cols`
    line followed by one or more boards of region symbols, separated by blank lines.

    Args:
        configs_path (PathLike): Path to the puzzle file.
    """
    path = Path(configs_path).resolve()
    if not path.is_file():
        raise FileNotFoundError(f"Puzzle file not found: {path}")

    if path.suffix.lower() == ".json":
        return _load_json(path)
    return _load_layouts(path)
