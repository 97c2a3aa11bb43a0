"""In-memory maze grid.

The grid is a rectangle of single characters addressed by 0-based
``(row, col)`` coordinates. Bounds are always checked explicitly, so callers
never index outside the stored rows.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List, Tuple

if TYPE_CHECKING:
    from .schemas import MazeState

WALL = "#"
FLOOR = "."
PLAYER_TOKENS = "0123456789"
MAP_ALPHABET = frozenset(WALL + FLOOR + PLAYER_TOKENS)

DEFAULT_MAX_DIM = 100


@dataclass
class MazeGrid:
    """Rectangular grid of map characters."""

    rows: int
    cols: int
    cells: List[List[str]] = field(default_factory=list)

    @classmethod
    def from_lines(cls, lines: List[str]) -> MazeGrid:
        """Build a grid from already-validated row strings."""
        cells = [list(line) for line in lines]
        cols = len(cells[0]) if cells else 0
        return cls(rows=len(cells), cols=cols, cells=cells)

    @classmethod
    def from_state(cls, state: MazeState) -> MazeGrid:
        return cls.from_lines(state.rows)

    def to_state(self) -> MazeState:
        """Snapshot the grid as a validated, serializable ``MazeState``."""
        from .schemas import MazeState

        return MazeState(rows=self.lines(), max_dim=max(self.rows, self.cols, DEFAULT_MAX_DIM))

    def restore(self, state: MazeState) -> None:
        """Overwrite every cell from a snapshot of the same grid."""
        self.cells = [list(line) for line in state.rows]
        self.rows = len(self.cells)
        self.cols = len(self.cells[0]) if self.cells else 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> str:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid")
        return self.cells[row][col]

    def set(self, row: int, col: int, char: str) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid")
        if char not in MAP_ALPHABET or len(char) != 1:
            raise ValueError(f"Invalid map character {char!r}")
        self.cells[row][col] = char

    def is_open(self, row: int, col: int) -> bool:
        """Open cells are floor or player tokens; walls and off-grid are not."""
        if not self.in_bounds(row, col):
            return False
        char = self.cells[row][col]
        return char == FLOOR or char in PLAYER_TOKENS

    def iter_cells(self) -> Iterator[Tuple[int, int, str]]:
        """Yield ``(row, col, char)`` in row-major order."""
        for r, row in enumerate(self.cells):
            for c, char in enumerate(row):
                yield r, c, char

    def count(self, char: str) -> int:
        return sum(row.count(char) for row in self.cells)

    def lines(self) -> List[str]:
        return ["".join(row) for row in self.cells]
