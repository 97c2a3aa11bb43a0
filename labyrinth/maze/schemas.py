"""Pydantic schemas for maze maps.

These models mirror the lightweight ``MazeGrid`` dataclass in ``grid.py`` but
enforce the map invariants on construction, so a snapshot built from any
source (a map file, JSON, a test fixture) is checked the same way.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field, model_validator

from .grid import DEFAULT_MAX_DIM, MAP_ALPHABET


class MazeState(BaseModel):
    """Validated row-string snapshot of a maze grid."""

    rows: List[str] = Field(
        default_factory=list,
        description="Map rows in storage order, one string per row",
    )
    max_dim: int = Field(
        DEFAULT_MAX_DIM,
        ge=1,
        description="Upper bound for both row count and row width",
    )

    @model_validator(mode="after")
    def _check_shape(self) -> MazeState:
        if not self.rows:
            raise ValueError("map has no rows")
        if len(self.rows) > self.max_dim:
            raise ValueError(f"map has {len(self.rows)} rows, limit is {self.max_dim}")

        cols = len(self.rows[0])
        if not 1 <= cols <= self.max_dim:
            raise ValueError(f"row width {cols} outside 1..{self.max_dim}")

        for index, row in enumerate(self.rows, start=1):
            if len(row) != cols:
                raise ValueError(f"row {index} has width {len(row)}, expected {cols}")
            bad = next((char for char in row if char not in MAP_ALPHABET), None)
            if bad is not None:
                raise ValueError(f"row {index} contains invalid character {bad!r}")
        return self

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def col_count(self) -> int:
        return len(self.rows[0])


class MoveOutcome(BaseModel):
    """Result of one successful move or placement."""

    player: int = Field(..., ge=0, le=9)
    direction: str
    origin: Optional[Tuple[int, int]] = Field(
        None, description="Previous (row, col); None when the player was placed",
    )
    target: Tuple[int, int] = Field(..., description="Cell (row, col) now holding the player")
    placed: bool = False
