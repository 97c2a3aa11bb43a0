"""Connectivity, movement and rendering utilities for maze grids."""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

from ..errors import InvalidArguments, MoveFailed, MultipleEmptyAreas
from .grid import FLOOR, PLAYER_TOKENS, MazeGrid
from .schemas import MoveOutcome

Cell = Tuple[int, int]

# (row delta, col delta); row 0 is the first line of the map.
DIRECTIONS: Dict[str, Cell] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


def is_open_cell(char: str) -> bool:
    """Floor and player tokens are open; a player always stands on floor."""
    return char == FLOOR or (len(char) == 1 and char in PLAYER_TOKENS)


def flood_fill(grid: MazeGrid, start: Cell, visited: Set[Cell]) -> int:
    """Mark every open cell 4-connected to ``start`` as visited.

    Uses an explicit stack instead of recursion, so a fully open 100x100 map
    does not exhaust the interpreter's call stack. Returns the number of cells
    newly marked.
    """

    if start in visited or not grid.is_open(*start):
        return 0

    visited.add(start)
    stack: List[Cell] = [start]
    marked = 1

    while stack:
        r, c = stack.pop()
        for dr, dc in DIRECTIONS.values():
            nb = (r + dr, c + dc)
            # is_open() is False off-grid and on walls
            if nb in visited or not grid.is_open(*nb):
                continue
            visited.add(nb)
            marked += 1
            stack.append(nb)
    return marked


def count_open_regions(grid: MazeGrid, *, stop_after: Optional[int] = None) -> int:
    """Count connected regions of open cells.

    Cells are scanned in row-major order and every unvisited open cell seeds a
    new flood fill. With ``stop_after`` the scan ends as soon as that many
    regions have been found.
    """

    visited: Set[Cell] = set()
    regions = 0
    for r, c, char in grid.iter_cells():
        if (r, c) in visited or not is_open_cell(char):
            continue
        flood_fill(grid, (r, c), visited)
        regions += 1
        if stop_after is not None and regions >= stop_after:
            break
    return regions


def validate_connectivity(grid: MazeGrid) -> None:
    """Raise ``MultipleEmptyAreas`` unless open cells form at most one region.

    A map with no open cells at all counts as zero regions and passes.
    The grid is not modified.
    """

    regions = count_open_regions(grid, stop_after=2)
    if regions > 1:
        raise MultipleEmptyAreas()


def find_duplicate_players(grid: MazeGrid) -> Dict[str, List[Cell]]:
    """Return player digits that occupy more than one cell, with their positions."""

    seen: Dict[str, List[Cell]] = {}
    for r, c, char in grid.iter_cells():
        if char in PLAYER_TOKENS:
            seen.setdefault(char, []).append((r, c))
    return {digit: cells for digit, cells in seen.items() if len(cells) > 1}


def _token(player: int) -> str:
    return str(player)


def find_player(grid: MazeGrid, player: int) -> Optional[Cell]:
    """Return the first row-major cell holding ``player``, or None."""

    token = _token(player)
    for r, c, char in grid.iter_cells():
        if char == token:
            return (r, c)
    return None


def find_first_floor(grid: MazeGrid) -> Optional[Cell]:
    for r, c, char in grid.iter_cells():
        if char == FLOOR:
            return (r, c)
    return None


def place_player(grid: MazeGrid, player: int) -> Cell:
    """Put ``player`` on the first row-major floor cell."""

    target = find_first_floor(grid)
    if target is None:
        raise MoveFailed(f"No free cell to place player {player}.")
    grid.set(*target, _token(player))
    return target


def move_player(grid: MazeGrid, player: int, direction: str) -> MoveOutcome:
    """Move ``player`` one cell in ``direction``, or place it if absent.

    Checks, in order:
    1. ``direction`` is one of up/down/left/right
    2. The player is on the grid (otherwise it is placed and the move ends)
    3. The target cell is inside the grid
    4. The target cell is free floor (not a wall, not another player)

    The grid is changed only after every check passes.
    """

    delta = DIRECTIONS.get(direction)
    if delta is None:
        raise MoveFailed(f"Unknown direction {direction!r}.")

    origin = find_player(grid, player)
    if origin is None:
        target = place_player(grid, player)
        return MoveOutcome(player=player, direction=direction, target=target, placed=True)

    target = (origin[0] + delta[0], origin[1] + delta[1])
    if not grid.in_bounds(*target):
        raise MoveFailed(f"Target {target} is outside the map.")
    if grid.get(*target) != FLOOR:
        raise MoveFailed(f"Target {target} is not free floor.")

    grid.set(*origin, FLOOR)
    grid.set(*target, _token(player))
    return MoveOutcome(player=player, direction=direction, origin=origin, target=target)


def move_player_steps(
    grid: MazeGrid,
    player: int,
    direction: str,
    steps: int = 1,
) -> List[MoveOutcome]:
    """Apply ``steps`` single moves in the same direction, all or nothing.

    If any step fails the grid is restored to its state before the first step
    and the ``MoveFailed`` is re-raised.
    """

    if steps < 1:
        raise InvalidArguments(f"Step count must be at least 1 (got {steps}).")

    snapshot = grid.to_state()
    outcomes: List[MoveOutcome] = []
    try:
        for _ in range(steps):
            outcomes.append(move_player(grid, player, direction))
    except MoveFailed:
        grid.restore(snapshot)
        raise
    return outcomes


def render_lines(grid: MazeGrid) -> List[str]:
    return grid.lines()


def render_map(grid: MazeGrid) -> str:
    """Serialize the grid: one line per row, each terminated by a newline."""

    return "".join(f"{line}\n" for line in render_lines(grid))
