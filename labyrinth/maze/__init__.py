"""Maze grid model, connectivity checks and player movement."""

from .grid import (
    DEFAULT_MAX_DIM,
    FLOOR,
    MAP_ALPHABET,
    PLAYER_TOKENS,
    WALL,
    MazeGrid,
)
from .schemas import MazeState, MoveOutcome
from .helpers import (
    DIRECTIONS,
    count_open_regions,
    find_duplicate_players,
    find_first_floor,
    find_player,
    flood_fill,
    is_open_cell,
    move_player,
    move_player_steps,
    place_player,
    render_lines,
    render_map,
    validate_connectivity,
)

__all__ = [
    "DEFAULT_MAX_DIM",
    "FLOOR",
    "MAP_ALPHABET",
    "PLAYER_TOKENS",
    "WALL",
    "MazeGrid",
    "MazeState",
    "MoveOutcome",
    "DIRECTIONS",
    "count_open_regions",
    "find_duplicate_players",
    "find_first_floor",
    "find_player",
    "flood_fill",
    "is_open_cell",
    "move_player",
    "move_player_steps",
    "place_player",
    "render_lines",
    "render_map",
    "validate_connectivity",
]
