"""
Labyrinth - text maze validation and player movement.

Load a rectangular map of walls, floor and player digits, check that all open
cells form one connected area, move a player one step, and render the result.

No command-line parsing and no global state beyond ``Config``.
Callers pass the map source, player digit and optional direction.
"""

__version__ = "1.0.0"

# Pipeline
from .game import LabyrinthGame, parse_player, run_labyrinth

# Loading
from .loader import MapLoader, load_map, parse_map_lines

# Errors
from .errors import (
    ERROR_MESSAGES,
    ErrorKind,
    LabyrinthError,
    InvalidArguments,
    MapNotFound,
    InvalidMap,
    MultipleEmptyAreas,
    MoveFailed,
)

# Grid model and helpers
from .maze import (
    DIRECTIONS,
    MazeGrid,
    MazeState,
    MoveOutcome,
    count_open_regions,
    find_player,
    move_player,
    move_player_steps,
    place_player,
    render_map,
    validate_connectivity,
)

from .config import Config

__all__ = [
    # Pipeline
    "LabyrinthGame",
    "parse_player",
    "run_labyrinth",
    # Loading
    "MapLoader",
    "load_map",
    "parse_map_lines",
    # Errors
    "ERROR_MESSAGES",
    "ErrorKind",
    "LabyrinthError",
    "InvalidArguments",
    "MapNotFound",
    "InvalidMap",
    "MultipleEmptyAreas",
    "MoveFailed",
    # Grid
    "DIRECTIONS",
    "MazeGrid",
    "MazeState",
    "MoveOutcome",
    "count_open_regions",
    "find_player",
    "move_player",
    "move_player_steps",
    "place_player",
    "render_map",
    "validate_connectivity",
    # Config
    "Config",
]
