"""
Game pipeline: load → validate → (move) → render.

LabyrinthGame wires the loader, the connectivity gate and the mover together.
Each stage raises a ``LabyrinthError`` subclass on failure; nothing is
rendered unless every stage succeeded.

run_labyrinth() is the caller-facing boundary. It turns the outcome into text
on stdout (success) or a diagnostic on stderr (failure) plus an exit status,
so a command-line front end only has to forward its parsed arguments.

Usage:
    game = LabyrinthGame()
    text = game.play("maps/level1.txt", player=1, direction="up")

    exit_code = run_labyrinth("maps/level1.txt", "1", "up")
"""

import sys
from typing import List, Optional, TextIO, Union

from .config import Config
from .errors import InvalidArguments, InvalidMap, LabyrinthError
from .loader import MapLoader, MapSource
from .logging_utils import log_debug, log_error, log_stage, log_success
from .maze import (
    MazeGrid,
    MoveOutcome,
    find_duplicate_players,
    find_player,
    move_player_steps,
    render_map,
    validate_connectivity,
)

PlayerArg = Union[int, str]


def parse_player(value: PlayerArg) -> int:
    """Return the player digit, accepting only 0-9 as an int or a one-digit string.

    Raises:
        InvalidArguments: For anything else ("10", " 1", "a", True, -1, ...)
    """

    # bool is an int subclass; True must not pass as player 1
    if isinstance(value, bool):
        raise InvalidArguments(f"Got {value!r}.")
    if isinstance(value, int):
        if 0 <= value <= 9:
            return value
        raise InvalidArguments(f"Got {value!r}.")
    if isinstance(value, str) and len(value) == 1 and "0" <= value <= "9":
        return int(value)
    raise InvalidArguments(f"Got {value!r}.")


class LabyrinthGame:
    """Run one labyrinth invocation against a map source.

    Args:
        loader: MapLoader to read maps with (default: plain MapLoader())
        strict_players: Reject maps where one digit occupies several cells.
            Defaults to ``Config.STRICT_PLAYERS``.
        verbose: Print stage diagnostics to ``log_stream`` (stderr by default)
    """

    def __init__(
        self,
        loader: Optional[MapLoader] = None,
        *,
        strict_players: Optional[bool] = None,
        verbose: bool = False,
        log_stream: Optional[TextIO] = None,
    ):
        self.loader = loader or MapLoader()
        self.strict_players = Config.STRICT_PLAYERS if strict_players is None else strict_players
        self.verbose = verbose
        self.log_stream = log_stream
        self.last_moves: List[MoveOutcome] = []

    def _stage(self, message: str) -> None:
        if self.verbose:
            log_stage(message, self.log_stream)

    def _debug(self, message: str) -> None:
        if self.verbose and Config.debug_enabled():
            log_debug(message, self.log_stream)

    def load(self, map_source: MapSource) -> MazeGrid:
        """Load a map and pass it through the connectivity gate."""

        self._stage(f"Loading map {map_source}")
        grid = self.loader.load(map_source)
        self._debug(f"Map is {grid.rows}x{grid.cols}")

        self._stage("Checking open-area connectivity")
        validate_connectivity(grid)

        if self.strict_players:
            duplicates = find_duplicate_players(grid)
            if duplicates:
                digits = ", ".join(sorted(duplicates))
                raise InvalidMap(f"Player digits appear more than once: {digits}.")
        return grid

    def move(self, grid: MazeGrid, player: int, direction: str, steps: int = 1) -> List[MoveOutcome]:
        self._stage(f"Moving player {player} {direction} x{steps}")
        outcomes = move_player_steps(grid, player, direction, steps)
        for outcome in outcomes:
            if outcome.placed:
                self._debug(f"Placed player {player} at {outcome.target}")
            else:
                self._debug(f"Player {player}: {outcome.origin} -> {outcome.target}")
        return outcomes

    def play(
        self,
        map_source: MapSource,
        player: PlayerArg,
        direction: Optional[str] = None,
        steps: int = 1,
    ) -> str:
        """Load, validate, optionally move, and return the rendered map.

        Without ``direction`` the map is only validated and rendered.
        """

        player_id = parse_player(player)
        if isinstance(steps, bool) or not isinstance(steps, int):
            raise InvalidArguments(f"Step count must be an integer (got {steps!r}).")
        if steps < 1:
            raise InvalidArguments(f"Step count must be at least 1 (got {steps}).")

        grid = self.load(map_source)
        self.last_moves = []
        if direction is not None:
            self.last_moves = self.move(grid, player_id, direction, steps)
        else:
            self._debug(f"Player {player_id} at {find_player(grid, player_id)}")

        if self.verbose:
            log_success("Map valid", self.log_stream)
        return render_map(grid)


def run_labyrinth(
    map_source: MapSource,
    player: PlayerArg,
    direction: Optional[str] = None,
    *,
    steps: int = 1,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    verbose: bool = False,
    loader: Optional[MapLoader] = None,
) -> int:
    """Run one invocation and return its exit status.

    Success writes the rendered map to ``stdout`` and returns 0. Any
    ``LabyrinthError`` writes its diagnostic to ``stderr`` and returns the
    error's non-zero exit code. Other exceptions propagate, including the
    ``ValueError`` from an out-of-range configuration.
    """

    Config.validate()

    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    game = LabyrinthGame(loader, verbose=verbose, log_stream=err)
    try:
        text = game.play(map_source, player, direction, steps)
    except LabyrinthError as exc:
        log_error(exc.message, err)
        return exc.exit_code

    out.write(text)
    return 0


__all__ = [
    "LabyrinthGame",
    "parse_player",
    "run_labyrinth",
]
