"""Error taxonomy for labyrinth maps.

Every failure is fatal to a single invocation. Components raise one of the
``LabyrinthError`` subclasses below; only the caller-facing boundary
(``labyrinth.game.run_labyrinth``) catches them and maps each ``ErrorKind`` to a
diagnostic message and exit status.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Mutually exclusive failure categories."""

    INVALID_ARGUMENTS = "invalid_arguments"
    MAP_NOT_FOUND = "map_not_found"
    INVALID_MAP = "invalid_map"
    MULTIPLE_EMPTY_AREAS = "multiple_empty_areas"
    MOVE_FAILED = "move_failed"


# Human-readable diagnostics written to stderr, keyed by kind.
ERROR_MESSAGES = {
    ErrorKind.INVALID_ARGUMENTS: "Invalid arguments: player must be a single digit between 0 and 9.",
    ErrorKind.MAP_NOT_FOUND: "Map file not found or not readable.",
    ErrorKind.INVALID_MAP: "Invalid map format.",
    ErrorKind.MULTIPLE_EMPTY_AREAS: "Map contains more than one empty area.",
    ErrorKind.MOVE_FAILED: "Move failed.",
}


class LabyrinthError(Exception):
    """Base class for all labyrinth failures."""

    kind: ErrorKind
    exit_code: int = 1

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(detail or ERROR_MESSAGES[self.kind])

    @property
    def message(self) -> str:
        """Diagnostic line for the caller: kind message plus optional detail."""
        base = ERROR_MESSAGES[self.kind]
        if self.detail:
            return f"{base} {self.detail}"
        return base


class InvalidArguments(LabyrinthError):
    """Malformed invocation parameters (player digit, step count)."""

    kind = ErrorKind.INVALID_ARGUMENTS


class MapNotFound(LabyrinthError):
    """The map source could not be opened or read."""

    kind = ErrorKind.MAP_NOT_FOUND


class InvalidMap(LabyrinthError):
    """The map was read but violates shape or alphabet constraints."""

    kind = ErrorKind.INVALID_MAP


class MultipleEmptyAreas(LabyrinthError):
    """The map has more than one connected open region."""

    kind = ErrorKind.MULTIPLE_EMPTY_AREAS


class MoveFailed(LabyrinthError):
    """A requested move or placement could not be performed."""

    kind = ErrorKind.MOVE_FAILED
