"""
Map loading for text-defined labyrinths.

This module provides MapLoader for converting map text files into ``MazeGrid``
objects. A map file is a rectangle of characters:
- ``#`` wall
- ``.`` open floor
- ``0``-``9`` a player standing on open floor

Loading rules:
- Trailing CR/LF characters are stripped from every line
- Blank lines are skipped and never count as rows
- The first non-blank line fixes the row width for the whole map
- Row count and row width must both stay within ``Config.MAX_DIM``

Example map file:
```
#####
#..1#
#.#.#
#####
```

Usage:
    loader = MapLoader()
    grid = loader.load("maps/level1.txt")
"""

from pathlib import Path
from typing import Generator, Iterable, List, Optional, Union

from pydantic import ValidationError

from .config import Config
from .errors import InvalidMap, MapNotFound
from .maze import MazeGrid, MazeState

MapSource = Union[str, Path]


def _strip_line_ending(line: str) -> str:
    return line.rstrip("\r\n")


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    # pydantic prefixes ValueErrors raised in validators with "Value error, "
    return errors[0]["msg"].removeprefix("Value error, ")


def parse_map_lines(lines: Iterable[str], *, max_dim: Optional[int] = None) -> MazeGrid:
    """Parse raw map lines into a ``MazeGrid``.

    Lines are consumed lazily, so an oversized input fails as soon as its row
    count crosses the limit. Shape and alphabet checks are delegated to
    ``MazeState``.

    Raises:
        InvalidMap: If the lines do not form a valid map
    """

    limit = Config.MAX_DIM if max_dim is None else max_dim
    rows: List[str] = []
    for raw in lines:
        line = _strip_line_ending(raw)
        if not line:
            continue
        rows.append(line)
        if len(rows) > limit:
            raise InvalidMap(f"More than {limit} rows.")

    if not rows:
        raise InvalidMap("Map is empty.")

    try:
        state = MazeState(rows=rows, max_dim=limit)
    except ValidationError as exc:
        detail = _first_error(exc)
        raise InvalidMap(detail[:1].upper() + detail[1:] + ".") from exc
    return MazeGrid.from_state(state)


class MapLoader:
    """Load and validate labyrinth maps from text files.

    Directory structure:
    - Default: map sources are used as given (absolute or relative to cwd)
    - Override via constructor: MapLoader(Path("/custom/maps")) resolves
      relative sources against that directory

    Failures:
    - Missing or unreadable file → ``MapNotFound``
    - Readable file with a bad shape or alphabet → ``InvalidMap``
    """

    def __init__(self, maps_dir: Optional[Path] = None, *, max_dim: Optional[int] = None):
        """Initialize map loader.

        Args:
            maps_dir: Directory relative map sources are resolved against.
            max_dim: Dimension limit; defaults to ``Config.MAX_DIM`` at load time.
        """
        self.maps_dir = maps_dir
        self.max_dim = max_dim

    def resolve(self, map_source: MapSource) -> Path:
        path = Path(map_source)
        if self.maps_dir is not None and not path.is_absolute():
            path = self.maps_dir / path
        return path

    def iter_lines(self, map_source: MapSource) -> Generator[str, None, None]:
        """Yield the map file's lines one at a time, keeping line endings.

        Raises:
            MapNotFound: If the file cannot be opened or read
            InvalidMap: If the file is not UTF-8 text
        """
        path = self.resolve(map_source)
        try:
            # newline="\n" splits on LF only; a stray "\r" stays inside the line
            with open(path, "r", encoding="utf-8", newline="\n") as f:
                yield from f
        except OSError as exc:
            raise MapNotFound(f"Could not read '{path}'.") from exc
        except UnicodeDecodeError as exc:
            raise InvalidMap(f"'{path}' is not a text map.") from exc

    def load(self, map_source: MapSource) -> MazeGrid:
        """Load a map file into a ``MazeGrid``.

        Args:
            map_source: Path to the map file

        Returns:
            Shape-validated grid (connectivity is checked separately)
        """
        lines = self.iter_lines(map_source)
        try:
            return parse_map_lines(lines, max_dim=self.max_dim)
        finally:
            # closes the file when parsing stopped before the last line
            lines.close()


def load_map(map_source: MapSource, *, maps_dir: Optional[Path] = None, max_dim: Optional[int] = None) -> MazeGrid:
    """Convenience helper to load a map in one call."""

    loader = MapLoader(maps_dir, max_dim=max_dim)
    return loader.load(map_source)
