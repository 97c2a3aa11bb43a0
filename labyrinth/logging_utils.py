"""Logging utilities for labyrinth runs.

Provides color-coded diagnostics. Everything is written to stderr so that
stdout carries only the rendered map.
"""

import os
import sys
from enum import Enum
from typing import TextIO


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Pipeline stages (load, validate, move)
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Success/completion
    CYAN = "\033[96m"      # Info/metadata
    GREY = "\033[90m"      # Debug detail

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if LABYRINTH_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("LABYRINTH_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def _emit(message: str, stream: TextIO | None) -> None:
    print(message, file=stream if stream is not None else sys.stderr)


def log_stage(message: str, stream: TextIO | None = None) -> None:
    """Log a pipeline stage (blue)."""
    _emit(colored(f"{MARKER_STAGE} {message}", Color.BLUE), stream)


def log_error(message: str, stream: TextIO | None = None) -> None:
    """Log an error (red)."""
    _emit(colored(f"{MARKER_ERROR} {message}", Color.RED), stream)


def log_success(message: str, stream: TextIO | None = None) -> None:
    """Log a success (green)."""
    _emit(colored(f"{MARKER_SUCCESS} {message}", Color.GREEN), stream)


def log_info(message: str, stream: TextIO | None = None) -> None:
    """Log metadata/info (cyan)."""
    _emit(colored(f"{MARKER_INFO} {message}", Color.CYAN), stream)


def log_debug(message: str, stream: TextIO | None = None) -> None:
    """Log debug detail (grey)."""
    _emit(colored(f"{MARKER_DEBUG} {message}", Color.GREY), stream)


# Markers for message types (color-blind accessible)
MARKER_STAGE = "[•]"
MARKER_ERROR = "[!]"
MARKER_SUCCESS = "[✓]"
MARKER_INFO = "[i]"
MARKER_DEBUG = "[.]"
