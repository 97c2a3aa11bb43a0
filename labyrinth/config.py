"""
Labyrinth Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str = "") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Application configuration loaded from environment variables."""

    # Map limits
    # Largest accepted row count and row width
    MAX_DIM: int = int(os.getenv("LABYRINTH_MAX_DIM", "100"))

    # Reject maps where a player digit appears on more than one cell
    STRICT_PLAYERS: bool = _env_flag("LABYRINTH_STRICT_PLAYERS")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are out of range."""
        if cls.MAX_DIM < 1:
            raise ValueError(
                f"LABYRINTH_MAX_DIM must be at least 1 (got {cls.MAX_DIM})"
            )

    @classmethod
    def debug_enabled(cls) -> bool:
        return cls.LOG_LEVEL.upper() == "DEBUG"

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Labyrinth Configuration:",
            f"  Max Dimension: {cls.MAX_DIM}",
            f"  Strict Players: {cls.STRICT_PLAYERS}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
