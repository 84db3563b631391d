"""Game configuration with sensible defaults for a terminal session."""

from dataclasses import dataclass

DEFAULT_HISTORY_LIMIT = 10


@dataclass
class GameConfig:
    """Configuration for a rock-paper-scissors session.

    All timing values are in seconds. The thinking delay is purely
    cosmetic: it never changes which move is scored.
    """

    # Pause between the player's move and round resolution
    thinking_delay: float = 1.0

    # How often an interim "thinking" guess is shown during the pause
    shuffle_interval: float = 0.1

    # Number of resolved rounds kept in the visible history (newest first)
    history_limit: int = DEFAULT_HISTORY_LIMIT

    # Log directory lives under here when file logging is enabled
    data_dir: str = "data"
