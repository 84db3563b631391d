"""Logging configuration for the rock-paper-scissors CLI.

The console handler stays quiet by default (WARNING+) so log lines don't
interleave with the game prompt. An optional log file captures DEBUG+ with
full timestamps and logger names.
"""

import logging
from datetime import datetime
from pathlib import Path


def setup_logging(
    data_dir: str = "data",
    console_level: int = logging.WARNING,
    log_to_file: bool = False,
) -> Path | None:
    """Configure logging with a console handler and an optional file handler.

    Existing handlers on the root logger are cleared first so that calling
    this function multiple times (e.g. in tests) does not produce duplicate
    output.

    Args:
        data_dir: Base data directory. ``logs/`` is created inside it when
            ``log_to_file`` is set.
        console_level: Minimum level for console output.
        log_to_file: Whether to attach a DEBUG file handler.

    Returns:
        Path to the newly created log file, or ``None`` when file logging
        is disabled.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    console = logging.StreamHandler()
    console.setLevel(console_level)
    console.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-5s %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    root.addHandler(console)

    if not log_to_file:
        return None

    log_dir = Path(data_dir) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d-%H%M%S")
    log_file = log_dir / f"session-{timestamp}.log"

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)-5s [%(name)s] %(message)s")
    )
    root.addHandler(file_handler)

    # asyncio logs selector details at DEBUG.
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    return log_file
