"""CLI entry point for the rock-paper-scissors game.

Provides ``main()`` as the sync entry point for the ``rps`` console script,
and ``async_main(args)`` which sets up logging, builds the engine and runs
the interactive prompt loop until the player quits.

Usage::

    rps                          # play with a one-second thinking pause
    rps --thinking-delay 0       # no pause
    rps --seed 42                # reproducible computer moves
    rps --log-file -v            # debug logging to console and data/logs/
"""

import argparse
import asyncio
import logging
import math
import random
import sys
from typing import Callable

from rps.config import DEFAULT_HISTORY_LIMIT, GameConfig
from rps.console import StdinReader
from rps.display import (
    format_history,
    format_round,
    format_scoreboard,
    format_summary,
    format_thinking,
    result_message,
)
from rps.engine import RoundEngine
from rps.exceptions import InvalidMoveError
from rps.logging_config import setup_logging
from rps.models import parse_move

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  rock | paper | scissors   play a round (r, p, s also work)
  score                     show the current score
  history                   show the last rounds, newest first
  reset                     zero the score and clear the history
  help                      show this message
  quit                      end the session"""

QUIT_COMMANDS = {"quit", "exit", "q"}


def positive_int(text: str) -> int:
    """argparse type: an integer of at least 1."""
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: '{text}'") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def non_negative_float(text: str) -> float:
    """argparse type: a finite float of at least 0."""
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: '{text}'") from None
    if not math.isfinite(value) or value < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative number, got {text}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the rps CLI."""
    parser = argparse.ArgumentParser(
        prog="rps",
        description="Play rock-paper-scissors against the computer",
    )
    parser.add_argument(
        "--thinking-delay",
        type=non_negative_float,
        default=None,
        help="Seconds the computer 'thinks' before revealing its move (default: 1.0)",
    )
    parser.add_argument(
        "--history-limit",
        type=positive_int,
        default=DEFAULT_HISTORY_LIMIT,
        help=f"Rounds kept in the history list (default: {DEFAULT_HISTORY_LIMIT})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's moves, for reproducible sessions",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default="data",
        help="Data directory for log files (default: data)",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Write a DEBUG log under <data-dir>/logs/",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show DEBUG log output on the console",
    )
    return parser


def _build_config(args: argparse.Namespace) -> GameConfig:
    overrides = {
        "history_limit": args.history_limit,
        "data_dir": args.data_dir,
    }
    if args.thinking_delay is not None:
        overrides["thinking_delay"] = args.thinking_delay
    return GameConfig(**overrides)


def _show_thinking(guess) -> None:
    sys.stdout.write("\r" + format_thinking(guess).ljust(40))
    sys.stdout.flush()


async def handle_command(
    engine: RoundEngine,
    command: str,
    emit: Callable[[str], None] = print,
    on_thinking=None,
) -> bool:
    """Run one line of player input against the engine.

    Returns:
        ``False`` when the player asked to quit, ``True`` otherwise.
    """
    command = command.strip().lower()
    if not command:
        return True
    if command in QUIT_COMMANDS:
        return False
    if command == "help":
        emit(HELP_TEXT)
    elif command == "score":
        emit(format_scoreboard(engine.score))
    elif command == "history":
        emit(format_history(engine.history))
    elif command == "reset":
        engine.reset_session()
        emit("Game reset.")
        emit(format_scoreboard(engine.score))
    else:
        try:
            move = parse_move(command)
        except InvalidMoveError as exc:
            logger.debug("Rejected input %r", exc.value)
            emit(f"{exc} (type 'help' for commands)")
            return True

        record = await engine.play_round(move, on_thinking=on_thinking)
        if on_thinking is not None:
            emit("")
        if record is None:
            return True
        emit(format_round(record))
        emit(result_message(record.outcome))
        emit(format_scoreboard(engine.score))
    return True


async def async_main(args: argparse.Namespace) -> None:
    """Async entry point: set up logging and the engine, run the prompt loop."""
    console_level = logging.DEBUG if args.verbose else logging.WARNING
    log_file = setup_logging(
        data_dir=args.data_dir,
        console_level=console_level,
        log_to_file=args.log_file,
    )

    config = _build_config(args)
    rng = random.Random(args.seed) if args.seed is not None else None
    engine = RoundEngine(config, rng=rng)

    logger.info(
        "Starting rps: thinking_delay=%.1fs, history_limit=%d, seed=%s, log=%s",
        config.thinking_delay, config.history_limit, args.seed, log_file,
    )

    print("Rock Paper Scissors")
    print("Choose your weapon wisely!")
    print(HELP_TEXT)
    print(result_message(engine.last_outcome))

    reader = StdinReader()
    reader.start()

    try:
        while True:
            line = await reader.readline("> ")
            if line is None:
                print()
                break
            if not await handle_command(engine, line, on_thinking=_show_thinking):
                break
    finally:
        summary_text = format_summary(
            engine.score, engine.rounds_played, engine.draws, len(engine.history)
        )
        print(summary_text)
        logger.info("Session ended after %d rounds", engine.rounds_played)
        logging.shutdown()


def main() -> None:
    """Sync entry point for the rps console script."""
    parser = build_parser()
    args = parser.parse_args()
    try:
        asyncio.run(async_main(args))
    except KeyboardInterrupt:
        pass  # summary already printed by async_main


if __name__ == "__main__":
    main()
