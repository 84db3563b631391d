"""Move and outcome enumerations, the beats-relation, and input parsing."""

from enum import Enum

from rps.exceptions import InvalidMoveError


class Move(str, Enum):
    """One of the three hand shapes."""

    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Outcome(str, Enum):
    """Result of a round from the player's perspective."""

    WIN = "win"
    LOSE = "lose"
    DRAW = "draw"

    @property
    def label(self) -> str:
        return self.value.capitalize()


# key beats value
BEATS: dict[Move, Move] = {
    Move.ROCK: Move.SCISSORS,
    Move.SCISSORS: Move.PAPER,
    Move.PAPER: Move.ROCK,
}


def determine_outcome(player_move: Move, opponent_move: Move) -> Outcome:
    """Compare two moves from the player's point of view.

    Identical moves are always a draw. Otherwise the player wins exactly
    when their move beats the opponent's, and loses in every other case.
    """
    if player_move is opponent_move:
        return Outcome.DRAW
    if BEATS[player_move] is opponent_move:
        return Outcome.WIN
    return Outcome.LOSE


_SHORTCUTS = {
    "r": Move.ROCK,
    "p": Move.PAPER,
    "s": Move.SCISSORS,
}


def parse_move(text: str) -> Move:
    """Parse player input into a Move.

    Accepts the full move names and the single-letter shortcuts ``r``,
    ``p`` and ``s``, case-insensitively, ignoring surrounding whitespace.

    Raises:
        InvalidMoveError: If the text names no move.
    """
    cleaned = text.strip().lower()
    if cleaned in _SHORTCUTS:
        return _SHORTCUTS[cleaned]
    try:
        return Move(cleaned)
    except ValueError:
        raise InvalidMoveError(
            f"'{text}' is not a move; choose rock, paper or scissors",
            value=text,
        ) from None
