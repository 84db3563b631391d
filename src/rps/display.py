"""Plain-text rendering of the game state for the terminal."""

from typing import Iterable

from rps.models import Move, Outcome, RoundRecord, ScoreState

_RESULT_MESSAGES = {
    Outcome.WIN: "You win! 🎉",
    Outcome.LOSE: "You lose! 😢",
    Outcome.DRAW: "It's a draw! 🤝",
}


def result_message(outcome: Outcome | None) -> str:
    """Headline for the latest round, or a prompt before any round."""
    if outcome is None:
        return "Make your choice!"
    return _RESULT_MESSAGES[outcome]


def format_thinking(guess: Move) -> str:
    return f"Computer is thinking... {guess.label}"


def format_scoreboard(score: ScoreState) -> str:
    return f"You {score.player}  -  {score.opponent} Computer"


def format_round(record: RoundRecord) -> str:
    return "You {}  vs  {} Computer  ->  {}".format(
        record.player_move.label,
        record.opponent_move.label,
        record.outcome.label,
    )


def format_history(records: Iterable[RoundRecord]) -> str:
    """Numbered history, newest first."""
    lines = [
        f"{i:>2}. {format_round(record)}"
        for i, record in enumerate(records, start=1)
    ]
    if not lines:
        return "No rounds played yet."
    return "\n".join(["Game History", *lines])


def format_summary(
    score: ScoreState, rounds_played: int, draws: int, history_size: int
) -> str:
    """End-of-session summary block."""
    lines = [
        "=" * 40,
        "Session complete",
        "-" * 40,
        f"Rounds:      {rounds_played}",
        f"You:         {score.player}",
        f"Computer:    {score.opponent}",
        f"Draws:       {draws}",
        f"History:     {history_size} shown",
        "=" * 40,
    ]
    return "\n".join(lines)
