"""Pydantic v2 model for a single resolved round."""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing_extensions import Self

from rps.models.move import Move, Outcome, determine_outcome


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RoundRecord(BaseModel):
    """Immutable log entry for one resolved round.

    Created exactly once when a round resolves and never mutated
    afterwards; the history only ever evicts it.
    """

    model_config = ConfigDict(frozen=True)

    player_move: Move
    opponent_move: Move
    outcome: Outcome
    timestamp: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="after")
    def check_outcome_matches_moves(self) -> Self:
        """Outcome must be the one the two moves produce."""
        expected = determine_outcome(self.player_move, self.opponent_move)
        if self.outcome is not expected:
            raise ValueError(
                f"{self.player_move.value} vs {self.opponent_move.value} "
                f"is a {expected.value}, not a {self.outcome.value}"
            )
        return self
