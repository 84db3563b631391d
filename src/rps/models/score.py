"""Pydantic v2 model for the cumulative score."""

from pydantic import BaseModel, Field

from rps.models.move import Outcome


class ScoreState(BaseModel):
    """Win counters for the player and the computer.

    Counters only ever go up by one per decided round; draws leave both
    untouched. A new ``ScoreState`` is the only way back to zero.
    """

    player: int = Field(default=0, ge=0)
    opponent: int = Field(default=0, ge=0)

    def record(self, outcome: Outcome) -> None:
        """Credit the winner of a round, if there is one."""
        if outcome is Outcome.WIN:
            self.player += 1
        elif outcome is Outcome.LOSE:
            self.opponent += 1

    def as_tuple(self) -> tuple[int, int]:
        return (self.player, self.opponent)
