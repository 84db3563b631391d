"""Pydantic v2 models and enums for the game's domain types.

Re-exports all model classes for convenient import::

    from rps.models import Move, Outcome, RoundRecord, ScoreState
"""

from .move import BEATS, Move, Outcome, determine_outcome, parse_move
from .round_record import RoundRecord
from .score import ScoreState

__all__ = [
    "BEATS",
    "Move",
    "Outcome",
    "determine_outcome",
    "parse_move",
    "RoundRecord",
    "ScoreState",
]
