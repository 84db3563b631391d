"""Rock-paper-scissors against the computer."""

from .models import Move, Outcome, RoundRecord, ScoreState, parse_move
from .config import GameConfig
from .engine import RoundEngine
from .exceptions import InvalidMoveError, RPSError
from .history import HistoryLog
from .rules import determine_outcome, select_counterpart_move

__all__ = [
    "Move",
    "Outcome",
    "RoundRecord",
    "ScoreState",
    "parse_move",
    "GameConfig",
    "RoundEngine",
    "InvalidMoveError",
    "RPSError",
    "HistoryLog",
    "determine_outcome",
    "select_counterpart_move",
]
