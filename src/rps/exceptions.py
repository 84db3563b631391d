"""Custom exception hierarchy for the rock-paper-scissors game.

Exception tree:
    RPSError
    +-- InvalidMoveError  (input could not be parsed as a move)
"""

from typing import Optional


class RPSError(Exception):
    """Base exception for all game errors."""


class InvalidMoveError(RPSError, ValueError):
    """Input text is not one of rock, paper or scissors.

    Raised only at the input boundary; the engine itself always works
    with concrete ``Move`` values.
    """

    def __init__(self, message: str, *, value: Optional[str] = None):
        self.value = value
        super().__init__(message)
