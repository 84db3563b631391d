"""Rock-paper-scissors rules: the beats-relation and the computer's pick.

The beats-relation itself lives beside the ``Move`` enum in
``rps.models.move`` and is re-exported here.
"""

import random

from rps.models.move import BEATS, Move, determine_outcome

__all__ = ["BEATS", "MOVES", "determine_outcome", "select_counterpart_move"]

MOVES: tuple[Move, ...] = tuple(Move)


def select_counterpart_move(rng: random.Random | None = None) -> Move:
    """Draw the computer's move uniformly from the three moves.

    Args:
        rng: Generator to draw from. The module-level ``random`` state is
            used when omitted.
    """
    if rng is None:
        return random.choice(MOVES)
    return rng.choice(MOVES)
