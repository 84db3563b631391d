"""Round engine: plays rounds against the computer and keeps the session.

A round is started with ``play_round``. The engine then "thinks" for
``GameConfig.thinking_delay`` seconds, optionally reporting interim guesses
through a callback so a front end can animate them, before drawing the
computer's real move exactly once and resolving the round.

Interim guesses are cosmetic only. The move that is scored is the one
stored in the returned ``RoundRecord`` and exposed as ``last_round``.

While a round is resolving, further ``play_round`` calls are ignored and
return ``None``. Everything runs on a single asyncio event loop, so a plain
flag is enough to guard against overlapping rounds.
"""

import asyncio
import logging
import random
from typing import Callable

from rps.config import GameConfig
from rps.history import HistoryLog
from rps.models import Move, Outcome, RoundRecord, ScoreState
from rps.rules import determine_outcome, select_counterpart_move

logger = logging.getLogger(__name__)

ThinkingCallback = Callable[[Move], None]


class RoundEngine:
    """Owns one session's score, history and re-entrancy guard."""

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
    ):
        if config is None:
            config = GameConfig()

        self._config = config
        self._rng = rng
        self._score = ScoreState()
        self._history = HistoryLog(config.history_limit)
        self._last_round: RoundRecord | None = None
        self._rounds_played = 0
        self._resolving = False

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def score(self) -> ScoreState:
        """Copy of the current score; mutating it does not affect the session."""
        return self._score.model_copy()

    @property
    def history(self) -> tuple[RoundRecord, ...]:
        """Visible history, newest first."""
        return self._history.records()

    @property
    def last_round(self) -> RoundRecord | None:
        """Round resolved most recently, cleared while the next one resolves."""
        return self._last_round

    @property
    def last_outcome(self) -> Outcome | None:
        return self._last_round.outcome if self._last_round else None

    @property
    def rounds_played(self) -> int:
        """Rounds resolved since the last reset, including evicted ones."""
        return self._rounds_played

    @property
    def draws(self) -> int:
        return self._rounds_played - self._score.player - self._score.opponent

    @property
    def is_resolving(self) -> bool:
        return self._resolving

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    async def play_round(
        self,
        move: Move,
        on_thinking: ThinkingCallback | None = None,
    ) -> RoundRecord | None:
        """Play one round with the player's ``move``.

        Args:
            move: The player's move.
            on_thinking: Called with an interim guess every
                ``shuffle_interval`` seconds while the computer "thinks".

        Returns:
            The resolved round, or ``None`` if another round was still
            resolving and this call was ignored.
        """
        if self._resolving:
            logger.debug("Ignoring %s: a round is already resolving", move.value)
            return None

        self._resolving = True
        self._last_round = None
        try:
            await self._think(on_thinking)

            opponent_move = select_counterpart_move(self._rng)
            outcome = determine_outcome(move, opponent_move)
            record = RoundRecord(
                player_move=move,
                opponent_move=opponent_move,
                outcome=outcome,
            )

            self._history.push(record)
            self._score.record(outcome)
            self._rounds_played += 1
            self._last_round = record
        finally:
            self._resolving = False

        logger.info(
            "Round %d: %s vs %s -> %s (score %d-%d)",
            self._rounds_played, move.value, opponent_move.value,
            outcome.value, self._score.player, self._score.opponent,
        )
        return record

    def reset_session(self) -> None:
        """Zero the score and empty the history.

        Allowed at any time. A round that is resolving when the reset
        happens still completes and counts towards the fresh session.
        """
        self._score = ScoreState()
        self._history.clear()
        self._last_round = None
        self._rounds_played = 0
        logger.info("Session reset")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _think(self, on_thinking: ThinkingCallback | None) -> None:
        """Sleep for the thinking delay, emitting interim guesses."""
        delay = max(0.0, self._config.thinking_delay)
        interval = self._config.shuffle_interval

        if on_thinking is None or interval <= 0:
            await asyncio.sleep(delay)
            return

        ticks, leftover = divmod(delay, interval)
        for _ in range(int(ticks)):
            on_thinking(select_counterpart_move(self._rng))
            await asyncio.sleep(interval)
        if leftover > 0:
            await asyncio.sleep(leftover)
