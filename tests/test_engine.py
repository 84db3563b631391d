"""Tests for RoundEngine: round resolution, scoring, history and reset.

asyncio.sleep is patched out wherever the thinking delay is irrelevant;
the re-entrancy tests use a short real delay so a round is actually
in flight when the second call arrives.
"""

import asyncio
import logging
import random
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from rps.config import GameConfig
from rps.engine import RoundEngine
from rps.models import Move, Outcome
from rps.rules import determine_outcome


def _make_engine(seed: int | None = 1, **overrides) -> RoundEngine:
    """Create a RoundEngine with a seeded generator and config overrides."""
    config = GameConfig(**overrides)
    rng = random.Random(seed) if seed is not None else None
    return RoundEngine(config, rng=rng)


class TestInitialState:
    """Tests for a freshly created engine."""

    def test_initial_state(self):
        engine = _make_engine()
        assert engine.score.as_tuple() == (0, 0)
        assert engine.history == ()
        assert engine.last_round is None
        assert engine.last_outcome is None
        assert engine.rounds_played == 0
        assert engine.is_resolving is False

    def test_default_config(self):
        engine = RoundEngine()
        assert engine.config.thinking_delay == 1.0
        assert engine.config.history_limit == 10


class TestPlayRound:
    """Tests for RoundEngine.play_round()."""

    @pytest.mark.asyncio
    @patch("rps.engine.asyncio.sleep", new_callable=AsyncMock)
    async def test_resolves_round(self, mock_sleep):
        """A round produces a consistent record and becomes the latest."""
        engine = _make_engine()
        record = await engine.play_round(Move.ROCK)

        assert record is not None
        assert record.player_move is Move.ROCK
        assert record.outcome is determine_outcome(Move.ROCK, record.opponent_move)
        assert engine.last_round is record
        assert engine.last_outcome is record.outcome
        assert engine.history[0] is record
        assert engine.rounds_played == 1
        assert engine.is_resolving is False

    @pytest.mark.asyncio
    @patch("rps.engine.asyncio.sleep", new_callable=AsyncMock)
    async def test_waits_thinking_delay(self, mock_sleep):
        """Without a callback the engine sleeps once for the whole delay."""
        engine = _make_engine(thinking_delay=1.0)
        await engine.play_round(Move.PAPER)
        mock_sleep.assert_awaited_once_with(1.0)

    @pytest.mark.asyncio
    @patch("rps.engine.select_counterpart_move")
    @patch("rps.engine.asyncio.sleep", new_callable=AsyncMock)
    async def test_scored_move_is_drawn_once(self, mock_sleep, mock_select):
        """The computer's scored move comes from a single draw after thinking."""
        mock_select.return_value = Move.SCISSORS
        engine = _make_engine()

        record = await engine.play_round(Move.ROCK)

        mock_select.assert_called_once()
        assert record.opponent_move is Move.SCISSORS
        assert record.outcome is Outcome.WIN
        assert engine.score.as_tuple() == (1, 0)

    @pytest.mark.asyncio
    @patch("rps.engine.asyncio.sleep", new_callable=AsyncMock)
    async def test_thinking_callback_receives_guesses(self, mock_sleep):
        """Interim guesses are reported during the delay and don't affect scoring."""
        engine = _make_engine(thinking_delay=1.0, shuffle_interval=0.25)
        guesses = []

        record = await engine.play_round(Move.PAPER, on_thinking=guesses.append)

        assert len(guesses) == 4
        assert all(isinstance(g, Move) for g in guesses)
        assert engine.history == (record,)
        assert engine.rounds_played == 1

    @pytest.mark.asyncio
    @patch("rps.engine.asyncio.sleep", new_callable=AsyncMock)
    async def test_callback_error_releases_guard(self, mock_sleep):
        """If the callback raises, nothing is recorded and the engine is idle again."""
        engine = _make_engine(thinking_delay=1.0, shuffle_interval=0.5)
        on_thinking = MagicMock(side_effect=RuntimeError("display broke"))

        with pytest.raises(RuntimeError):
            await engine.play_round(Move.ROCK, on_thinking=on_thinking)

        assert engine.is_resolving is False
        assert engine.rounds_played == 0
        assert engine.history == ()

    @pytest.mark.asyncio
    @patch("rps.engine.asyncio.sleep", new_callable=AsyncMock)
    async def test_logs_resolution(self, mock_sleep, caplog):
        engine = _make_engine()
        with caplog.at_level(logging.INFO, logger="rps.engine"):
            await engine.play_round(Move.SCISSORS)
        assert "Round 1: scissors vs" in caplog.text


class TestReentrancy:
    """Tests for ignoring moves while a round is resolving."""

    @pytest.mark.asyncio
    async def test_second_move_ignored_while_resolving(self):
        """A move made during the thinking delay is dropped."""
        engine = _make_engine(thinking_delay=0.05)

        first = asyncio.create_task(engine.play_round(Move.ROCK))
        await asyncio.sleep(0)
        assert engine.is_resolving is True
        assert engine.last_round is None

        ignored = await engine.play_round(Move.PAPER)
        assert ignored is None

        record = await first
        assert record is not None
        assert record.player_move is Move.ROCK
        assert engine.rounds_played == 1
        assert len(engine.history) == 1
        assert engine.is_resolving is False

    @pytest.mark.asyncio
    async def test_next_round_allowed_after_resolution(self):
        engine = _make_engine(thinking_delay=0.0)
        await engine.play_round(Move.ROCK)
        record = await engine.play_round(Move.PAPER)
        assert record is not None
        assert engine.rounds_played == 2

    @pytest.mark.asyncio
    async def test_ignored_move_logged_at_debug(self, caplog):
        engine = _make_engine(thinking_delay=0.05)
        with caplog.at_level(logging.DEBUG, logger="rps.engine"):
            first = asyncio.create_task(engine.play_round(Move.ROCK))
            await asyncio.sleep(0)
            await engine.play_round(Move.SCISSORS)
            await first
        assert "Ignoring scissors" in caplog.text


class TestScoringAndHistory:
    """Score and history invariants across many rounds."""

    @pytest.mark.asyncio
    @patch("rps.engine.asyncio.sleep", new_callable=AsyncMock)
    async def test_score_matches_outcomes(self, mock_sleep):
        """After N rounds the score equals the win and loss counts exactly."""
        engine = _make_engine(seed=99)
        moves = list(Move)
        wins = losses = draws = 0

        for i in range(25):
            record = await engine.play_round(moves[i % 3])
            if record.outcome is Outcome.WIN:
                wins += 1
            elif record.outcome is Outcome.LOSE:
                losses += 1
            else:
                draws += 1

        assert engine.score.as_tuple() == (wins, losses)
        assert engine.draws == draws
        assert engine.rounds_played == 25

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rounds", [0, 1, 9, 10, 11, 30])
    @patch("rps.engine.asyncio.sleep", new_callable=AsyncMock)
    async def test_history_length_capped(self, mock_sleep, rounds):
        """History holds min(N, 10) rounds, newest first."""
        engine = _make_engine()
        last = None
        for _ in range(rounds):
            last = await engine.play_round(Move.ROCK)

        assert len(engine.history) == min(rounds, 10)
        if rounds:
            assert engine.history[0] is last

    @pytest.mark.asyncio
    @patch("rps.engine.asyncio.sleep", new_callable=AsyncMock)
    async def test_custom_history_limit(self, mock_sleep):
        engine = _make_engine(history_limit=3)
        for _ in range(5):
            await engine.play_round(Move.PAPER)
        assert len(engine.history) == 3
        assert engine.rounds_played == 5

    @pytest.mark.asyncio
    @patch("rps.engine.asyncio.sleep", new_callable=AsyncMock)
    async def test_score_is_a_copy(self, mock_sleep):
        """Mutating the observed score does not touch the session."""
        engine = _make_engine()
        engine.score.player = 50
        assert engine.score.player == 0


class TestResetSession:
    """Tests for RoundEngine.reset_session()."""

    @pytest.mark.asyncio
    @patch("rps.engine.asyncio.sleep", new_callable=AsyncMock)
    async def test_reset_clears_everything(self, mock_sleep):
        engine = _make_engine()
        for _ in range(12):
            await engine.play_round(Move.SCISSORS)

        engine.reset_session()

        assert engine.score.as_tuple() == (0, 0)
        assert engine.history == ()
        assert engine.last_round is None
        assert engine.rounds_played == 0

    def test_reset_on_fresh_engine(self):
        engine = _make_engine()
        engine.reset_session()
        assert engine.score.as_tuple() == (0, 0)
        assert engine.history == ()

    @pytest.mark.asyncio
    async def test_reset_during_resolution(self):
        """A round in flight during a reset lands in the fresh session."""
        engine = _make_engine(thinking_delay=0.05)
        first = asyncio.create_task(engine.play_round(Move.ROCK))
        await asyncio.sleep(0)

        engine.reset_session()
        record = await first

        assert engine.rounds_played == 1
        assert engine.history == (record,)
