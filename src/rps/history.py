"""Bounded, newest-first log of resolved rounds."""

from collections import deque
from typing import Iterator

from rps.config import DEFAULT_HISTORY_LIMIT
from rps.models import RoundRecord


class HistoryLog:
    """The most recent rounds, newest first.

    Pushing onto a full log evicts the oldest record. Records themselves
    are frozen, so the log only ever adds or drops whole entries.
    """

    def __init__(self, limit: int = DEFAULT_HISTORY_LIMIT):
        if limit < 1:
            raise ValueError(f"history limit must be at least 1, got {limit}")
        self._records: deque[RoundRecord] = deque(maxlen=limit)

    @property
    def limit(self) -> int:
        return self._records.maxlen

    @property
    def latest(self) -> RoundRecord | None:
        """Most recently pushed record, or ``None`` when empty."""
        return self._records[0] if self._records else None

    def push(self, record: RoundRecord) -> None:
        self._records.appendleft(record)

    def clear(self) -> None:
        self._records.clear()

    def records(self) -> tuple[RoundRecord, ...]:
        """Snapshot of the log, newest first."""
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[RoundRecord]:
        return iter(self.records())
