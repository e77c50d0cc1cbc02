"""Per-day focused time, persisted through a key-value slot."""

from __future__ import annotations

import logging
import math
from concurrent.futures import Future
from datetime import date, datetime, timedelta
from typing import Any, Protocol

from .duration import date_key, format_duration, is_finite_number, today_key

STORAGE_KEY_STATS = "focus_session.stats"

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Durable slot the statistics are written to."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def update(self, key: str, value: Any) -> Future: ...


def _resolved(value: Any) -> Future:
    future: Future = Future()
    future.set_result(value)
    return future


class StatisticsStore:
    """Accumulates focused milliseconds per local calendar day.

    The mapping is owned here: callers only add to it and read from it.
    Persistence is best-effort; a failed write is logged and the in-memory
    totals are kept.
    """

    def __init__(self, storage: KeyValueStore, storage_key: str = STORAGE_KEY_STATS):
        self._storage = storage
        self._storage_key = storage_key
        self._stats: dict[str, int] = {}

    def load(self) -> dict[str, int]:
        """Load the persisted mapping. Never raises; bad data loads as empty."""
        try:
            raw = self._storage.get(self._storage_key)
        except Exception:
            logger.warning("failed to read focus statistics", exc_info=True)
            raw = None

        if raw is None:
            self._stats = {}
            return dict(self._stats)

        if not isinstance(raw, dict):
            logger.warning(
                "focus statistics payload is %s, not a mapping; starting empty",
                type(raw).__name__,
            )
            self._stats = {}
            return dict(self._stats)

        stats: dict[str, int] = {}
        for key, value in raw.items():
            if not isinstance(key, str) or not is_finite_number(value) or value < 0:
                logger.warning("dropping malformed statistics entry %r=%r", key, value)
                continue
            stats[key] = int(value)
        self._stats = stats
        return dict(self._stats)

    def add_focused_milliseconds(self, delta_ms) -> Future:
        """Add *delta_ms* to today's bucket and persist the whole mapping.

        Returns a future resolving to True when the write succeeded and False
        when it failed. Invalid deltas resolve to False without touching
        anything.
        """
        if not is_finite_number(delta_ms):
            return _resolved(False)
        whole_ms = math.floor(delta_ms)
        if whole_ms <= 0:
            return _resolved(False)

        key = today_key()
        self._stats[key] = self._stats.get(key, 0) + whole_ms
        logger.debug("added %d ms to %s (total %d ms)", whole_ms, key, self._stats[key])
        return self._save()

    def _save(self) -> Future:
        result: Future = Future()

        try:
            write = self._storage.update(self._storage_key, dict(self._stats))
        except Exception as e:
            logger.error("failed to persist focus statistics: %s", e)
            result.set_result(False)
            return result

        def _on_done(done: Future) -> None:
            error = done.exception()
            if error is not None:
                logger.error("failed to persist focus statistics: %s", error)
                result.set_result(False)
            else:
                result.set_result(True)

        write.add_done_callback(_on_done)
        return result

    def get_milliseconds(self, day: date) -> int:
        """Focused milliseconds recorded for *day*."""
        return self._stats.get(date_key(day), 0)

    def get_today_milliseconds(self) -> int:
        """Focused milliseconds recorded today."""
        return self._stats.get(today_key(), 0)

    def get_today_summary_text(self) -> str:
        """Human-readable sentence describing today's focused time."""
        ms = self.get_today_milliseconds()
        if ms <= 0:
            return "No focus sessions recorded today."
        return f"Today you focused for {format_duration(ms)}."

    def recent_days(self, days: int = 7) -> list[tuple[str, int]]:
        """``(date_key, ms)`` for the last *days* days, newest first."""
        today = datetime.now().date()
        return [
            (date_key(day), self._stats.get(date_key(day), 0))
            for day in (today - timedelta(days=offset) for offset in range(max(0, days)))
        ]
