"""Clock and periodic scheduler used to drive the session timer.

The scheduler never starts threads. The host loop calls ``run_pending()``
and the due callback runs right there, so every state change happens on
the host's thread.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol


class Clock(Protocol):
    def now_ms(self) -> int: ...


class SystemClock:
    """Monotonic milliseconds, immune to wall-clock adjustments."""

    def now_ms(self) -> int:
        return time.monotonic_ns() // 1_000_000


class PeriodicScheduler(Protocol):
    @property
    def is_armed(self) -> bool: ...

    def arm(self, interval_ms: int, callback: Callable[[], None]) -> None: ...

    def cancel(self) -> None: ...


class LoopScheduler:
    """Cooperative periodic callback.

    Missed intervals are coalesced: if the host loop stalls for several
    intervals, the callback fires once and the next deadline is measured
    from that firing.
    """

    def __init__(self, clock: Clock | None = None):
        self.clock = clock or SystemClock()
        self._callback: Callable[[], None] | None = None
        self._interval_ms = 0
        self._next_due_ms = 0

    @property
    def is_armed(self) -> bool:
        return self._callback is not None

    def arm(self, interval_ms: int, callback: Callable[[], None]) -> None:
        """Fire *callback* every *interval_ms*. Replaces any armed callback."""
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self._callback = callback
        self._interval_ms = interval_ms
        self._next_due_ms = self.clock.now_ms() + interval_ms

    def cancel(self) -> None:
        """Disarm. Does nothing when nothing is armed."""
        self._callback = None

    def ms_until_due(self) -> int | None:
        """Milliseconds until the next firing, None when disarmed."""
        if self._callback is None:
            return None
        return max(0, self._next_due_ms - self.clock.now_ms())

    def run_pending(self) -> bool:
        """Fire the callback if its deadline has passed. Returns True if fired."""
        callback = self._callback
        if callback is None:
            return False

        now = self.clock.now_ms()
        if now < self._next_due_ms:
            return False

        # Set before calling so a re-arm inside the callback wins
        self._next_due_ms = now + self._interval_ms
        callback()
        return True
