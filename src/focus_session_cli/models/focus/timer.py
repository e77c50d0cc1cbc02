"""Focus session countdown state machine.

``SessionTimer`` owns the countdown. It is driven from outside: the host
calls ``start``, ``pause_or_resume`` and ``stop``, and a periodic scheduler
calls ``tick``. Completed sessions are reported to the statistics store;
stopped sessions are discarded.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from dataclasses import dataclass
from typing import Literal, Protocol

from .duration import format_duration, is_finite_number, minutes_to_milliseconds
from .scheduler import Clock, PeriodicScheduler
from .statistics import StatisticsStore

TimerStatus = Literal["idle", "running", "paused", "finished"]

TICK_INTERVAL_MS = 1000

NOT_STARTED_TEXT = "Focus session not started"
NOT_STARTED_TOOLTIP = "Start a new session to begin."
ACTIVE_TOOLTIP = "Pause/resume or stop the session with the focus commands."
FINISHED_TEXT = "Focus session complete!"
FINISHED_TOOLTIP = "Great work!"

logger = logging.getLogger(__name__)


class Presenter(Protocol):
    """Where the timer pushes its status text and messages."""

    def set_status(self, text: str, tooltip: str) -> None: ...

    def show(self) -> None: ...

    def hide(self) -> None: ...

    def dispose(self) -> None: ...

    def show_info(self, message: str) -> None: ...

    def show_warning(self, message: str) -> None: ...

    def show_error(self, message: str) -> None: ...


@dataclass(frozen=True)
class SessionState:
    """Read-only snapshot of the timer."""

    status: TimerStatus
    remaining_ms: int
    last_tick_ms: int
    requested_ms: int = 0
    elapsed_ms: int = 0

    @property
    def is_idle(self) -> bool:
        return self.status == "idle" and self.remaining_ms == 0

    @property
    def progress(self) -> float:
        """Fraction of the requested duration already spent (0.0 to 1.0)."""
        if self.requested_ms <= 0:
            return 0.0
        done = self.requested_ms - self.remaining_ms
        return min(1.0, max(0.0, done / self.requested_ms))


def status_text(state: SessionState) -> tuple[str, str]:
    """Status text and tooltip for *state*."""
    if state.is_idle:
        return NOT_STARTED_TEXT, NOT_STARTED_TOOLTIP
    label = "running" if state.status == "running" else "paused"
    return f"Focus: {format_duration(state.remaining_ms)} ({label})", ACTIVE_TOOLTIP


class SessionTimer:
    """Single focus session countdown.

    States: ``idle`` -> ``running`` <-> ``paused``; ``running`` -> ``finished``
    -> ``idle`` when the countdown reaches zero; any state -> ``idle`` on
    ``stop``. Starting a session always replaces the current one.
    """

    def __init__(
        self,
        stats: StatisticsStore,
        scheduler: PeriodicScheduler,
        presenter: Presenter,
        clock: Clock,
        tick_interval_ms: int = TICK_INTERVAL_MS,
    ):
        self._stats = stats
        self._scheduler = scheduler
        self._presenter = presenter
        self._clock = clock
        self._tick_interval_ms = tick_interval_ms

        self._status: TimerStatus = "idle"
        self._remaining_ms = 0
        self._last_tick_ms = 0
        self._requested_ms = 0
        self._elapsed_ms = 0
        self._disposed = False
        self.sessions_completed = 0

    @property
    def state(self) -> SessionState:
        return SessionState(
            status=self._status,
            remaining_ms=self._remaining_ms,
            last_tick_ms=self._last_tick_ms,
            requested_ms=self._requested_ms,
            elapsed_ms=self._elapsed_ms,
        )

    @property
    def disposed(self) -> bool:
        return self._disposed

    def start(self, minutes) -> bool:
        """Start a new session of *minutes*, replacing any current one.

        Returns False, leaving the state untouched, when *minutes* is not a
        finite positive number or the timer has been disposed.
        """
        if self._disposed:
            logger.warning("start called on a disposed timer")
            return False

        ms = minutes_to_milliseconds(minutes)
        if not is_finite_number(minutes) or minutes <= 0 or ms <= 0:
            logger.info("rejected session length %r", minutes)
            self._presenter.show_warning(
                "The session length must be a positive number of minutes."
            )
            return False

        self._scheduler.cancel()
        self._remaining_ms = ms
        self._requested_ms = ms
        self._elapsed_ms = 0
        self._status = "running"
        self._last_tick_ms = self._clock.now_ms()

        self._presenter.show()
        self._refresh_display()
        self._scheduler.arm(self._tick_interval_ms, self.tick)
        logger.debug("session started: %d ms", ms)
        return True

    def tick(self) -> None:
        """Charge the time since the last tick. Ignored unless running."""
        if self._status != "running":
            return

        now = self._clock.now_ms()
        elapsed = max(0, now - self._last_tick_ms)
        self._last_tick_ms = now
        self._remaining_ms -= elapsed
        self._elapsed_ms += elapsed

        if self._remaining_ms <= 0:
            self._remaining_ms = 0
            self._refresh_display()
            self._finish()
        else:
            self._refresh_display()

    def pause_or_resume(self) -> None:
        """Pause a running session or resume a paused one."""
        if self._disposed:
            return

        if self._status == "idle" and self._remaining_ms == 0:
            self._presenter.show_info(
                "No focus session is running. Start one first."
            )
            return

        if self._status == "running":
            self._status = "paused"
            self._scheduler.cancel()
            logger.debug("session paused with %d ms left", self._remaining_ms)
        elif self._status == "paused":
            self._status = "running"
            # The paused interval must not be charged on the next tick
            self._last_tick_ms = self._clock.now_ms()
            self._scheduler.arm(self._tick_interval_ms, self.tick)
            logger.debug("session resumed with %d ms left", self._remaining_ms)
        self._refresh_display()

    def stop(self, announce: bool = False) -> None:
        """Abandon the current session. Partial progress is not recorded."""
        if self._disposed:
            return

        was_active = self._status in ("running", "paused")
        self._scheduler.cancel()
        self._reset()
        self._refresh_display()
        if was_active:
            logger.debug("session stopped")
        if announce:
            self._presenter.show_info("Focus session stopped.")

    def dispose(self) -> None:
        """Cancel the tick and release the display. Safe to call repeatedly."""
        if self._disposed:
            return
        self._scheduler.cancel()
        if self._status in ("running", "paused"):
            self._status = "idle"
        self._presenter.dispose()
        self._disposed = True

    def _finish(self) -> None:
        # Charged time overshoots by up to one tick; record what was asked for
        spent_ms = max(0, min(self._elapsed_ms, self._requested_ms))

        self._status = "finished"
        self.sessions_completed += 1
        self._scheduler.cancel()
        self._presenter.set_status(FINISHED_TEXT, FINISHED_TOOLTIP)
        logger.info("session finished: %d ms focused", spent_ms)

        recorded = self._stats.add_focused_milliseconds(spent_ms)
        recorded.add_done_callback(self._on_recorded)

        self._reset()

    def _on_recorded(self, future: Future) -> None:
        if future.result():
            self._presenter.show_info(
                "Focus session complete! The time was added to your statistics."
            )

    def _reset(self) -> None:
        self._status = "idle"
        self._remaining_ms = 0
        self._requested_ms = 0
        self._elapsed_ms = 0

    def _refresh_display(self) -> None:
        text, tooltip = status_text(self.state)
        self._presenter.set_status(text, tooltip)
