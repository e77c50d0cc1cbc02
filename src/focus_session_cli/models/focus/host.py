"""Interactive host for one focus session.

The host owns the lifecycle: ``activate`` wires a ``SessionTimer`` to its
collaborators, ``run`` drives the live display and key presses, and
``deactivate`` disposes everything and drains pending statistics writes.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from rich.console import Console
from rich.live import Live

from focus_session_cli.services.state_store import JsonStateStore

from .keyboard import create_keyboard_handler
from .scheduler import Clock, LoopScheduler, SystemClock
from .statistics import StatisticsStore
from .timer import SessionTimer
from .ui import ConsolePresenter, TimerDisplay

if TYPE_CHECKING:
    from focus_session_cli.models.config_models import FocusConfig

SessionOutcome = Literal["completed", "stopped", "interrupted", "rejected"]

POLL_INTERVAL_S = 0.1

logger = logging.getLogger(__name__)


class FocusSessionHost:
    """Runs focus sessions in the terminal."""

    def __init__(
        self,
        config: FocusConfig,
        state_path: Path,
        console: Console | None = None,
        clock: Clock | None = None,
        keyboard_factory: Callable = create_keyboard_handler,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.state_path = state_path
        self.console = console or Console()
        self.clock = clock or SystemClock()
        self.keyboard_factory = keyboard_factory
        self.sleep = sleep

        self.store: JsonStateStore | None = None
        self.stats: StatisticsStore | None = None
        self.scheduler: LoopScheduler | None = None
        self.presenter: ConsolePresenter | None = None
        self.timer: SessionTimer | None = None
        self._stop_requested = False

    def activate(self) -> SessionTimer:
        """Build the timer and its collaborators. Idempotent."""
        if self.timer is not None:
            return self.timer

        self.store = JsonStateStore(self.state_path)
        self.stats = StatisticsStore(self.store)
        self.stats.load()
        self.scheduler = LoopScheduler(self.clock)
        self.presenter = ConsolePresenter(self.console)
        self.timer = SessionTimer(
            self.stats,
            self.scheduler,
            self.presenter,
            self.clock,
            tick_interval_ms=self.config.tick_interval_ms,
        )
        logger.debug("focus host activated (state: %s)", self.state_path)
        return self.timer

    def deactivate(self) -> None:
        """Dispose the timer, finish pending writes and print late messages."""
        if self.timer is not None:
            self.timer.dispose()
        if self.store is not None:
            self.store.close()
        if self.presenter is not None:
            self.presenter.flush_messages(self.console)
        self.timer = None
        logger.debug("focus host deactivated")

    def handle_key(self, key: str) -> bool:
        """Dispatch one key press. Returns False when the host should exit."""
        timer = self.timer
        if timer is None:
            return False

        if self._stop_requested:
            self._stop_requested = False
            if key in ("y", "s"):
                timer.stop(announce=True)
                return False
            self.presenter.show_info("Stop cancelled, the session continues.")
            return True

        if key == "p":
            timer.pause_or_resume()
        elif key == "s":
            if self.config.confirm_stop:
                self._stop_requested = True
                self.presenter.show_warning(
                    "Stop the session? Progress will not be recorded. "
                    "Press 'y' to confirm, any other key to continue."
                )
            else:
                timer.stop(announce=True)
                return False
        elif key == "t":
            self.presenter.show_info(self.stats.get_today_summary_text())
        elif key == "q":
            timer.stop(announce=False)
            return False
        return True

    def run(self, minutes: float) -> SessionOutcome:
        """Run one session of *minutes* until it completes or is stopped."""
        timer = self.activate()
        completed_before = timer.sessions_completed

        if not timer.start(minutes):
            self.presenter.flush_messages(self.console)
            return "rejected"

        display = TimerDisplay(self.console)
        keyboard = self.keyboard_factory()
        outcome: SessionOutcome = "stopped"

        try:
            with Live(
                self._panel(display),
                console=self.console,
                refresh_per_second=4,
            ) as live:
                while True:
                    key = keyboard.get_key()
                    if key and not self.handle_key(key):
                        break

                    self.scheduler.run_pending()
                    self.presenter.flush_messages(live.console)

                    if timer.state.is_idle:
                        break

                    live.update(self._panel(display))
                    self.sleep(POLL_INTERVAL_S)

                if timer.sessions_completed > completed_before:
                    outcome = "completed"
                live.update(self._panel(display))
        except KeyboardInterrupt:
            timer.stop(announce=False)
            outcome = "interrupted"
        finally:
            keyboard.stop()

        logger.info("session ended: %s", outcome)
        return outcome

    def _panel(self, display: TimerDisplay):
        return display.create_panel(
            self.timer.state,
            self.presenter,
            today_text=self.stats.get_today_summary_text(),
        )
