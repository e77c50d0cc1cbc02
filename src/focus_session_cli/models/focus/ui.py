"""Terminal presentation of the focus timer."""

from __future__ import annotations

from collections import deque
from typing import Literal

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .timer import NOT_STARTED_TEXT, NOT_STARTED_TOOLTIP, SessionState

MessageLevel = Literal["info", "warning", "error"]

_LEVEL_STYLES = {
    "info": ("bold blue", "Info"),
    "warning": ("bold yellow", "Warning"),
    "error": ("bold red", "Error"),
}


class ConsolePresenter:
    """Holds the status line and queues messages for the host loop.

    Messages may be posted from the statistics writer thread, so they are
    queued and printed by whoever calls ``flush_messages``.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self.text = NOT_STARTED_TEXT
        self.tooltip = NOT_STARTED_TOOLTIP
        self.visible = False
        self.disposed = False
        self._messages: deque[tuple[MessageLevel, str]] = deque()

    def set_status(self, text: str, tooltip: str) -> None:
        self.text = text
        self.tooltip = tooltip

    def show(self) -> None:
        if not self.disposed:
            self.visible = True

    def hide(self) -> None:
        self.visible = False

    def dispose(self) -> None:
        self.visible = False
        self.disposed = True

    def show_info(self, message: str) -> None:
        self._messages.append(("info", message))

    def show_warning(self, message: str) -> None:
        self._messages.append(("warning", message))

    def show_error(self, message: str) -> None:
        self._messages.append(("error", message))

    def pending_messages(self) -> list[tuple[MessageLevel, str]]:
        return list(self._messages)

    def flush_messages(self, console: Console | None = None) -> int:
        """Print and drop queued messages. Returns how many were printed."""
        console = console or self.console
        count = 0
        while self._messages:
            level, message = self._messages.popleft()
            style, label = _LEVEL_STYLES[level]
            console.print(f"[{style}]{label}:[/{style}] {message}")
            count += 1
        return count


class TimerDisplay:
    """Builds the live panel shown while a session is on screen."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def create_panel(
        self, state: SessionState, presenter: ConsolePresenter, today_text: str = ""
    ) -> Panel:
        """Render the status panel for *state*."""
        if state.status == "paused":
            title, color = "⏸  PAUSED", "yellow"
        elif state.status == "running":
            title, color = "🍅 Focus", "cyan"
        elif presenter.text != NOT_STARTED_TEXT:
            title, color = "✓ COMPLETED", "green"
        else:
            title, color = "Focus", "dim"

        return Panel(
            Align.center(self._create_body(state, presenter, color, today_text)),
            title=Text(title, style=f"bold {color}"),
            subtitle=self._create_footer_text(state),
            border_style=color,
            padding=(1, 2),
        )

    def _create_body(
        self,
        state: SessionState,
        presenter: ConsolePresenter,
        color: str,
        today_text: str,
    ) -> Group:
        components = [Text(presenter.text, style=f"bold {color}", justify="center")]

        if state.requested_ms > 0:
            seconds = state.remaining_ms // 1000
            clock = Text(
                f"{seconds // 60:02d}:{seconds % 60:02d}",
                style=self._timer_color(state),
                justify="center",
            )
            components.append(clock)

            bar_width = 40
            progress_pct = int(state.progress * 100)
            filled = int(bar_width * progress_pct / 100)
            bar = "▓" * filled + "░" * (bar_width - filled)
            components.append(Text(f"{bar}  {progress_pct}%", style="dim", justify="center"))

        components.append(Text(presenter.tooltip, style="dim italic", justify="center"))
        if today_text:
            components.append(Text(""))
            components.append(Text(today_text, style="dim", justify="center"))
        return Group(*components)

    @staticmethod
    def _timer_color(state: SessionState) -> str:
        if state.status == "paused":
            return "yellow"
        if state.remaining_ms < 60_000:
            return "red"
        if state.remaining_ms < 300_000:
            return "yellow"
        return "cyan"

    @staticmethod
    def _create_footer_text(state: SessionState) -> Text:
        """Footer with keyboard hints."""
        if state.status == "paused":
            hints = "'p' resume  •  's' stop  •  't' today  •  'q' quit"
        elif state.status == "running":
            hints = "'p' pause  •  's' stop  •  't' today  •  'q' quit"
        else:
            hints = "'q' quit"
        return Text(hints, style="dim")
