"""Focus mode - session timer and daily statistics."""

from .duration import format_duration, minutes_to_milliseconds, today_key
from .host import FocusSessionHost
from .scheduler import LoopScheduler, SystemClock
from .statistics import STORAGE_KEY_STATS, StatisticsStore
from .timer import SessionState, SessionTimer, TimerStatus
from .ui import ConsolePresenter, TimerDisplay

__all__ = [
    "STORAGE_KEY_STATS",
    "ConsolePresenter",
    "FocusSessionHost",
    "LoopScheduler",
    "SessionState",
    "SessionTimer",
    "StatisticsStore",
    "SystemClock",
    "TimerDisplay",
    "TimerStatus",
    "format_duration",
    "minutes_to_milliseconds",
    "today_key",
]
