"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state and a
fake clock so timer tests never wait on wall-clock time.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from unittest.mock import patch

import pytest

from focus_session_cli.models.focus.scheduler import LoopScheduler
from focus_session_cli.models.focus.statistics import StatisticsStore
from focus_session_cli.models.focus.ui import ConsolePresenter


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, start_ms: int = 1_000_000):
        self.now = start_ms

    def now_ms(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class MemoryStore:
    """In-memory persistence slot with completed futures."""

    def __init__(self, data: dict | None = None):
        self.data = dict(data or {})
        self.writes: list[tuple[str, object]] = []
        self.fail_writes = False
        self.fail_reads = False
        self.pending: list[Future] = []
        self.defer_writes = False

    def get(self, key, default=None):
        if self.fail_reads:
            raise OSError("disk unavailable")
        return self.data.get(key, default)

    def update(self, key, value) -> Future:
        self.data[key] = value
        self.writes.append((key, dict(value) if isinstance(value, dict) else value))
        future: Future = Future()
        if self.defer_writes:
            self.pending.append(future)
        elif self.fail_writes:
            future.set_exception(OSError("disk full"))
        else:
            future.set_result(None)
        return future


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolate_dirs(tmp_path):
    """Send config, data and log files to *tmp_path* and reset singletons."""
    import focus_session_cli.utils.logger as logger_mod
    from focus_session_cli.services.config_service import get_config_service

    tmpdir = str(tmp_path)
    get_config_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("focus_session_cli").handlers.clear()

    with patch("focus_session_cli.services.config_service.user_config_dir", return_value=tmpdir):
        with patch("focus_session_cli.services.config_service.user_data_dir", return_value=tmpdir):
            with patch("focus_session_cli.utils.logger.user_log_dir", return_value=tmpdir):
                yield tmp_path

    get_config_service.cache_clear()
    logger_mod._logger = None
    logging.getLogger("focus_session_cli").handlers.clear()
    logging.getLogger("focus_session_cli").propagate = True
    logging.getLogger("focus_session_cli").setLevel(logging.NOTSET)


# ---------------------------------------------------------------------------
# Timer building blocks
# ---------------------------------------------------------------------------


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def memory_store():
    return MemoryStore()


@pytest.fixture()
def stats(memory_store):
    store = StatisticsStore(memory_store)
    store.load()
    return store


@pytest.fixture()
def scheduler(clock):
    return LoopScheduler(clock)


@pytest.fixture()
def presenter():
    return ConsolePresenter()
