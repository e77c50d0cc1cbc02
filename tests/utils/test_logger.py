"""Tests for the application logger utility."""

from __future__ import annotations

import logging
from unittest.mock import patch

from focus_session_cli.utils.logger import get_logger


def test_get_logger_creates_log_file(tmp_path):
    """Logger creates the log file inside user_log_dir."""
    logger = get_logger()

    assert (tmp_path / "focus.log").exists(), "Log file should be created on first use"
    assert isinstance(logger, logging.Logger)
    assert logger.name == "focus_session_cli"


def test_get_logger_returns_singleton():
    assert get_logger() is get_logger()


def test_get_logger_writes_message(tmp_path):
    logger = get_logger()
    logger.info("hello from test")

    for handler in logger.handlers:
        handler.flush()

    assert "hello from test" in (tmp_path / "focus.log").read_text()


def test_module_loggers_propagate_to_app_log(tmp_path):
    """Records from ``logging.getLogger(__name__)`` land in the same file."""
    logger = get_logger()
    logging.getLogger("focus_session_cli.models.focus.timer").debug("tick tock")

    for handler in logger.handlers:
        handler.flush()

    assert "tick tock" in (tmp_path / "focus.log").read_text()


def test_get_logger_creates_parent_dirs(tmp_path):
    nested = tmp_path / "a" / "b" / "c"
    with patch("focus_session_cli.utils.logger.user_log_dir", return_value=str(nested)):
        get_logger()

    assert nested.is_dir()


def test_log_file_path(tmp_path):
    from focus_session_cli.utils.logger import log_file_path

    assert log_file_path() == tmp_path / "focus.log"


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("FOCUS_LOG_LEVEL", "warning")

    assert get_logger().level == logging.WARNING


def test_unknown_level_falls_back_to_debug(monkeypatch):
    monkeypatch.setenv("FOCUS_LOG_LEVEL", "chatty")

    assert get_logger().level == logging.DEBUG
