"""Unit tests for main.py, the CLI entry point."""

from __future__ import annotations

from unittest.mock import patch

from typer.testing import CliRunner

from focus_session_cli import __version__
from focus_session_cli.main import app, main

runner = CliRunner()


def _invoke(*args):
    return runner.invoke(app, list(args))


class TestTopLevelHelp:
    def test_help_lists_commands(self):
        result = _invoke("--help")

        assert result.exit_code == 0
        for name in ("start", "stats", "session", "config", "version"):
            assert name in result.output

    def test_no_args_shows_help(self):
        result = _invoke()
        assert "Usage" in result.output


class TestVersion:
    def test_version(self):
        result = _invoke("version")

        assert result.exit_code == 0
        assert __version__ in result.output


class TestDelegation:
    def test_start_delegates(self):
        with patch("focus_session_cli.main.focus.start_session") as start_session:
            result = _invoke("start", "-m", "15")

        assert result.exit_code == 0
        start_session.assert_called_once_with(minutes="15")

    def test_start_without_minutes(self):
        with patch("focus_session_cli.main.focus.start_session") as start_session:
            _invoke("start")

        start_session.assert_called_once_with(minutes=None)

    def test_stats_delegates(self):
        with patch("focus_session_cli.main.focus.show_stats") as show_stats:
            result = _invoke("stats", "--days", "7", "-o", "json")

        assert result.exit_code == 0
        show_stats.assert_called_once_with(days=7, output="json")

    def test_stats_today_by_default(self):
        result = _invoke("stats")

        assert result.exit_code == 0
        assert "No focus sessions recorded today." in result.output

    def test_session_group(self):
        result = _invoke("session", "stats")

        assert result.exit_code == 0
        assert "No focus sessions recorded today." in result.output

    def test_config_group(self):
        result = _invoke("config", "get", "focus.default_minutes")

        assert result.exit_code == 0
        assert "25" in result.output


class TestSuggestions:
    def test_typo_suggests_command(self):
        result = _invoke("stas")

        assert result.exit_code == 1
        assert "Did you mean" in result.output
        assert "stats" in result.output


def test_main_invokes_app():
    with patch("focus_session_cli.main.app") as mock_app:
        main()
    mock_app.assert_called_once_with()
