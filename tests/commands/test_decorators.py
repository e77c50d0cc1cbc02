"""Unit tests for command decorators."""

from unittest.mock import patch

import pytest
import typer

from focus_session_cli.commands.decorators import AppError, command_wrapper
from focus_session_cli.utils.exit_codes import ERROR_GENERAL, ERROR_INVALID_ARGS


class TestAppError:
    def test_default_exit_code(self):
        assert AppError("boom").exit_code == ERROR_GENERAL

    def test_custom_exit_code(self):
        err = AppError("bad input", exit_code=ERROR_INVALID_ARGS)
        assert err.exit_code == ERROR_INVALID_ARGS
        assert str(err) == "bad input"


class TestCommandWrapper:
    def test_returns_result(self):
        @command_wrapper
        def cmd():
            return 42

        assert cmd() == 42

    def test_preserves_name(self):
        @command_wrapper
        def my_command():
            """Doc."""

        assert my_command.__name__ == "my_command"
        assert my_command.__doc__ == "Doc."

    def test_app_error_becomes_exit(self):
        @command_wrapper
        def cmd():
            raise AppError("bad input", exit_code=ERROR_INVALID_ARGS)

        with patch("focus_session_cli.commands.decorators.format_error") as fmt:
            with pytest.raises(typer.Exit) as exc_info:
                cmd()

        assert exc_info.value.exit_code == ERROR_INVALID_ARGS
        fmt.assert_called_once_with("bad input")

    def test_typer_exit_passes_through(self):
        @command_wrapper
        def cmd():
            raise typer.Exit(0)

        with pytest.raises(typer.Exit) as exc_info:
            cmd()
        assert exc_info.value.exit_code == 0

    def test_unexpected_error_becomes_exit_1(self):
        @command_wrapper
        def cmd():
            raise ValueError("kaboom")

        with patch("focus_session_cli.commands.decorators.format_error") as fmt:
            with pytest.raises(typer.Exit) as exc_info:
                cmd()

        assert exc_info.value.exit_code == ERROR_GENERAL
        assert "kaboom" in fmt.call_args[0][0]

    def test_failures_are_logged(self, tmp_path):
        @command_wrapper
        def failing_cmd():
            raise ValueError("kaboom")

        with patch("focus_session_cli.commands.decorators.format_error"):
            with pytest.raises(typer.Exit):
                failing_cmd()

        from focus_session_cli.utils.logger import get_logger

        for handler in get_logger().handlers:
            handler.flush()
        content = (tmp_path / "focus.log").read_text()
        assert "command started: failing_cmd" in content
        assert "command failed: failing_cmd" in content
        assert "ERROR_GENERAL" in content

    def test_app_error_logs_exit_code_name(self, tmp_path):
        @command_wrapper
        def strict_cmd():
            raise AppError("bad input", exit_code=ERROR_INVALID_ARGS)

        with patch("focus_session_cli.commands.decorators.format_error"):
            with pytest.raises(typer.Exit):
                strict_cmd()

        from focus_session_cli.utils.logger import get_logger

        for handler in get_logger().handlers:
            handler.flush()
        content = (tmp_path / "focus.log").read_text()
        assert "command failed: strict_cmd" in content
        assert "ERROR_INVALID_ARGS - bad input" in content
