"""Tests for exit code helpers."""

from focus_session_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    SUCCESS,
    get_exit_code_name,
)


def test_codes_are_distinct():
    codes = [SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_NOT_FOUND]
    assert len(set(codes)) == len(codes)
    assert SUCCESS == 0


def test_names():
    assert get_exit_code_name(ERROR_INVALID_ARGS) == "ERROR_INVALID_ARGS"
    assert get_exit_code_name(99) == "UNKNOWN(99)"

