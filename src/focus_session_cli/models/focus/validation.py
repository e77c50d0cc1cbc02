"""Parsing and validation of the session length typed by the user."""

from __future__ import annotations

from .duration import is_finite_number

DEFAULT_MINUTES = 25
MAX_MINUTES = 480


def parse_minutes(value: str | None) -> float | None:
    """Parse a minutes string, accepting ``,`` as the decimal separator.

    Returns None when the text is not a finite number.
    """
    if value is None:
        return None
    try:
        number = float(value.strip().replace(",", ".", 1))
    except ValueError:
        return None
    return number if is_finite_number(number) else None


def validate_minutes_input(value: str | None, max_minutes: float = MAX_MINUTES) -> str | None:
    """Return an error message for *value*, or None if it is acceptable."""
    if not value or not value.strip():
        return "Enter the session length in minutes."

    number = parse_minutes(value)
    if number is None:
        return "Enter a numeric value."
    if number <= 0:
        return "The session length must be greater than zero."
    if number > max_minutes:
        return f"That is too long. Enter at most {max_minutes:g} minutes."
    return None
