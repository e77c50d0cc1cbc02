"""Focus Session CLI - focus timer with daily statistics."""

__version__ = "0.3.0"
