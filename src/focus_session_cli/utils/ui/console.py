"""Shared Rich consoles for Focus Session CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=4)
def get_console(highlight: bool = True, color: bool = True) -> Console:
    """Cached console; ``color=False`` strips styling from everything printed."""
    return Console(highlight=highlight, no_color=not color)


def get_session_console() -> Console:
    """Console for the live session view, honouring ``output.color``."""
    from focus_session_cli.services.config_service import get_config_service

    return get_console(color=get_config_service().config.output.color)
