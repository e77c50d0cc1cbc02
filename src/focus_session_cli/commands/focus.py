"""Focus session commands with a live countdown."""

import typer
from rich.prompt import Prompt

from focus_session_cli.commands.decorators import AppError, command_wrapper
from focus_session_cli.models.focus.duration import format_duration
from focus_session_cli.models.focus.host import FocusSessionHost
from focus_session_cli.models.focus.statistics import StatisticsStore
from focus_session_cli.models.focus.validation import parse_minutes, validate_minutes_input
from focus_session_cli.services.config_service import get_config_service
from focus_session_cli.services.state_store import JsonStateStore
from focus_session_cli.utils.exit_codes import ERROR_INVALID_ARGS
from focus_session_cli.utils.ui.console import get_console, get_session_console
from focus_session_cli.utils.ui.formatters import (
    OUTPUT_FORMATS,
    format_info,
    format_output,
    format_warning,
)

console = get_console()
app = typer.Typer(help="Focus sessions and daily statistics")


def _load_statistics() -> StatisticsStore:
    """Statistics as currently persisted."""
    stats = StatisticsStore(JsonStateStore(get_config_service().state_path))
    stats.load()
    return stats


@app.command("start")
@command_wrapper
def start_session(
    minutes: str | None = typer.Option(
        None, "--minutes", "-m", help="Session length in minutes (prompted if omitted)"
    ),
):
    """Start a focus session and show the live countdown.

    Keys while running: p pause/resume, s stop, t today's total, q quit.
    """
    config_service = get_config_service()
    focus_config = config_service.config.focus
    console = get_session_console()

    if minutes is None:
        minutes = Prompt.ask(
            "Session length in minutes",
            default=f"{focus_config.default_minutes:g}",
            console=console,
        )

    error = validate_minutes_input(minutes, max_minutes=focus_config.max_minutes)
    if error:
        raise AppError(error, exit_code=ERROR_INVALID_ARGS)

    host = FocusSessionHost(focus_config, config_service.state_path, console=console)
    try:
        outcome = host.run(parse_minutes(minutes))
    finally:
        host.deactivate()

    if outcome == "completed":
        console.print(f"[bold green]{host.stats.get_today_summary_text()}[/bold green]")
    elif outcome == "interrupted":
        format_warning("Session interrupted. Nothing was recorded.")
    elif outcome == "stopped":
        format_info("Session stopped. Nothing was recorded.")
    else:
        raise AppError("Session could not be started", exit_code=ERROR_INVALID_ARGS)


@app.command("stats")
@command_wrapper
def show_stats(
    days: int = typer.Option(
        1, "--days", "-d", min=1, max=366, help="Number of days to show"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format: pretty, table, json, yaml"
    ),
):
    """Show focused time for today, or per day for the last N days."""
    output = output or get_config_service().config.output.format
    if output not in OUTPUT_FORMATS:
        raise AppError(
            f"Unknown output format '{output}'. Use one of: {', '.join(OUTPUT_FORMATS)}",
            exit_code=ERROR_INVALID_ARGS,
        )

    stats = _load_statistics()

    if days == 1 and output == "pretty":
        console.print(stats.get_today_summary_text())
        return

    rows = [
        {"date": day, "focused": format_duration(ms), "milliseconds": ms}
        for day, ms in stats.recent_days(days)
    ]
    format_output(rows, output)
