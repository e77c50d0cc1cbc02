"""Main entry point for Focus Session CLI."""

import typer

from focus_session_cli import __version__
from focus_session_cli.commands import config, focus
from focus_session_cli.utils.typer_helpers import SuggestingGroup
from focus_session_cli.utils.ui.console import get_console

app = typer.Typer(
    name="focus",
    cls=SuggestingGroup,
    help="Focus session timer with daily statistics",
    no_args_is_help=True,
)

console = get_console()


# Add subcommands
app.add_typer(focus.app, name="session", help="Focus sessions and statistics")
app.add_typer(config.app, name="config", help="Configuration management")


# Add top-level commands
@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]Focus Session CLI[/bold] version [cyan]{__version__}[/cyan]")


@app.command()
def start(
    minutes: str | None = typer.Option(
        None, "--minutes", "-m", help="Session length in minutes (prompted if omitted)"
    ),
) -> None:
    """Start a focus session (p pause/resume, s stop, t today, q quit)."""
    focus.start_session(minutes=minutes)


@app.command()
def stats(
    days: int = typer.Option(
        1, "--days", "-d", min=1, max=366, help="Number of days to show"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Output format: pretty, table, json, yaml"
    ),
) -> None:
    """Show today's focused time."""
    focus.show_stats(days=days, output=output)


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
