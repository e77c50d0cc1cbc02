"""Configuration management commands."""

import typer
from pydantic import ValidationError
from rich.prompt import Confirm

from focus_session_cli.commands.decorators import AppError, command_wrapper
from focus_session_cli.services.config_service import get_config_service
from focus_session_cli.utils.exit_codes import ERROR_INVALID_ARGS, ERROR_NOT_FOUND
from focus_session_cli.utils.ui.console import get_console
from focus_session_cli.utils.ui.formatters import format_output, format_success

app = typer.Typer(help="Configuration management commands")
console = get_console()


def _parse_value(value: str) -> str | int | float | bool:
    """Best-effort conversion of a command line value."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


@app.command("view")
@command_wrapper
def view_config(
    output: str = typer.Option("table", "--output", "-o", help="Output format"),
) -> None:
    """View current configuration."""
    format_output(get_config_service().config.model_dump(), output)


@app.command("get")
@command_wrapper
def get_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., focus.default_minutes)"),
) -> None:
    """Get a configuration value."""
    try:
        value = get_config_service().get(key)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    console.print(value)


@app.command("set")
@command_wrapper
def set_config(
    key: str = typer.Argument(..., help="Configuration key (e.g., focus.default_minutes)"),
    value: str = typer.Argument(..., help="Configuration value"),
) -> None:
    """Set a configuration value."""
    parsed_value = _parse_value(value)
    try:
        get_config_service().set(key, parsed_value)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    except ValidationError as e:
        message = e.errors()[0]["msg"] if e.errors() else str(e)
        raise AppError(f"Invalid value for '{key}': {message}", ERROR_INVALID_ARGS) from e
    format_success(f"Configuration '{key}' set to '{parsed_value}'")


@app.command("reset")
@command_wrapper
def reset_config(
    key: str | None = typer.Argument(None, help="Configuration key to reset"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes:
        target = f"'{key}'" if key else "all settings"
        if not Confirm.ask(f"Reset {target} to defaults?", console=console):
            console.print("[yellow]Cancelled[/yellow]")
            return

    try:
        get_config_service().reset_config(key)
    except KeyError as e:
        raise AppError(f"Configuration key '{key}' not found", ERROR_NOT_FOUND) from e
    format_success(f"'{key}' reset to default" if key else "Configuration reset to defaults")
