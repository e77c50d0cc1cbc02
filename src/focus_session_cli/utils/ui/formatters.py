"""Output formatters for different formats."""

import json
from typing import Any

import yaml
from rich.console import Console
from rich.table import Table

console = Console()

OUTPUT_FORMATS = ("pretty", "table", "json", "yaml")


def format_output(data: Any, output_format: str = "pretty") -> None:
    """Format and display output based on format."""
    if output_format == "json":
        print(json.dumps(data, indent=2, default=str))
    elif output_format == "yaml":
        print(yaml.dump(data, default_flow_style=False, sort_keys=False))
    elif output_format == "table":
        format_table(data)
    else:
        # Default to pretty
        format_pretty(data)


def format_table(data: Any) -> None:
    """Format data as a table."""
    if not data:
        console.print("[yellow]No data to display[/yellow]")
        return

    if isinstance(data, list):
        if isinstance(data[0], dict):
            format_dict_table(data)
        else:
            for item in data:
                console.print(item)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_dict_table(items: list[dict]) -> None:
    """Format a list of dictionaries as a table."""
    if not items:
        console.print("[yellow]No items found[/yellow]")
        return

    columns = list(items[0].keys())

    table = Table(show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col.replace("_", " ").title())

    for item in items:
        row = []
        for col in columns:
            value = item.get(col, "")
            if isinstance(value, bool):
                value = "✓" if value else "✗"
            elif value is None:
                value = "-"
            else:
                value = str(value)
            row.append(value)
        table.add_row(*row)

    console.print(table)


def format_single_item(item: dict) -> None:
    """Format a single item as key-value pairs."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in item.items():
        formatted_key = key.replace("_", " ").title()
        if isinstance(value, bool):
            formatted_value = "✓" if value else "✗"
        elif isinstance(value, dict):
            formatted_value = ", ".join(f"{k}={v}" for k, v in value.items())
        elif value is None:
            formatted_value = "-"
        else:
            formatted_value = str(value)
        table.add_row(formatted_key, formatted_value)

    console.print(table)


def format_pretty(data: Any) -> None:
    """Format data in a human-friendly way."""
    if isinstance(data, list) and data and isinstance(data[0], dict):
        if "date" in data[0] and "focused" in data[0]:
            format_daily_pretty(data)
            return
        format_dict_table(data)
    elif isinstance(data, dict):
        format_single_item(data)
    else:
        console.print(data)


def format_daily_pretty(days: list[dict]) -> None:
    """Render per-day focus totals with a bar relative to the busiest day."""
    peak = max((day.get("milliseconds", 0) for day in days), default=0)

    for day in days:
        ms = day.get("milliseconds", 0)
        percentage = (ms / peak * 100) if peak > 0 else 0
        bar = get_progress_bar(percentage)
        color = "cyan" if ms > 0 else "dim"
        console.print(
            f"[bold]{day['date']}[/bold]  [{color}]{bar}[/{color}]  {day['focused']}"
        )


def format_error(message: str) -> None:
    """Format and display an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def format_info(message: str) -> None:
    """Format and display an info message."""
    console.print(f"[bold blue]Info:[/bold blue] {message}")


def get_progress_bar(percentage: float) -> str:
    """Get a progress bar representation."""
    percentage = max(0.0, min(100.0, percentage))
    filled = int(percentage / 10)
    empty = 10 - filled
    return "▓" * filled + "░" * empty
