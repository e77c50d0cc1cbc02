"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from focus_session_cli.utils.ui.console import get_console

MAX_SUGGESTIONS = 3
SIMILARITY_CUTOFF = 0.6


class SuggestingGroup(TyperGroup):
    """Typer group that answers a mistyped command with close matches."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            suggestions = self.suggest(args[0]) if args else []
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{args[0]}" for "{ctx.info_name}"'
            )
            console.print()
            if len(suggestions) == 1:
                console.print("[yellow]Did you mean this?[/yellow]")
            else:
                console.print("[yellow]Did you mean one of these?[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {ctx.info_name} {suggestion}")
            raise typer.Exit(1) from e

    def suggest(self, attempted: str) -> list[str]:
        """Command names similar to *attempted*, best match first."""
        return get_close_matches(
            attempted, list(self.commands), n=MAX_SUGGESTIONS, cutoff=SIMILARITY_CUTOFF
        )
