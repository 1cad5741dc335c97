"""Typer helpers: typo suggestions for the root command group."""

from difflib import get_close_matches

import click
import typer
from typer.core import TyperGroup

from vibelist.utils.exit_codes import ERROR_GENERAL
from vibelist.utils.ui.console import get_console

MAX_SUGGESTIONS = 3
SIMILARITY_CUTOFF = 0.6


def suggest_commands(attempted: str, names: list[str]) -> list[str]:
    """Commands that look like *attempted*, prefix matches first."""
    prefixed = [name for name in names if name.startswith(attempted)]
    similar = get_close_matches(attempted, names, n=MAX_SUGGESTIONS, cutoff=SIMILARITY_CUTOFF)
    return list(dict.fromkeys(prefixed + similar))[:MAX_SUGGESTIONS]


class SuggestingGroup(TyperGroup):
    """Root group that answers an unknown command with close matches."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            suggestions = suggest_commands(args[0], sorted(self.commands)) if args else []
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{args[0]}" for "{ctx.info_name}"'
            )
            console.print()
            heading = "Did you mean this?" if len(suggestions) == 1 else "Did you mean one of these?"
            console.print(f"[yellow]{heading}[/yellow]")
            for name in suggestions:
                console.print(f"        {name}")
            raise typer.Exit(ERROR_GENERAL) from e
