"""Typer helper utilities."""

from difflib import get_close_matches

import typer
from typer.core import TyperGroup

from todotask_cli.utils.ui.console import get_console


def suggest_commands(attempted: str, commands: list[str]) -> list[str]:
    """Up to three known command names close to ``attempted``."""
    return get_close_matches(attempted, commands, n=3, cutoff=0.6)


class SuggestingGroup(TyperGroup):
    """Typer group that answers a mistyped command with close matches."""

    def resolve_command(self, ctx, args):
        try:
            return super().resolve_command(ctx, args)
        except Exception as e:
            # Typer may vendor click, so the usage error class is not imported here
            suggestions = suggest_commands(args[0], list(self.commands)) if args else []
            if not suggestions:
                raise

            console = get_console()
            console.print(
                f'[red]Error:[/red] unknown command "{args[0]}" for "{ctx.info_name}"\n'
            )
            heading = (
                "Did you mean this?"
                if len(suggestions) == 1
                else "Did you mean one of these?"
            )
            console.print(f"[yellow]{heading}[/yellow]")
            for suggestion in suggestions:
                console.print(f"        {suggestion}")
            raise typer.Exit(1) from e
