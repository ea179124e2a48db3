"""Main entry point for TodoTask CLI."""

import typer

from todotask_cli import __version__
from todotask_cli.commands import config, dashboard, data, tasks
from todotask_cli.commands.decorators import command_wrapper
from todotask_cli.services.config_service import get_config_service
from todotask_cli.utils.typer_helpers import SuggestingGroup
from todotask_cli.utils.ui.console import configure_console, get_console

app = typer.Typer(
    name="todotask",
    cls=SuggestingGroup,
    help="Track tasks locally and see how they are going",
    no_args_is_help=True,
)

console = get_console()


app.add_typer(tasks.app, name="tasks", help="Task management commands")
app.add_typer(data.app, name="data", help="Import and export tasks as CSV")
app.add_typer(config.app, name="config", help="Configuration management")
app.command("dashboard")(dashboard.show_dashboard)


@app.callback()
@command_wrapper
def load_output_settings() -> None:
    # Runs before every sub-command; --help exits earlier.
    configure_console(get_config_service().config.output.color)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]TodoTask CLI[/bold] version [cyan]{__version__}[/cyan]")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
