"""Configuration commands."""

import typer

from todotask_cli.services.config_service import get_config_service
from todotask_cli.utils import exit_codes
from todotask_cli.utils.typer_helpers import SuggestingGroup
from todotask_cli.utils.ui.console import get_console
from todotask_cli.utils.ui.formatters import format_output, format_success

from .decorators import AppError, command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Configuration management")
console = get_console()


@app.command("show")
@command_wrapper
def show_config(
    output: str = typer.Option("yaml", "--output", "-o", help="Output format"),
) -> None:
    """Show the current configuration."""
    service = get_config_service()
    data = service.config.model_dump(mode="json")
    data["resolved_database_path"] = str(service.get_db_path())
    format_output(data, output)


@app.command("get")
@command_wrapper
def get_value(key: str = typer.Argument(..., help="Dotted key, e.g. output.format")) -> None:
    """Print one configuration value."""
    try:
        value = get_config_service().get_value(key)
    except KeyError as e:
        raise AppError(f"Unknown config key: {key}", exit_codes.ERROR_NOT_FOUND) from e
    console.print(value)


@app.command("set")
@command_wrapper
def set_value(
    key: str = typer.Argument(..., help="Dotted key, e.g. output.format"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set one configuration value."""
    try:
        get_config_service().set_value(key, value)
    except KeyError as e:
        raise AppError(f"Unknown config key: {key}", exit_codes.ERROR_NOT_FOUND) from e
    format_success(f"{key} = {value}")


@app.command("reset")
@command_wrapper
def reset_config(
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip confirmation"),
) -> None:
    """Reset configuration to defaults."""
    if not yes and not typer.confirm("Reset all configuration to defaults?"):
        console.print("[yellow]Cancelled[/yellow]")
        raise typer.Exit(0)
    get_config_service().reset_config()
    format_success("Configuration reset to defaults")
