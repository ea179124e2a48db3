"""Task helper utilities for command arguments."""

from datetime import date

from todotask_cli.commands.decorators import AppError
from todotask_cli.utils import exit_codes


def parse_date_option(value: str | None, option: str = "--due") -> date | None:
    """Parse a YYYY-MM-DD command line option.

    Raises:
        AppError: If the value is not a valid ISO date
    """
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise AppError(
            f"{option} must be a date in YYYY-MM-DD format, got '{value}'",
            exit_codes.ERROR_INVALID_ARGS,
        ) from e
