"""Decorators for command functions."""

import asyncio
import inspect
import functools
import sqlite3
import time
import traceback
from collections.abc import Callable

import typer
from pydantic import ValidationError

from todotask_cli.models import ImportFileError, NotFoundError
from todotask_cli.utils import exit_codes
from todotask_cli.utils.logger import get_logger
from todotask_cli.utils.ui.formatters import format_error


class AppError(Exception):
    """Custom application error with exit code."""

    def __init__(self, message: str, exit_code: int = exit_codes.ERROR_GENERAL):
        super().__init__(message)
        self.exit_code = exit_code


def _validation_message(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err["loc"])
        message = err["msg"].removeprefix("Value error, ")
        parts.append(f"{field}: {message}" if field else message)
    return "; ".join(parts)


def _as_app_error(error: Exception) -> AppError | None:
    """Translate known domain errors into AppError, or None if unknown."""
    if isinstance(error, AppError):
        return error
    if isinstance(error, NotFoundError):
        return AppError(str(error), exit_codes.ERROR_NOT_FOUND)
    if isinstance(error, ValidationError):
        return AppError(_validation_message(error), exit_codes.ERROR_INVALID_ARGS)
    if isinstance(error, ImportFileError):
        return AppError(str(error), exit_codes.ERROR_INVALID_ARGS)
    if isinstance(error, sqlite3.Error):
        return AppError(f"Task vault error: {error}", exit_codes.ERROR_STORAGE)
    return None


def command_wrapper(func: Callable):
    """Run a command body (sync or async) with logging and error mapping."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            if inspect.iscoroutinefunction(func):
                result = asyncio.run(func(*args, **kwargs))
            else:
                result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except typer.Exit:
            # Re-raise Typer's own exits (like --help or explicit Exit(0))
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            app_error = _as_app_error(e)
            if app_error is not None:
                logger.error(
                    "command failed: %s (%.3fs, %s) - %s",
                    cmd,
                    elapsed,
                    exit_codes.get_exit_code_name(app_error.exit_code),
                    str(app_error),
                )
                format_error(str(app_error))
                raise typer.Exit(code=app_error.exit_code) from e

            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=exit_codes.ERROR_GENERAL) from e

    return wrapper
