"""Tests for command-line helpers and exit codes."""

from __future__ import annotations

from datetime import date

import pytest

from todotask_cli.commands.decorators import AppError
from todotask_cli.utils import exit_codes
from todotask_cli.utils.task_helpers import parse_date_option
from todotask_cli.utils.typer_helpers import suggest_commands


def test_parse_date_option():
    assert parse_date_option("2024-02-29") == date(2024, 2, 29)
    assert parse_date_option(None) is None


def test_parse_date_option_names_the_option():
    with pytest.raises(AppError, match="--today must be a date") as exc_info:
        parse_date_option("2024-02-30", "--today")

    assert exc_info.value.exit_code == exit_codes.ERROR_INVALID_ARGS


@pytest.mark.parametrize(
    ("code", "name"),
    [
        (exit_codes.SUCCESS, "SUCCESS"),
        (exit_codes.ERROR_NOT_FOUND, "ERROR_NOT_FOUND"),
        (99, "UNKNOWN(99)"),
    ],
)
def test_exit_code_names(code, name):
    assert exit_codes.get_exit_code_name(code) == name


def test_suggest_commands():
    assert suggest_commands("lst", ["list", "get", "add"]) == ["list"]
    assert suggest_commands("zzz", ["list", "get", "add"]) == []
