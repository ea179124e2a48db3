"""Row and date helpers shared by the SQLite repositories."""

from __future__ import annotations

import sqlite3
from datetime import date
from typing import Any


def today_iso() -> str:
    """Local calendar date as YYYY-MM-DD."""
    return date.today().isoformat()


def row_to_dict(row: sqlite3.Row | None) -> dict[str, Any]:
    return {} if row is None else dict(row)


def build_update_clause(updates: dict[str, Any]) -> tuple[str, list[Any]]:
    """Turn ``{column: value}`` into a ``col = ?, ...`` clause and its params.

    Column names come from model fields, never from user input.
    """
    columns = ", ".join(f"{column} = ?" for column in updates)
    return columns, list(updates.values())
