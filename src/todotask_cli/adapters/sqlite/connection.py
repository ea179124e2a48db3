"""Connection management for the local task vault.

One connection is shared per process. Opening a vault switches it to WAL
journaling, restricts a newly created file to its owner and applies any
pending migrations.
"""

from __future__ import annotations

import atexit
import sqlite3
from pathlib import Path

from platformdirs import user_data_dir

from todotask_cli.adapters.sqlite.migrations import ALL_MIGRATIONS
from todotask_cli.adapters.sqlite.migrations.runner import MigrationRunner
from todotask_cli.utils.logger import get_logger

DEFAULT_DB_NAME = "vault.db"
BUSY_TIMEOUT_SECONDS = 30.0


def default_db_path() -> Path:
    """Location of the vault when no path is configured."""
    return Path(user_data_dir("todotask_cli")) / DEFAULT_DB_NAME


def open_vault(db_path: Path) -> sqlite3.Connection:
    """Open (creating if needed) and migrate the vault at ``db_path``."""
    db_path.parent.mkdir(parents=True, exist_ok=True)
    created = not db_path.exists()

    connection = sqlite3.connect(
        db_path, check_same_thread=False, timeout=BUSY_TIMEOUT_SECONDS
    )
    connection.row_factory = sqlite3.Row
    connection.execute("PRAGMA journal_mode = WAL")

    if created:
        db_path.chmod(0o600)
        get_logger().info("created task vault at %s", db_path)

    applied = MigrationRunner(connection).run_migrations(ALL_MIGRATIONS)
    if applied:
        get_logger().debug("vault %s migrated (%d step(s))", db_path, applied)
    return connection


class DatabaseConnection:
    """Process-wide holder of the open vault connection."""

    _connection: sqlite3.Connection | None = None
    _db_path: Path | None = None
    _atexit_registered = False

    @classmethod
    def get_connection(cls, db_path: str | Path | None = None) -> sqlite3.Connection:
        """Return the shared connection, reopening it if ``db_path`` changed."""
        path = default_db_path() if db_path is None else Path(db_path)

        if cls._connection is not None and cls._db_path == path:
            return cls._connection

        cls.close_connection()
        cls._connection = open_vault(path)
        cls._db_path = path

        if not cls._atexit_registered:
            atexit.register(cls.close_connection)
            cls._atexit_registered = True
        return cls._connection

    @classmethod
    def close_connection(cls) -> None:
        """Commit and close the shared connection, if open."""
        connection, cls._connection, cls._db_path = cls._connection, None, None
        if connection is None:
            return
        try:
            connection.commit()
            connection.close()
        except sqlite3.Error as e:
            get_logger().warning("error closing task vault: %s", e)

    @classmethod
    def get_db_path(cls) -> Path | None:
        """Path of the open vault, or None when closed."""
        return cls._db_path


def get_connection(db_path: str | Path | None = None) -> sqlite3.Connection:
    """Shortcut for ``DatabaseConnection.get_connection``."""
    return DatabaseConnection.get_connection(db_path)
