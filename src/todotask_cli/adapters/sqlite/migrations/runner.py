"""Forward-only schema migrations for the task vault.

Each migration has a unique, increasing version. Applied versions are
recorded in ``schema_version`` so opening an up-to-date vault is a no-op.
"""

from __future__ import annotations

import sqlite3
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import UTC, datetime

from todotask_cli.utils.logger import get_logger

_VERSION_TABLE = """
    CREATE TABLE IF NOT EXISTS schema_version (
        version INTEGER PRIMARY KEY,
        description TEXT NOT NULL,
        applied_at DATETIME NOT NULL
    )
"""


class Migration(ABC):
    """One step of schema evolution."""

    version: int
    description: str

    @abstractmethod
    def up(self, connection: sqlite3.Connection) -> None:
        """Apply the schema change on ``connection``."""

    def __repr__(self) -> str:
        return f"<Migration {self.version:03d} {self.description!r}>"


class MigrationRunner:
    """Applies pending migrations to one connection."""

    def __init__(self, connection: sqlite3.Connection):
        self.connection = connection
        self.logger = get_logger()
        with self.connection:
            self.connection.execute(_VERSION_TABLE)

    def get_current_version(self) -> int:
        """Highest applied version, or 0 for a fresh vault."""
        (version,) = self.connection.execute(
            "SELECT COALESCE(MAX(version), 0) FROM schema_version"
        ).fetchone()
        return version

    def run_migration(self, migration: Migration) -> None:
        """Apply a single migration inside a transaction.

        Raises:
            ValueError: If ``migration`` is not newer than the vault
            RuntimeError: If the migration fails; its changes are rolled back
        """
        current = self.get_current_version()
        if migration.version <= current:
            raise ValueError(
                f"Migration version {migration.version} is not greater than "
                f"current version {current}"
            )

        try:
            with self.connection:
                migration.up(self.connection)
                self.connection.execute(
                    "INSERT INTO schema_version (version, description, applied_at) "
                    "VALUES (?, ?, ?)",
                    (
                        migration.version,
                        migration.description,
                        datetime.now(UTC).isoformat(),
                    ),
                )
        except sqlite3.Error as e:
            raise RuntimeError(f"Migration {migration.version} failed: {e}") from e

        self.logger.info("applied %r", migration)

    def run_migrations(self, migrations: Iterable[Migration]) -> int:
        """Apply every migration newer than the vault, oldest first.

        Returns:
            Number of migrations applied
        """
        current = self.get_current_version()
        pending = sorted(
            (m for m in migrations if m.version > current), key=lambda m: m.version
        )
        for migration in pending:
            self.run_migration(migration)
        return len(pending)

    def get_migration_history(self) -> list[dict]:
        """Applied migrations, oldest first."""
        rows = self.connection.execute(
            "SELECT version, description, applied_at FROM schema_version ORDER BY version"
        ).fetchall()
        return [
            {"version": version, "description": description, "applied_at": applied_at}
            for version, description, applied_at in rows
        ]
