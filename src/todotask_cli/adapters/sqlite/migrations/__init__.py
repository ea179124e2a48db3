"""Database migrations for the local SQLite vault."""

from todotask_cli.adapters.sqlite.migrations.m001_initial_schema import (
    initial_migration,
)

ALL_MIGRATIONS = [
    initial_migration,
]

__all__ = ["ALL_MIGRATIONS", "initial_migration"]
