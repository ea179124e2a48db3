"""Migration 001: the tasks table and its indexes."""

import sqlite3

from todotask_cli.adapters.sqlite import schema

from .runner import Migration


class InitialSchemaMigration(Migration):
    version = 1
    description = "Initial database schema"

    def up(self, connection: sqlite3.Connection) -> None:
        for statement in (*schema.ALL_TABLES, *schema.ALL_INDEXES):
            connection.execute(statement)


initial_migration = InitialSchemaMigration()
