"""Database schema definitions for the local SQLite vault."""

from __future__ import annotations

CREATE_TASKS_TABLE = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    description TEXT,
    priority TEXT NOT NULL DEFAULT 'Normal'
        CHECK (priority IN ('Low', 'Normal', 'High')),
    status TEXT NOT NULL DEFAULT 'Pending'
        CHECK (status IN ('Pending', 'Hold', 'Completed')),
    due_date DATE NOT NULL,
    created_date DATE NOT NULL,
    updated_date DATE,
    completed_date DATE,
    deleted_at DATETIME
)
"""

CREATE_TASK_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_tasks_status ON tasks(status)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_priority ON tasks(priority)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_created_date ON tasks(created_date)",
    "CREATE INDEX IF NOT EXISTS idx_tasks_deleted_at ON tasks(deleted_at)",
]

ALL_TABLES = [
    CREATE_TASKS_TABLE,
]

ALL_INDEXES = CREATE_TASK_INDEXES
