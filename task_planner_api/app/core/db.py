"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations on application start
(``init_db``).  Applied migration versions are stored in the
``migrations`` table and new migrations are executed in order.

Foreign keys are switched on for every connection: the ``tasks`` table
references ``task_lists`` with ``ON DELETE CASCADE`` and the storage
layer must reject a task whose list does not exist.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings

logger = logging.getLogger(__name__)

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS task_lists (
            id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            description TEXT,
            created TIMESTAMP NOT NULL,
            updated TIMESTAMP NOT NULL
        );

        CREATE TABLE IF NOT EXISTS tasks (
            id TEXT PRIMARY KEY,
            title TEXT NOT NULL,
            description TEXT,
            due_date TIMESTAMP,
            status TEXT NOT NULL,
            priority TEXT NOT NULL,
            task_list_id TEXT NOT NULL,
            created TIMESTAMP NOT NULL,
            updated TIMESTAMP NOT NULL,
            FOREIGN KEY(task_list_id) REFERENCES task_lists(id) ON DELETE CASCADE
        );
        """,
    ),
    # Migration 2: index for the composite (list, task) lookups
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_tasks_task_list_id ON tasks(task_list_id);
        """,
    ),
]


def get_database_path(db_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If the URL (``settings.database_url`` by default) is an absolute
    path, use it directly.  Otherwise resolve it relative to the
    project root.
    """
    db_url = db_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # task_planner_api/
    return str((base_dir / db_url).resolve())


def get_connection(
    db_path: Optional[str] = None,
    timeout: Optional[float] = None,
    isolation_level: Optional[str] = "",
) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.  Pass
    ``isolation_level=None`` to take over transaction control with
    explicit ``BEGIN`` statements, as the gateway does.
    """
    conn = sqlite3.connect(
        db_path or get_database_path(),
        timeout=settings.database_timeout if timeout is None else timeout,
        isolation_level=isolation_level,
    )
    conn.row_factory = sqlite3.Row
    # SQLite leaves foreign keys off unless enabled per connection.
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: Optional[str] = None) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any new migrations defined in
    ``MIGRATIONS``.  To add a migration, append it with an incremented
    version number.
    """
    with get_cursor(db_path) as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s", version)
                current_version = version
