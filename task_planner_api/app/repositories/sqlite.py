"""
SQLite implementation of the persistence gateway.

Each ``transaction()`` opens its own connection.  A writing transaction
starts with ``BEGIN IMMEDIATE``, so the write lock is taken before the
first read and a check-then-act sequence run by a service (look a row
up, then update or delete it) cannot interleave with another writer.
A ``readonly`` transaction starts with a deferred ``BEGIN`` and only
takes a shared lock, so reads do not queue behind writers.  SQLite
errors are never caught here; they reach the caller as they are.

UUIDs and datetimes are stored as text (``str(uuid)`` and ISO 8601).
"""

import logging
import sqlite3
from contextlib import contextmanager
from datetime import datetime
from typing import Iterator, List, Optional
from uuid import UUID

from ..core.db import get_connection, get_database_path
from ..models.entities import Task, TaskList
from ..models.enums import TaskPriority, TaskStatus

logger = logging.getLogger(__name__)


def _dt_to_db(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _dt_from_db(raw: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(raw) if raw else None


def _row_to_task(row: sqlite3.Row) -> Task:
    return Task(
        id=UUID(row["id"]),
        title=row["title"],
        description=row["description"],
        due_date=_dt_from_db(row["due_date"]),
        status=TaskStatus(row["status"]),
        priority=TaskPriority(row["priority"]),
        task_list_id=UUID(row["task_list_id"]),
        created=_dt_from_db(row["created"]),
        updated=_dt_from_db(row["updated"]),
    )


class SQLiteTaskRepository:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def find_by_task_list_id(self, task_list_id: UUID) -> List[Task]:
        rows = self._conn.execute(
            "SELECT * FROM tasks WHERE task_list_id = ? ORDER BY rowid",
            (str(task_list_id),),
        ).fetchall()
        return [_row_to_task(row) for row in rows]

    def find_by_task_list_id_and_id(self, task_list_id: UUID, task_id: UUID) -> Optional[Task]:
        row = self._conn.execute(
            "SELECT * FROM tasks WHERE task_list_id = ? AND id = ?",
            (str(task_list_id), str(task_id)),
        ).fetchone()
        return _row_to_task(row) if row else None

    def save(self, task: Task) -> Task:
        """Insert or update a task.  ``created`` is only written on insert."""
        self._conn.execute(
            """
            INSERT INTO tasks (id, title, description, due_date, status, priority, task_list_id, created, updated)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                title = excluded.title,
                description = excluded.description,
                due_date = excluded.due_date,
                status = excluded.status,
                priority = excluded.priority,
                task_list_id = excluded.task_list_id,
                updated = excluded.updated
            """,
            (
                str(task.id),
                task.title,
                task.description,
                _dt_to_db(task.due_date),
                task.status.value,
                task.priority.value,
                str(task.task_list_id),
                _dt_to_db(task.created),
                _dt_to_db(task.updated),
            ),
        )
        row = self._conn.execute("SELECT * FROM tasks WHERE id = ?", (str(task.id),)).fetchone()
        return _row_to_task(row)

    def delete(self, task: Task) -> None:
        self._conn.execute("DELETE FROM tasks WHERE id = ?", (str(task.id),))

    def delete_by_task_list_id(self, task_list_id: UUID) -> int:
        cursor = self._conn.execute("DELETE FROM tasks WHERE task_list_id = ?", (str(task_list_id),))
        return cursor.rowcount


class SQLiteTaskListRepository:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def _row_to_task_list(self, row: sqlite3.Row, tasks: List[Task]) -> TaskList:
        return TaskList(
            id=UUID(row["id"]),
            title=row["title"],
            description=row["description"],
            created=_dt_from_db(row["created"]),
            updated=_dt_from_db(row["updated"]),
            tasks=tasks,
        )

    def find_all(self) -> List[TaskList]:
        rows = self._conn.execute("SELECT * FROM task_lists ORDER BY rowid").fetchall()
        tasks_by_list: dict[str, List[Task]] = {}
        for task_row in self._conn.execute("SELECT * FROM tasks ORDER BY rowid").fetchall():
            tasks_by_list.setdefault(task_row["task_list_id"], []).append(_row_to_task(task_row))
        return [self._row_to_task_list(row, tasks_by_list.get(row["id"], [])) for row in rows]

    def find_by_id(self, task_list_id: UUID) -> Optional[TaskList]:
        row = self._conn.execute(
            "SELECT * FROM task_lists WHERE id = ?", (str(task_list_id),)
        ).fetchone()
        if not row:
            return None
        return self._row_to_task_list(row, SQLiteTaskRepository(self._conn).find_by_task_list_id(task_list_id))

    def save(self, task_list: TaskList) -> TaskList:
        """Insert or update the list row.  Tasks are saved separately."""
        self._conn.execute(
            """
            INSERT INTO task_lists (id, title, description, created, updated)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                title = excluded.title,
                description = excluded.description,
                updated = excluded.updated
            """,
            (
                str(task_list.id),
                task_list.title,
                task_list.description,
                _dt_to_db(task_list.created),
                _dt_to_db(task_list.updated),
            ),
        )
        return self.find_by_id(task_list.id)

    def delete(self, task_list: TaskList) -> None:
        self._conn.execute("DELETE FROM task_lists WHERE id = ?", (str(task_list.id),))


class SQLiteUnitOfWork:
    """Both repositories bound to the connection of one transaction."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.task_lists = SQLiteTaskListRepository(conn)
        self.tasks = SQLiteTaskRepository(conn)


class SQLiteGateway:
    """Opens one connection per transaction against a SQLite file.

    The database must have been migrated with ``core.db.init_db``.
    ``timeout`` bounds how long a transaction waits for a competing
    writer; when it expires SQLite raises ``OperationalError`` before
    anything is written.
    """

    def __init__(self, db_path: Optional[str] = None, timeout: Optional[float] = None) -> None:
        self.db_path = db_path or get_database_path()
        self._timeout = timeout

    @contextmanager
    def transaction(self, readonly: bool = False) -> Iterator[SQLiteUnitOfWork]:
        conn = get_connection(self.db_path, timeout=self._timeout, isolation_level=None)
        try:
            conn.execute("BEGIN" if readonly else "BEGIN IMMEDIATE")
            yield SQLiteUnitOfWork(conn)
            conn.execute("COMMIT")
        except BaseException:
            if conn.in_transaction:
                logger.debug("Rolling back transaction on %s", self.db_path)
                conn.execute("ROLLBACK")
            raise
        finally:
            conn.close()
