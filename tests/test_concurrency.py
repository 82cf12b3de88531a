# tests/test_concurrency.py

from __future__ import annotations

import asyncio
import threading

from task_planner_api.app.core.db import get_connection
from task_planner_api.app.core.exceptions import NotFoundError, ValidationError
from task_planner_api.app.models import Task
from task_planner_api.app.repositories.sqlite import SQLiteGateway
from task_planner_api.app.services import TaskListService, TaskService

WORKERS = 8


def _run_together(targets) -> None:
    """Start every target at the same moment, each on its own thread."""
    barrier = threading.Barrier(len(targets))

    def start(target):
        barrier.wait()
        target()

    threads = [threading.Thread(target=start, args=(target,)) for target in targets]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)
    assert not any(thread.is_alive() for thread in threads)


def _task_rows(db_path: str, task_list_id) -> int:
    conn = get_connection(db_path)
    try:
        (count,) = conn.execute(
            "SELECT COUNT(*) FROM tasks WHERE task_list_id = ?", (str(task_list_id),)
        ).fetchone()
    finally:
        conn.close()
    return count


def test_concurrent_deletes_of_one_task_succeed_once(db_path) -> None:
    setup = SQLiteGateway(db_path, timeout=10)
    task_list = asyncio.run(TaskListService(setup).create_task_list("Shared"))
    task = asyncio.run(TaskService(setup).create_task(task_list.id, Task(title="Only once")))

    outcomes = []
    lock = threading.Lock()

    def delete() -> None:
        service = TaskService(SQLiteGateway(db_path, timeout=10))
        try:
            asyncio.run(service.delete_task(task_list.id, task.id))
            outcome = "deleted"
        except NotFoundError:
            outcome = "not found"
        with lock:
            outcomes.append(outcome)

    _run_together([delete] * WORKERS)

    assert sorted(outcomes) == ["deleted"] + ["not found"] * (WORKERS - 1)
    assert _task_rows(db_path, task_list.id) == 0


def test_create_task_racing_list_delete_leaves_no_orphans(db_path) -> None:
    setup = SQLiteGateway(db_path, timeout=10)

    for _ in range(10):
        task_list = asyncio.run(TaskListService(setup).create_task_list("Doomed"))
        asyncio.run(TaskService(setup).create_task(task_list.id, Task(title="Existing")))
        outcomes = {}

        def create() -> None:
            service = TaskService(SQLiteGateway(db_path, timeout=10))
            try:
                asyncio.run(service.create_task(task_list.id, Task(title="Late arrival")))
                outcomes["create"] = "created"
            except ValidationError:
                outcomes["create"] = "rejected"

        def delete() -> None:
            service = TaskListService(SQLiteGateway(db_path, timeout=10))
            asyncio.run(service.delete_task_list(task_list.id))
            outcomes["delete"] = "deleted"

        _run_together([create, delete])

        assert outcomes["delete"] == "deleted"
        assert outcomes["create"] in {"created", "rejected"}
        assert asyncio.run(TaskListService(setup).get_task_list(task_list.id)) is None
        assert _task_rows(db_path, task_list.id) == 0
