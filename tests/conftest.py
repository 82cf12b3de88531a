# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from task_planner_api.app.core.db import init_db
from task_planner_api.app.main import create_app
from task_planner_api.app.repositories.sqlite import SQLiteGateway
from task_planner_api.app.services import TaskListService, TaskService

from .fakes import FakeClock


@pytest.fixture()
def db_path(tmp_path: Path) -> str:
    """Fresh, migrated SQLite database per test."""
    path = str(tmp_path / "tasks.sqlite3")
    init_db(path)
    return path


@pytest.fixture()
def gateway(db_path: str) -> SQLiteGateway:
    return SQLiteGateway(db_path, timeout=1.0)


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def task_list_service(gateway: SQLiteGateway, clock: FakeClock) -> TaskListService:
    return TaskListService(gateway, clock=clock)


@pytest.fixture()
def task_service(gateway: SQLiteGateway, clock: FakeClock) -> TaskService:
    return TaskService(gateway, clock=clock)


@pytest.fixture()
def client(gateway: SQLiteGateway):
    app = create_app(gateway=gateway)
    with TestClient(app) as test_client:
        yield test_client
