# tests/test_mappers.py

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

import pydantic
import pytest

from task_planner_api.app.mappers import DefaultTaskListMapper, DefaultTaskMapper
from task_planner_api.app.models import Task, TaskList, TaskPriority, TaskStatus
from task_planner_api.app.schemas.task import TaskDto
from task_planner_api.app.schemas.task_list import TaskListDto

NOW = datetime(2026, 4, 1, 8, 30, tzinfo=timezone.utc)


def _present_fields(dto) -> dict:
    return dto.model_dump(include=dto.model_fields_set)


def test_task_round_trip_keeps_every_present_field() -> None:
    mapper = DefaultTaskMapper()
    dto = TaskDto(
        id=uuid4(),
        title="Write report",
        description="all of it",
        due_date=NOW,
        priority=TaskPriority.HIGH,
        status=TaskStatus.CLOSED,
        task_list_id=uuid4(),
        created=NOW,
        updated=NOW,
    )

    out = mapper.to_dto(mapper.from_dto(dto))

    assert out.model_dump(include=dto.model_fields_set) == _present_fields(dto)


def test_task_round_trip_of_partial_draft() -> None:
    mapper = DefaultTaskMapper()
    dto = TaskDto(title="Only a title")

    out = mapper.to_dto(mapper.from_dto(dto))

    assert out.model_dump(include=dto.model_fields_set) == _present_fields(dto)
    assert out.id is None
    assert out.task_list_id is None


def test_task_from_dto_never_infers_list_or_id() -> None:
    task = DefaultTaskMapper().from_dto(TaskDto(title="Draft", priority=TaskPriority.LOW))

    assert task.id is None
    assert task.task_list_id is None
    assert task.status is None
    assert task.priority == TaskPriority.LOW


def test_task_list_to_dto_flattens_tasks_and_computes_progress() -> None:
    list_id = uuid4()
    task_list = TaskList(
        id=list_id,
        title="Sprint",
        created=NOW,
        updated=NOW,
        tasks=[
            Task(id=uuid4(), title="a", status=TaskStatus.CLOSED, priority=TaskPriority.LOW, task_list_id=list_id),
            Task(id=uuid4(), title="b", status=TaskStatus.OPEN, priority=TaskPriority.LOW, task_list_id=list_id),
            Task(id=uuid4(), title="c", status=TaskStatus.OPEN, priority=TaskPriority.LOW, task_list_id=list_id),
            Task(id=uuid4(), title="d", status=TaskStatus.CLOSED, priority=TaskPriority.LOW, task_list_id=list_id),
        ],
    )

    dto = DefaultTaskListMapper().to_dto(task_list)

    assert dto.count == 4
    assert dto.progress == 0.5
    assert all(task.task_list_id == list_id for task in dto.tasks)
    assert dto.model_dump()["tasks"][0]["task_list_id"] == list_id


def test_empty_task_list_has_no_progress() -> None:
    dto = DefaultTaskListMapper().to_dto(TaskList(id=uuid4(), title="Empty"))

    assert dto.count == 0
    assert dto.progress is None
    assert dto.tasks == []


def test_task_list_round_trip_keeps_every_present_field() -> None:
    mapper = DefaultTaskListMapper()
    list_id = uuid4()
    dto = TaskListDto(
        id=list_id,
        title="Home",
        description="chores",
        created=NOW,
        updated=NOW,
        tasks=[TaskDto(id=uuid4(), title="Vacuum", status=TaskStatus.OPEN, task_list_id=list_id)],
    )

    out = mapper.to_dto(mapper.from_dto(dto))

    assert out.model_dump(include=dto.model_fields_set) == _present_fields(dto)


def test_task_list_derived_fields_cannot_be_set() -> None:
    mapper = DefaultTaskListMapper()
    dto = TaskListDto(title="Home", count=7, progress=1.0)

    assert dto.model_fields_set == {"title"}
    assert dto.count == 0
    assert dto.progress is None

    out = mapper.to_dto(mapper.from_dto(dto))
    assert out.model_dump(include=dto.model_fields_set) == _present_fields(dto)
    assert out.count == 0


def test_task_list_tasks_cannot_be_null() -> None:
    with pytest.raises(pydantic.ValidationError):
        TaskListDto(title="Home", tasks=None)


def test_task_list_round_trip_of_explicit_empty_tasks() -> None:
    mapper = DefaultTaskListMapper()
    dto = TaskListDto(title="Home", tasks=[])

    out = mapper.to_dto(mapper.from_dto(dto))

    assert out.model_dump(include=dto.model_fields_set) == {"title": "Home", "tasks": []}
