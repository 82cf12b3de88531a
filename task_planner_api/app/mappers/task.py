"""Conversion between ``Task`` entities and ``TaskDto`` records."""

from typing import Protocol

from ..models.entities import Task
from ..schemas.task import TaskDto


class TaskMapper(Protocol):
    def from_dto(self, dto: TaskDto) -> Task: ...

    def to_dto(self, task: Task) -> TaskDto: ...


class DefaultTaskMapper:
    """Field-for-field mapper; performs no validation and no storage access."""

    def from_dto(self, dto: TaskDto) -> Task:
        return Task(
            id=dto.id,
            title=dto.title,
            description=dto.description,
            due_date=dto.due_date,
            status=dto.status,
            priority=dto.priority,
            task_list_id=dto.task_list_id,
            created=dto.created,
            updated=dto.updated,
        )

    def to_dto(self, task: Task) -> TaskDto:
        return TaskDto(
            id=task.id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            priority=task.priority,
            status=task.status,
            task_list_id=task.task_list_id,
            created=task.created,
            updated=task.updated,
        )
