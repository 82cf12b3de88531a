"""Conversion between ``TaskList`` entities and ``TaskListDto`` records."""

from typing import Optional, Protocol

from ..models.entities import TaskList
from ..schemas.task_list import TaskListDto
from .task import DefaultTaskMapper, TaskMapper


class TaskListMapper(Protocol):
    def from_dto(self, dto: TaskListDto) -> TaskList: ...

    def to_dto(self, task_list: TaskList) -> TaskListDto: ...


class DefaultTaskListMapper:
    """Maps a list together with its tasks.

    ``count`` and ``progress`` are computed by ``TaskListDto`` itself.
    """

    def __init__(self, task_mapper: Optional[TaskMapper] = None) -> None:
        self._task_mapper = task_mapper or DefaultTaskMapper()

    def from_dto(self, dto: TaskListDto) -> TaskList:
        return TaskList(
            id=dto.id,
            title=dto.title,
            description=dto.description,
            created=dto.created,
            updated=dto.updated,
            tasks=[self._task_mapper.from_dto(task) for task in dto.tasks],
        )

    def to_dto(self, task_list: TaskList) -> TaskListDto:
        return TaskListDto(
            id=task_list.id,
            title=task_list.title,
            description=task_list.description,
            tasks=[self._task_mapper.to_dto(task) for task in task_list.tasks],
            created=task_list.created,
            updated=task_list.updated,
        )
