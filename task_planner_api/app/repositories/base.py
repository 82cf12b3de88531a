"""
Persistence gateway contracts used by the services.

The services depend on these Protocols rather than on SQLite directly.
All repository calls happen inside ``Gateway.transaction()``: the unit
of work it yields binds both repositories to one transaction, which is
committed when the block exits normally and rolled back otherwise.
Pass ``readonly=True`` for a transaction that only looks rows up.
"""

from typing import ContextManager, List, Optional, Protocol
from uuid import UUID

from ..models.entities import Task, TaskList


class TaskListRepository(Protocol):
    def find_all(self) -> List[TaskList]: ...

    def find_by_id(self, task_list_id: UUID) -> Optional[TaskList]: ...

    def save(self, task_list: TaskList) -> TaskList: ...

    def delete(self, task_list: TaskList) -> None: ...


class TaskRepository(Protocol):
    def find_by_task_list_id(self, task_list_id: UUID) -> List[Task]: ...

    def find_by_task_list_id_and_id(self, task_list_id: UUID, task_id: UUID) -> Optional[Task]: ...

    def save(self, task: Task) -> Task: ...

    def delete(self, task: Task) -> None: ...

    def delete_by_task_list_id(self, task_list_id: UUID) -> int: ...


class UnitOfWork(Protocol):
    task_lists: TaskListRepository
    tasks: TaskRepository


class Gateway(Protocol):
    def transaction(self, readonly: bool = False) -> ContextManager[UnitOfWork]: ...
