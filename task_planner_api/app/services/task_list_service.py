"""
Service layer for task lists.

Creating, renaming and deleting lists.  Deleting a list removes its
tasks and the list itself inside one gateway transaction, so either
both disappear or neither does.  The service keeps no state of its
own; everything lives behind the gateway.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, List, Optional
from uuid import UUID, uuid4

from ..core.exceptions import NotFoundError, ValidationError
from ..models.entities import TaskList
from ..repositories.base import Gateway


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class TaskListService:
    """Service for managing task lists."""

    def __init__(self, gateway: Gateway, clock: Callable[[], datetime] = utcnow) -> None:
        self._gateway = gateway
        self._clock = clock

    async def list_task_lists(self) -> List[TaskList]:
        """Return every task list with its tasks, in storage order."""
        with self._gateway.transaction(readonly=True) as uow:
            return uow.task_lists.find_all()

    async def create_task_list(self, title: Optional[str], description: Optional[str] = None) -> TaskList:
        """Create a task list with a fresh id and equal created/updated stamps."""
        logger = logging.getLogger(__name__)
        if is_blank(title):
            logger.debug("Rejected task list without a title")
            raise ValidationError("Task list title must be present")
        now = self._clock()
        task_list = TaskList(
            id=uuid4(),
            title=title,
            description=description,
            created=now,
            updated=now,
        )
        with self._gateway.transaction() as uow:
            saved = uow.task_lists.save(task_list)
        logger.info("Created task list %s", saved.id)
        return saved

    async def get_task_list(self, task_list_id: UUID) -> Optional[TaskList]:
        with self._gateway.transaction(readonly=True) as uow:
            return uow.task_lists.find_by_id(task_list_id)

    async def update_task_list(
        self,
        task_list_id: UUID,
        title: Optional[str],
        description: Optional[str] = None,
    ) -> TaskList:
        """Replace title and description of an existing list.

        The id, the created stamp and the tasks of the list are kept;
        ``updated`` is refreshed.  Raises ``NotFoundError`` for an
        unknown id and ``ValidationError`` for a blank title.
        """
        logger = logging.getLogger(__name__)
        with self._gateway.transaction() as uow:
            existing = uow.task_lists.find_by_id(task_list_id)
            if existing is None:
                raise NotFoundError(f"Task list {task_list_id} not found")
            if is_blank(title):
                raise ValidationError("Task list title must be present")
            updated = replace(existing, title=title, description=description, updated=self._clock())
            saved = uow.task_lists.save(updated)
        logger.info("Updated task list %s", task_list_id)
        return saved

    async def delete_task_list(self, task_list_id: UUID) -> None:
        """Delete a list and all of its tasks as one unit."""
        logger = logging.getLogger(__name__)
        with self._gateway.transaction() as uow:
            existing = uow.task_lists.find_by_id(task_list_id)
            if existing is None:
                raise NotFoundError(f"Task list {task_list_id} not found")
            removed = uow.tasks.delete_by_task_list_id(task_list_id)
            uow.task_lists.delete(existing)
        logger.info("Deleted task list %s with %s task(s)", task_list_id, removed)
