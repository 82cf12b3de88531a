"""
Service layer for tasks.

Every operation is scoped to a parent task list: tasks are addressed by
the composite key ``(task_list_id, task_id)`` and a task id that exists
under another list is treated as missing.  Lookups and the writes that
depend on them run inside one gateway transaction.

Creation ignores any client-supplied status (new tasks are always
``OPEN``) and defaults the priority to ``MEDIUM``.  Updates go through
``merge_task``: priority and status keep their stored values when the
draft leaves them out, while title, description and due date are
replaced.  Due dates are never checked against the current time.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Callable, List, Optional
from uuid import UUID, uuid4

from ..core.exceptions import NotFoundError, ValidationError
from ..models.entities import Task
from ..models.enums import TaskPriority, TaskStatus
from ..repositories.base import Gateway
from .task_list_service import is_blank, utcnow


def merge_task(existing: Task, patch: Task, now: datetime) -> Task:
    """Return ``existing`` updated with ``patch`` without mutating either.

    ``id``, ``task_list_id`` and ``created`` always come from
    ``existing``.
    """
    return replace(
        existing,
        title=patch.title,
        description=patch.description,
        due_date=patch.due_date,
        priority=patch.priority if patch.priority is not None else existing.priority,
        status=patch.status if patch.status is not None else existing.status,
        updated=now,
    )


class TaskService:
    """Service for managing the tasks of a task list."""

    def __init__(self, gateway: Gateway, clock: Callable[[], datetime] = utcnow) -> None:
        self._gateway = gateway
        self._clock = clock

    async def list_tasks(self, task_list_id: UUID) -> List[Task]:
        """Return the tasks of a list.

        An unknown list simply has no tasks; its existence is not
        checked.
        """
        with self._gateway.transaction(readonly=True) as uow:
            return uow.tasks.find_by_task_list_id(task_list_id)

    async def create_task(self, task_list_id: UUID, draft: Task) -> Task:
        """Create a task in the given list.

        Raises ``ValidationError`` when the draft already has an id, has
        no title, or when ``task_list_id`` does not resolve to a list.
        """
        logger = logging.getLogger(__name__)
        if draft.id is not None:
            logger.debug("Rejected task draft carrying id %s", draft.id)
            raise ValidationError("Task already has an ID")
        if is_blank(draft.title):
            logger.debug("Rejected task draft without a title")
            raise ValidationError("Task must have a title")

        with self._gateway.transaction() as uow:
            if uow.task_lists.find_by_id(task_list_id) is None:
                raise ValidationError(f"Invalid task list ID provided: {task_list_id}")
            now = self._clock()
            task = Task(
                id=uuid4(),
                title=draft.title,
                description=draft.description,
                due_date=draft.due_date,
                status=TaskStatus.OPEN,
                priority=draft.priority or TaskPriority.MEDIUM,
                task_list_id=task_list_id,
                created=now,
                updated=now,
            )
            saved = uow.tasks.save(task)
        logger.info("Created task %s in list %s", saved.id, task_list_id)
        return saved

    async def get_task(self, task_list_id: UUID, task_id: UUID) -> Optional[Task]:
        with self._gateway.transaction(readonly=True) as uow:
            return uow.tasks.find_by_task_list_id_and_id(task_list_id, task_id)

    async def update_task(self, task_list_id: UUID, task_id: UUID, draft: Task) -> Task:
        """Apply ``draft`` to the task under ``(task_list_id, task_id)``.

        Checks run in this order: the task must exist
        (``NotFoundError``), the draft must have a title and any id it
        carries must equal ``task_id`` (``ValidationError``).
        """
        logger = logging.getLogger(__name__)
        with self._gateway.transaction() as uow:
            existing = uow.tasks.find_by_task_list_id_and_id(task_list_id, task_id)
            if existing is None:
                raise NotFoundError(f"Task {task_id} not found in list {task_list_id}")
            if is_blank(draft.title):
                raise ValidationError("Task must have a title")
            if draft.id is not None and draft.id != task_id:
                raise ValidationError("Task ID in request body does not match path parameter")
            saved = uow.tasks.save(merge_task(existing, draft, self._clock()))
        logger.info("Updated task %s in list %s", task_id, task_list_id)
        return saved

    async def delete_task(self, task_list_id: UUID, task_id: UUID) -> None:
        logger = logging.getLogger(__name__)
        with self._gateway.transaction() as uow:
            existing = uow.tasks.find_by_task_list_id_and_id(task_list_id, task_id)
            if existing is None:
                raise NotFoundError(f"Task {task_id} not found in list {task_list_id}")
            uow.tasks.delete(existing)
        logger.info("Deleted task %s from list %s", task_id, task_list_id)
