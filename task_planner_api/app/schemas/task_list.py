"""
Pydantic models for task lists.

``TaskListBase`` holds the fields a client may send; ``TaskListCreate``
and ``TaskListUpdate`` are the request bodies, and ``TaskListDto`` is
the full transport record with the nested tasks.  ``count`` and
``progress`` are computed from ``tasks`` and cannot be set on input.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field, computed_field

from ..models.enums import TaskStatus
from .task import TaskDto


class TaskListBase(BaseModel):
    title: Optional[str] = Field(None, description="List title; must not be blank")
    description: Optional[str] = None


class TaskListCreate(TaskListBase):
    """Schema for creating a task list."""
    pass


class TaskListUpdate(TaskListBase):
    """Schema for updating a task list.

    Both fields are replaced; an omitted description clears it.
    """
    pass


class TaskListDto(TaskListBase):
    """Transport record for a task list."""

    id: Optional[UUID] = None
    tasks: List[TaskDto] = Field(default_factory=list)
    created: Optional[datetime] = None
    updated: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }

    @computed_field
    @property
    def count(self) -> int:
        """Number of tasks in the list."""
        return len(self.tasks)

    @computed_field
    @property
    def progress(self) -> Optional[float]:
        """Share of closed tasks, null for an empty list."""
        if not self.tasks:
            return None
        closed = sum(1 for task in self.tasks if task.status == TaskStatus.CLOSED)
        return closed / len(self.tasks)
