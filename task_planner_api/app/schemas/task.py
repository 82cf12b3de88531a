"""
Pydantic schema for tasks exchanged with API clients.

A single ``TaskDto`` serves as request body and response.  Every field
is optional at this level: whether a title is present, or whether a
client may send an ``id``, is decided by the task service so that the
rules live in one place.  The owning list is exposed as the flat
``task_list_id`` field.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from ..models.enums import TaskPriority, TaskStatus


class TaskDto(BaseModel):
    """Transport record for a task."""

    id: Optional[UUID] = None
    title: Optional[str] = Field(None, description="Task title; must not be blank")
    description: Optional[str] = None
    due_date: Optional[datetime] = Field(None, description="Optional due date; past dates are accepted")
    priority: Optional[TaskPriority] = Field(None, description="Defaults to MEDIUM on creation")
    status: Optional[TaskStatus] = Field(None, description="Ignored on creation; new tasks are OPEN")
    task_list_id: Optional[UUID] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None

    model_config = {
        "from_attributes": True,
    }
