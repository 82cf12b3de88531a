"""
In-memory entities for task lists and tasks.

Entities are plain dataclasses.  Every field is optional so that the
same type can describe a stored row and an incomplete draft coming
from the transport layer; the services decide which fields must be
present.  A task refers to its owning list through ``task_list_id``
rather than holding the list object, which keeps the structure free
of cycles.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from .enums import TaskPriority, TaskStatus


@dataclass
class Task:
    id: Optional[UUID] = None
    title: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    task_list_id: Optional[UUID] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


@dataclass
class TaskList:
    id: Optional[UUID] = None
    title: Optional[str] = None
    description: Optional[str] = None
    created: Optional[datetime] = None
    updated: Optional[datetime] = None
    tasks: List[Task] = field(default_factory=list)
