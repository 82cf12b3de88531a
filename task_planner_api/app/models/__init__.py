"""
Domain entities.

Entities are decoupled from the Pydantic schemas in ``schemas``; the
``mappers`` package converts between the two.
"""

from .entities import Task, TaskList
from .enums import TaskPriority, TaskStatus

__all__ = ["Task", "TaskList", "TaskPriority", "TaskStatus"]
