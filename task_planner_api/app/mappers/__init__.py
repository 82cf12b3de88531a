"""
Stateless mappers between domain entities and transport schemas.

Each mapper is described by a ``Protocol`` and has one default
implementation.  Mappers never validate and never touch storage.
"""

from .task import DefaultTaskMapper, TaskMapper
from .task_list import DefaultTaskListMapper, TaskListMapper

__all__ = ["DefaultTaskListMapper", "DefaultTaskMapper", "TaskListMapper", "TaskMapper"]
