"""
Service layer.

Each service encapsulates the business rules for one entity and talks
to storage only through the persistence gateway, so the HTTP handlers
stay free of logic and the gateway can be swapped in tests.
"""

from .task_list_service import TaskListService
from .task_service import TaskService, merge_task

__all__ = ["TaskListService", "TaskService", "merge_task"]
