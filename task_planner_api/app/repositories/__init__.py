"""
Persistence gateway: repository contracts and their SQLite implementation.
"""

from .base import Gateway, TaskListRepository, TaskRepository, UnitOfWork
from .sqlite import SQLiteGateway

__all__ = ["Gateway", "SQLiteGateway", "TaskListRepository", "TaskRepository", "UnitOfWork"]
