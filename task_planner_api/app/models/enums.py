from enum import Enum


class TaskStatus(str, Enum):
    """Task status.  Any transition is allowed; neither state is terminal."""

    OPEN = "OPEN"
    CLOSED = "CLOSED"


class TaskPriority(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
