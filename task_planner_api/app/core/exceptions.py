"""
Domain errors raised by the service layer.

Services raise these to reject a request that the caller has to change
before retrying.  They are deliberately separate from infrastructure
failures (``sqlite3.Error`` and friends), which propagate untouched.
The HTTP layer maps them to status codes in ``api/errors.py``.
"""


class TaskPlannerError(Exception):
    """Base class for errors reported by the task planner core."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(TaskPlannerError):
    """The request is malformed or violates a domain rule."""


class NotFoundError(TaskPlannerError):
    """No task list, or no task under the given composite key."""
