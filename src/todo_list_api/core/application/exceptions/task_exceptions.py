"""Application exception hierarchy.

The HTTP layer maps the two task-level errors to status codes; anything
outside this tree is treated as an unhandled storage/server failure.
"""

from typing import Any
from uuid import UUID


class ApplicationError(Exception):
    """Base exception for all application-layer errors."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


class TaskNotFoundError(ApplicationError):
    """Raised when an operation references a task id that is not stored."""

    def __init__(self, task_id: UUID) -> None:
        super().__init__(f"Task with id {task_id} not found.", context={"task_id": str(task_id)})
        self.task_id = task_id


class TaskIdConflictError(ApplicationError):
    """Raised when a freshly generated task id already exists in the store."""

    def __init__(self, task_id: UUID) -> None:
        super().__init__(f"Task with id {task_id} already exists.", context={"task_id": str(task_id)})
        self.task_id = task_id
