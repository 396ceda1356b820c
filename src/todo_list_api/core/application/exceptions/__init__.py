from todo_list_api.core.application.exceptions.task_exceptions import (
    ApplicationError,
    TaskIdConflictError,
    TaskNotFoundError,
)

__all__ = [
    "ApplicationError",
    "TaskIdConflictError",
    "TaskNotFoundError",
]
