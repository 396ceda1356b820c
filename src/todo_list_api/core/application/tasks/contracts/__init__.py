from todo_list_api.core.application.tasks.contracts.task_contracts import (
    CreateTaskDTO,
    TaskViewDTO,
    UpdateTaskStatusDTO,
)

__all__ = ["CreateTaskDTO", "TaskViewDTO", "UpdateTaskStatusDTO"]
