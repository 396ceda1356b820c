from todo_list_api.core.domain.task.entities.task import Task

__all__ = ["Task"]
