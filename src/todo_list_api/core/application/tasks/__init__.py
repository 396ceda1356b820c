from todo_list_api.core.application.tasks.task_service import TaskService

__all__ = ["TaskService"]
