from todo_list_api.infrastructure.persistence.models.task_record import Base, TaskRecord

__all__ = ["Base", "TaskRecord"]
