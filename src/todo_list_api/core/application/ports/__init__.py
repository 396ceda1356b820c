from todo_list_api.core.application.ports.task_repository_port import TaskRepositoryPort
from todo_list_api.core.application.ports.unit_of_work_port import UnitOfWorkPort

__all__ = ["TaskRepositoryPort", "UnitOfWorkPort"]
