from todo_list_api.infrastructure.persistence.database import Database
from todo_list_api.infrastructure.persistence.sqlalchemy_task_repository import (
    SqlAlchemyTaskRepository,
)
from todo_list_api.infrastructure.persistence.sqlalchemy_unit_of_work import SqlAlchemyUnitOfWork

__all__ = ["Database", "SqlAlchemyTaskRepository", "SqlAlchemyUnitOfWork"]
