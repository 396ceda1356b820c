"""Functional DI container: builds the wired service graph for FastAPI dependencies."""

from todo_list_api.core.application.ports import UnitOfWorkPort
from todo_list_api.core.application.tasks import TaskService
from todo_list_api.infrastructure.config.main_settings import Settings
from todo_list_api.infrastructure.persistence import Database, SqlAlchemyUnitOfWork


def build_database(settings: Settings) -> Database:
    """Engine + session factory for the configured DATABASE_URL."""
    return Database(settings)


def build_unit_of_work(database: Database) -> SqlAlchemyUnitOfWork:
    return SqlAlchemyUnitOfWork(database.session_factory)


def build_task_service(uow: UnitOfWorkPort) -> TaskService:
    return TaskService(uow)
