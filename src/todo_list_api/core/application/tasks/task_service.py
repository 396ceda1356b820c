"""Task use cases: create, list, update status, delete."""

from uuid import UUID, uuid4

import structlog

from todo_list_api.core.application.exceptions import TaskIdConflictError, TaskNotFoundError
from todo_list_api.core.application.ports import UnitOfWorkPort
from todo_list_api.core.application.tasks.contracts import (
    CreateTaskDTO,
    TaskViewDTO,
    UpdateTaskStatusDTO,
)
from todo_list_api.core.domain.task import Task

logger = structlog.get_logger()


class TaskService:
    """Stateless orchestration over a unit of work. Every write commits exactly once."""

    def __init__(self, uow: UnitOfWorkPort) -> None:
        self._uow = uow

    async def create(self, dto: CreateTaskDTO) -> UUID:
        task_id = uuid4()
        # uuid4 never repeats in practice, the lookup only guards the insert
        if await self._uow.tasks.get_by_id(task_id) is not None:
            logger.error("Generated task id already exists", task_id=str(task_id))
            raise TaskIdConflictError(task_id)

        task = Task(
            id=task_id,
            name=dto.name,
            description=dto.description,
            due_date=dto.due_date,
            is_completed=False,
        )
        await self._uow.tasks.add(task)
        await self._uow.commit()
        logger.info("Task created", task_id=str(task_id))
        return task_id

    async def list_tasks(self) -> list[TaskViewDTO]:
        tasks = await self._uow.tasks.get_all()
        return [self._to_view(task) for task in tasks]

    async def update_status(self, task_id: UUID, dto: UpdateTaskStatusDTO) -> None:
        task = await self._get_existing(task_id)
        task.mark_status(dto.is_completed)
        await self._uow.tasks.update(task)
        await self._uow.commit()
        logger.info("Task status updated", task_id=str(task_id), is_completed=dto.is_completed)

    async def delete(self, task_id: UUID) -> None:
        task = await self._get_existing(task_id)
        await self._uow.tasks.delete(task)
        await self._uow.commit()
        logger.info("Task deleted", task_id=str(task_id))

    async def _get_existing(self, task_id: UUID) -> Task:
        task = await self._uow.tasks.get_by_id(task_id)
        if task is None:
            logger.warning("Task not found", task_id=str(task_id))
            raise TaskNotFoundError(task_id)
        return task

    @staticmethod
    def _to_view(task: Task) -> TaskViewDTO:
        return TaskViewDTO(
            id=task.id,
            name=task.name,
            description=task.description,
            due_date=task.due_date,
            is_completed=task.is_completed,
        )
