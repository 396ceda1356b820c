from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from todo_list_api.core.application.ports import TaskRepositoryPort
from todo_list_api.core.domain.task import Task
from todo_list_api.infrastructure.persistence.mappers import TaskRecordMapper
from todo_list_api.infrastructure.persistence.models import TaskRecord


class SqlAlchemyTaskRepository(TaskRepositoryPort):
    """Stages task changes on an AsyncSession. Flushing is left to the unit of work."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, task_id: UUID) -> Task | None:
        record = await self._session.get(TaskRecord, task_id)
        return TaskRecordMapper.to_domain(record) if record is not None else None

    async def get_all(self) -> list[Task]:
        records = await self._session.scalars(select(TaskRecord))
        return [TaskRecordMapper.to_domain(record) for record in records]

    async def add(self, task: Task) -> None:
        self._session.add(TaskRecordMapper.to_record(task))

    async def update(self, task: Task) -> None:
        await self._session.merge(TaskRecordMapper.to_record(task))

    async def delete(self, task: Task) -> None:
        record = await self._session.get(TaskRecord, task.id)
        if record is not None:
            await self._session.delete(record)
