from types import TracebackType

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from todo_list_api.core.application.ports import UnitOfWorkPort
from todo_list_api.infrastructure.observability.logger_factory_service import get_logger
from todo_list_api.infrastructure.persistence.sqlalchemy_task_repository import (
    SqlAlchemyTaskRepository,
)

logger = get_logger("unit_of_work")


class SqlAlchemyUnitOfWork(UnitOfWorkPort):
    """One AsyncSession per `async with` block; closed on exit whatever happens."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        self._session = self._session_factory()
        self.tasks = SqlAlchemyTaskRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            await self.session.close()
            self._session = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("Unit of work used outside of its `async with` block")
        return self._session

    async def commit(self) -> int:
        session = self.session
        affected = len(session.new) + len(session.dirty) + len(session.deleted)
        await session.commit()
        logger.debug("Unit of work committed", affected_rows=affected)
        return affected

    async def rollback(self) -> None:
        await self.session.rollback()
