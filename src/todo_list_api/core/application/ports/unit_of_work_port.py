from abc import ABC, abstractmethod
from types import TracebackType

from todo_list_api.core.application.ports.task_repository_port import TaskRepositoryPort


class UnitOfWorkPort(ABC):
    """Single commit boundary over the task repository.

    Used as an async context manager. Leaving the block without a commit
    discards whatever was staged.
    """

    tasks: TaskRepositoryPort

    async def __aenter__(self) -> "UnitOfWorkPort":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.rollback()

    @abstractmethod
    async def commit(self) -> int:
        """Writes staged changes. Returns the number of affected rows."""

    @abstractmethod
    async def rollback(self) -> None:
        """Discards staged changes."""
