from abc import ABC, abstractmethod
from uuid import UUID

from todo_list_api.core.domain.task import Task


class TaskRepositoryPort(ABC):
    """Stages reads and writes of tasks; nothing is persisted until the unit of work commits."""

    @abstractmethod
    async def get_by_id(self, task_id: UUID) -> Task | None:
        """Returns the stored task or None."""

    @abstractmethod
    async def get_all(self) -> list[Task]:
        """Returns every stored task in store order."""

    @abstractmethod
    async def add(self, task: Task) -> None:
        """Stages an insert."""

    @abstractmethod
    async def update(self, task: Task) -> None:
        """Stages an update of an existing task."""

    @abstractmethod
    async def delete(self, task: Task) -> None:
        """Stages a delete."""
