from datetime import UTC, datetime

from todo_list_api.core.domain.task import Task
from todo_list_api.infrastructure.persistence.models import TaskRecord


class TaskRecordMapper:
    """Translates between the ORM row and the domain entity.

    Due dates are written as UTC. Backends without zone support (SQLite)
    hand them back naive, so naive values read from a row are UTC.
    """

    @staticmethod
    def to_domain(record: TaskRecord) -> Task:
        return Task(
            id=record.id,
            name=record.name,
            description=record.description,
            due_date=_as_utc(record.due_date),
            is_completed=record.is_completed,
        )

    @staticmethod
    def to_record(task: Task) -> TaskRecord:
        return TaskRecord(
            id=task.id,
            name=task.name,
            description=task.description,
            due_date=_as_utc(task.due_date),
            is_completed=task.is_completed,
        )


def _as_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
