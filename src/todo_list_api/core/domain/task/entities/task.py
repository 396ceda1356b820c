from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Task:
    id: UUID
    name: str
    description: str | None = None
    due_date: datetime | None = None
    is_completed: bool = False

    def mark_status(self, is_completed: bool) -> "Task":
        """Only the completion flag is mutable after creation."""
        self.is_completed = is_completed
        return self
