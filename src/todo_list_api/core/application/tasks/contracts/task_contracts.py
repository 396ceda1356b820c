from datetime import UTC, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic.alias_generators import to_camel

_CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateTaskDTO(BaseModel):
    model_config = _CAMEL_CASE

    name: str = Field(min_length=1, description="Short task name, required")
    description: str | None = Field(default=None)
    due_date: datetime | None = Field(default=None)

    @field_validator("name")
    @classmethod
    def reject_blank_name(cls, value: str) -> str:
        """Whitespace-only names count as missing; the value itself is kept verbatim."""
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: datetime | None) -> datetime | None:
        """Store deadlines as UTC instants. Naive values are read as UTC."""
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class TaskViewDTO(BaseModel):
    """Read-only projection of a stored task."""

    model_config = ConfigDict(**_CAMEL_CASE, frozen=True)

    id: UUID
    name: str
    description: str | None = None
    due_date: datetime | None = None
    is_completed: bool


class UpdateTaskStatusDTO(BaseModel):
    model_config = _CAMEL_CASE

    is_completed: StrictBool
