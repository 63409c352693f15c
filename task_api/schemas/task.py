"""Task Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - Strings are whitespace-stripped before length checks
    - TaskCreate.title: 1-255 chars after stripping
    - TaskUpdate: every field optional, but title/completed may not be null when sent
    - Blank descriptions normalize to None
    - completed accepts booleans, 0/1 and "0"/"1"; other strings such as "yes" are rejected
    - TaskResponse timestamps serialize as ISO-8601 UTC with microseconds

Design Decisions:
    - model_fields_set drives partial updates: PUT and PATCH share one schema
"""

from datetime import datetime, timezone
from typing import Annotated

from pydantic import (
    BaseModel, BeforeValidator, ConfigDict, Field, field_serializer,
    field_validator,
)
from pydantic_core import PydanticCustomError

from task_api.models.task import TITLE_MAX_LENGTH


def _strict_boolean(v):
    """Accept true/false, 0/1 and "0"/"1" only; None passes to the null checks."""
    if v is None or isinstance(v, bool):
        return v
    if isinstance(v, int) and v in (0, 1):
        return bool(v)
    if isinstance(v, str) and v in ("0", "1"):
        return v == "1"
    raise PydanticCustomError("bool_type", "Input should be a valid boolean")


BooleanInput = Annotated[bool, BeforeValidator(_strict_boolean)]


class _TaskInput(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("description", check_fields=False)
    @classmethod
    def blank_description_is_none(cls, v: str | None) -> str | None:
        return v or None


class TaskCreate(_TaskInput):
    """Task creation — title required, description optional, completed defaults False."""
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = None
    completed: BooleanInput = False


class TaskUpdate(_TaskInput):
    """Task update — only supplied fields are applied."""
    title: str | None = Field(None, min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = None
    completed: BooleanInput | None = None

    @field_validator("title", "completed", mode="before")
    @classmethod
    def reject_explicit_null(cls, v):
        if v is None:
            raise ValueError("field may not be null")
        return v

    def changes(self) -> dict:
        """Fields the client actually sent, with their validated values."""
        return self.model_dump(include=self.model_fields_set)


class TaskResponse(BaseModel):
    """Task response — public-facing task data."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    completed: bool
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: datetime) -> str:
        # SQLite hands back naive datetimes; every stored value is UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="microseconds")
