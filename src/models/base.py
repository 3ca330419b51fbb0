"""Base record class for all project planning models."""

from enum import Enum
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Cross-record references are plain strings in the document store
ActivityId = NewType("ActivityId", str)
TaskId = NewType("TaskId", str)
ResourceId = NewType("ResourceId", str)


class RecordModel(BaseModel):
    """Base class for JSON-shaped records.

    Provides:
    - camelCase aliases matching the stored documents (``activityId``)
    - population by snake_case field name as well
    - tolerance of unknown keys written by other parts of the dashboard
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        from_attributes=True,
        extra="ignore",
    )


class BaseRecord(RecordModel):
    """Base class for stored entities with an identity."""

    id: str = Field(description="Document identifier")
    created_at: str | None = Field(
        default=None,
        description="When the record was created (ISO format)",
    )


class DefaultingEnum(str, Enum):
    """String enum that falls back to its first member for unknown values.

    Lookup is case-insensitive, so "in progress" matches "In Progress".
    """

    @classmethod
    def default(cls) -> "DefaultingEnum":
        return next(iter(cls))

    @classmethod
    def _missing_(cls, value: object) -> "DefaultingEnum":
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return cls.default()
