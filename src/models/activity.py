"""Activity model: a named grouping of related tasks."""

from pydantic import Field, field_validator

from src.models.base import BaseRecord, DefaultingEnum


class ActivityStatus(DefaultingEnum):
    """Status of an activity."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    DELAYED = "Delayed"


class Activity(BaseRecord):
    """A named grouping of tasks within a project plan.

    Activities carry no dates of their own; their span on the timeline
    is derived from the tasks that reference them.
    """

    name: str = Field(default="", description="Display name")
    description: str | None = Field(default=None, description="Optional description")
    status: ActivityStatus = Field(
        default=ActivityStatus.NOT_STARTED,
        description="Current status",
    )

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: object) -> ActivityStatus:
        return ActivityStatus.default() if value is None else ActivityStatus(value)
