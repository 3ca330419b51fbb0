"""Task model and its resource assignments."""

import math

from pydantic import Field, field_validator, model_validator

from src.dates import inclusive_days
from src.models.base import (
    ActivityId,
    BaseRecord,
    DefaultingEnum,
    RecordModel,
    ResourceId,
)
from src.models.resource import ResourceType


class TaskStatus(DefaultingEnum):
    """Status of a task."""

    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    BLOCKED = "Blocked"
    POSTPONED = "Postponed"


class TaskPriority(DefaultingEnum):
    """Priority of a task."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def default(cls) -> "TaskPriority":
        return cls.MEDIUM


class DateRange(RecordModel):
    """One contiguous span of an assignment."""

    start_date: str | None = None
    end_date: str | None = None


class ResourceAssignment(RecordModel):
    """A human or material resource bound to a task with its derived cost."""

    id: str | None = Field(default=None, description="Assignment identifier")
    resource_id: ResourceId = Field(description="Referenced resource")
    resource_type: ResourceType = Field(default=ResourceType.HUMAN)
    quantity: float = Field(default=1, description="Units assigned")
    start_date: str | None = Field(default=None)
    end_date: str | None = Field(default=None)
    duration: float = Field(default=0, description="Days assigned")
    daily_cost: float = Field(default=0.0)
    total_cost: float = Field(default=0.0)
    multiple_ranges: bool = Field(
        default=False,
        description="Whether date_ranges replaces the single start/end pair",
    )
    date_ranges: list[DateRange] = Field(default_factory=list)

    @field_validator("quantity", "duration", "daily_cost", "total_cost", mode="before")
    @classmethod
    def _missing_number_is_zero(cls, value: object) -> object:
        return 0 if value is None else value


class Task(BaseRecord):
    """A scheduled unit of work owned by an activity."""

    activity_id: ActivityId = Field(description="Owning activity")
    name: str = Field(default="", description="Display name")
    description: str | None = Field(default=None)
    start_date: str | None = Field(default=None, description="Start date (YYYY-MM-DD)")
    end_date: str | None = Field(default=None, description="End date (YYYY-MM-DD)")
    duration: float | None = Field(
        default=None,
        description="Duration in days; derived from the dates when absent",
    )
    status: TaskStatus = Field(default=TaskStatus.NOT_STARTED)
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM)
    assigned_to: str | None = Field(default=None, description="Team member reference")
    multiple_ranges: bool = Field(default=False)
    date_ranges: list[DateRange] = Field(default_factory=list)
    resources: list[ResourceAssignment] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: object) -> TaskStatus:
        return TaskStatus.default() if value is None else TaskStatus(value)

    @field_validator("priority", mode="before")
    @classmethod
    def _coerce_priority(cls, value: object) -> TaskPriority:
        return TaskPriority.default() if value is None else TaskPriority(value)

    @field_validator("resources", mode="before")
    @classmethod
    def _missing_resources(cls, value: object) -> object:
        return [] if value is None else value

    @model_validator(mode="after")
    def _derive_duration(self) -> "Task":
        if self.duration is None:
            days = inclusive_days(self.start_date, self.end_date)
            self.duration = 0 if math.isnan(days) else days
        return self

    @property
    def is_completed(self) -> bool:
        """Check if task is completed."""
        return self.status == TaskStatus.COMPLETED
