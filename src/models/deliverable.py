"""Deliverable model: a dated milestone with success criteria."""

from pydantic import Field, field_validator

from src.models.activity import ActivityStatus
from src.models.base import ActivityId, BaseRecord, RecordModel


class SuccessCriterion(RecordModel):
    """A free-text acceptance condition for a deliverable."""

    id: str | None = None
    description: str = ""


class Deliverable(BaseRecord):
    """A deliverable due on a single deadline."""

    name: str = Field(default="", description="Display name")
    description: str | None = Field(default=None)
    deadline: str | None = Field(default=None, description="Due date (YYYY-MM-DD)")
    status: ActivityStatus = Field(default=ActivityStatus.NOT_STARTED)
    dependent_activities: list[ActivityId] = Field(
        default_factory=list,
        description="Activities this deliverable depends on",
    )
    success_criteria: list[SuccessCriterion] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: object) -> ActivityStatus:
        return ActivityStatus.default() if value is None else ActivityStatus(value)

    @field_validator("success_criteria", mode="before")
    @classmethod
    def _criteria_from_text(cls, value: object) -> object:
        # Older records store plain strings instead of {id, description}
        if value is None:
            return []
        if isinstance(value, list):
            return [
                {"description": item} if isinstance(item, str) else item
                for item in value
            ]
        return value
