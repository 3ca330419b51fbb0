"""Milestone model used for budget roll-ups."""

from pydantic import Field, field_validator

from src.models.activity import ActivityStatus
from src.models.base import BaseRecord


class Milestone(BaseRecord):
    """A dated project milestone with an optional budget."""

    name: str = Field(default="", description="Display name")
    description: str | None = Field(default=None)
    date: str | None = Field(default=None, description="Milestone date (YYYY-MM-DD)")
    status: ActivityStatus = Field(default=ActivityStatus.NOT_STARTED)
    associated_deliverables: list[str] = Field(default_factory=list)
    budget: float | None = Field(default=None, description="Budget allocated")

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: object) -> ActivityStatus:
        return ActivityStatus.default() if value is None else ActivityStatus(value)
