"""Decision gate model: a scheduled go/no-go review."""

from pydantic import Field, field_validator

from src.models.base import BaseRecord, DefaultingEnum, RecordModel


class GateStatus(DefaultingEnum):
    """Status of a decision gate."""

    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class GateParticipant(RecordModel):
    """Someone expected to attend a decision gate."""

    id: str | None = None
    name: str = ""


class DecisionGate(BaseRecord):
    """A decision gate held at a specific date and time."""

    name: str = Field(default="", description="Display name")
    date_time: str | None = Field(default=None, description="ISO date-time of the gate")
    objective: str | None = Field(default=None, description="What must be decided")
    video_conference_link: str | None = Field(default=None)
    participants: list[GateParticipant] = Field(default_factory=list)
    status: GateStatus = Field(default=GateStatus.SCHEDULED)

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: object) -> GateStatus:
        return GateStatus.default() if value is None else GateStatus(value)
