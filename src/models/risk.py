"""Risk model for risks tracked against a project plan."""

from pydantic import Field, field_validator, model_validator

from src.models.base import ActivityId, BaseRecord, DefaultingEnum, RecordModel


class RiskStatus(DefaultingEnum):
    """Lifecycle status of a risk."""

    ACTIVE = "Active"
    MITIGATED = "Mitigated"
    CLOSED = "Closed"
    ACCEPTED = "Accepted"


class MitigationAction(RecordModel):
    """A planned action reducing a risk."""

    id: str | None = None
    description: str = ""


class Risk(BaseRecord):
    """A risk rated on 1-5 impact and probability scales.

    Ratings are not range-checked here: a risk rated outside 1-5 is kept
    and simply never lands in a risk matrix cell. Ratings that are not
    whole numbers ("high", 2.5) are read as missing.
    """

    name: str = Field(default="", description="Display name")
    description: str | None = Field(default=None)
    impact: int | None = Field(default=None, description="Impact rating (1-5)")
    probability: int | None = Field(default=None, description="Probability rating (1-5)")
    risk_score: int | None = Field(
        default=None,
        description="impact x probability; derived when absent",
    )
    status: RiskStatus = Field(default=RiskStatus.ACTIVE)
    associated_activities: list[ActivityId] = Field(default_factory=list)
    mitigation_actions: list[MitigationAction] = Field(default_factory=list)
    updated_at: str | None = Field(default=None)

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, value: object) -> RiskStatus:
        return RiskStatus.default() if value is None else RiskStatus(value)

    @field_validator("impact", "probability", "risk_score", mode="before")
    @classmethod
    def _lenient_rating(cls, value: object) -> int | None:
        if value is None or isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(value) if value.is_integer() else None
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return None
        return None

    @field_validator("associated_activities", "mitigation_actions", mode="before")
    @classmethod
    def _missing_list(cls, value: object) -> object:
        return [] if value is None else value

    @model_validator(mode="after")
    def _derive_score(self) -> "Risk":
        if self.risk_score is None and self.impact is not None and self.probability is not None:
            self.risk_score = self.impact * self.probability
        return self

    @property
    def has_mitigation(self) -> bool:
        """Check if risk has at least one mitigation action."""
        return any(action.description.strip() for action in self.mitigation_actions)
