"""Risk matrix schemas."""

from enum import Enum

from pydantic import BaseModel, Field, computed_field

from src.models import Risk

# Rating scale shared by both matrix axes
RATING_SCALE = range(1, 6)

# Lower score bound of each tier, checked from highest to lowest
HIGH_THRESHOLD = 16
MEDIUM_THRESHOLD = 9


class SeverityTier(str, Enum):
    """Severity derived from impact x probability."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RiskMatrixCell(BaseModel):
    """One (probability, impact) cell of the 5x5 matrix."""

    probability: int = Field(ge=1, le=5, description="Row rating")
    impact: int = Field(ge=1, le=5, description="Column rating")
    risks: list[Risk] = Field(default_factory=list, description="Risks rated exactly here")
    severity: SeverityTier | None = Field(
        default=None,
        description="Tier of the cell score; None while the cell is empty",
    )

    @computed_field
    @property
    def score(self) -> int:
        """Cell score (probability x impact)."""
        return self.probability * self.impact

    @computed_field
    @property
    def count(self) -> int:
        """Number of risks in the cell."""
        return len(self.risks)


class RiskSummary(BaseModel):
    """Counts of risks by severity tier and status."""

    total: int = Field(description="All risks supplied")
    rated: int = Field(description="Risks with both ratings within 1-5")
    unrated: int = Field(description="Risks left out of the matrix")
    by_severity: dict[str, int] = Field(default_factory=dict)
    by_status: dict[str, int] = Field(default_factory=dict)
