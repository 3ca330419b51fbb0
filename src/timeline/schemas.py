"""Timeline chart schemas.

The item shape mirrors what Gantt chart widgets expect: a flat list of
bars and milestone markers, with task bars pointing at their parent
activity bar.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, computed_field


class TimelineItemKind(str, Enum):
    """Kind of timeline entry."""

    ACTIVITY = "activity"
    TASK = "task"
    MILESTONE = "milestone"

    @classmethod
    def from_chart_type(cls, value: "str | TimelineItemKind") -> "TimelineItemKind | None":
        """Map a chart library type (activity bars are 'project') to a kind.

        Returns:
            Matching kind, or None for an unknown value
        """
        if isinstance(value, TimelineItemKind):
            return value
        normalized = value.strip().lower()
        if normalized == "project":
            return cls.ACTIVITY
        try:
            return cls(normalized)
        except ValueError:
            return None


class MilestoneKind(str, Enum):
    """Source record behind a milestone marker."""

    DELIVERABLE = "deliverable"
    DECISION_GATE = "decision_gate"


class TimelineViewMode(str, Enum):
    """Zoom level offered by the chart."""

    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"

    @property
    def step_days(self) -> int:
        """Days between axis ticks."""
        return {
            TimelineViewMode.DAY: 1,
            TimelineViewMode.WEEK: 7,
            TimelineViewMode.MONTH: 30,
            TimelineViewMode.YEAR: 365,
        }[self]


class TimelineStyle(BaseModel):
    """Colour hints for a rendered item."""

    bar_color: str | None = Field(default=None, description="Fill for task bars")
    milestone_color: str | None = Field(default=None, description="Fill for milestone markers")


class TimelineItem(BaseModel):
    """One bar or marker on the timeline.

    start/end are None when the source date could not be parsed; the
    display layer renders those as invalid dates.
    """

    kind: TimelineItemKind = Field(description="activity, task, or milestone")
    id: str = Field(description="Source record identifier")
    name: str = Field(default="", description="Display label")
    start: datetime | None = Field(default=None, description="Resolved start instant")
    end: datetime | None = Field(default=None, description="Resolved end instant")
    parent: str | None = Field(default=None, description="Parent activity id (tasks only)")
    milestone_kind: MilestoneKind | None = Field(default=None)
    style: TimelineStyle | None = Field(default=None)

    @computed_field
    @property
    def chart_type(self) -> str:
        """Type name used by the chart library ('project' for activities)."""
        if self.kind == TimelineItemKind.ACTIVITY:
            return "project"
        return self.kind.value


class TimelineWindow(BaseModel):
    """Visible date range of the chart, padded on both sides."""

    start: datetime
    end: datetime


class TimelineResponse(BaseModel):
    """Timeline items together with their viewport."""

    items: list[TimelineItem] = Field(default_factory=list)
    window: TimelineWindow | None = Field(default=None)
    view_mode: TimelineViewMode = Field(default=TimelineViewMode.DAY)
    step_days: int = Field(default=1)
