"""Timeline API endpoints for Gantt chart data.

Callers post the project records they already fetched; nothing is
stored between requests.
"""

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from src.models import Activity, DecisionGate, Deliverable, RecordModel, Task
from src.timeline import (
    TimelineItemKind,
    TimelineResponse,
    TimelineViewMode,
    build_timeline,
    resolve_clicked_element,
    timeline_window,
)

router = APIRouter(prefix="/timeline", tags=["timeline"])


class TimelineSources(RecordModel):
    """Project records a timeline is built from."""

    activities: list[Activity] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)
    deliverables: list[Deliverable] = Field(default_factory=list)
    decision_gates: list[DecisionGate] = Field(default_factory=list)


class TimelineRequest(TimelineSources):
    """Request body for building a timeline."""

    view_mode: TimelineViewMode = Field(default=TimelineViewMode.DAY)


class ResolveRequest(TimelineSources):
    """Request body for resolving a clicked chart item."""

    id: str = Field(description="Identifier of the clicked item")
    kind: str = Field(description="activity/project, task, or milestone")


class ResolvedElement(BaseModel):
    """Source record behind a chart item."""

    source: str = Field(description="activity, task, deliverable, or decision_gate")
    record: dict[str, Any] = Field(description="The matching record")


_SOURCE_NAMES: dict[type, str] = {
    Activity: "activity",
    Task: "task",
    Deliverable: "deliverable",
    DecisionGate: "decision_gate",
}


@router.post("", response_model=TimelineResponse)
async def create_timeline(body: TimelineRequest) -> TimelineResponse:
    """Build the sorted chart items and their padded viewport."""
    items = build_timeline(
        body.activities,
        body.tasks,
        body.deliverables,
        body.decision_gates,
    )
    return TimelineResponse(
        items=items,
        window=timeline_window(items),
        view_mode=body.view_mode,
        step_days=body.view_mode.step_days,
    )


@router.post("/resolve", response_model=ResolvedElement)
async def resolve_element(body: ResolveRequest) -> ResolvedElement:
    """Find the record a clicked chart item was built from.

    Raises 422 for an unknown kind and 404 when no record matches.
    """
    if TimelineItemKind.from_chart_type(body.kind) is None:
        raise HTTPException(status_code=422, detail=f"Unknown item kind: {body.kind}")

    element = resolve_clicked_element(
        body.id,
        body.kind,
        body.activities,
        body.tasks,
        body.deliverables,
        body.decision_gates,
    )
    if element is None:
        raise HTTPException(status_code=404, detail=f"No {body.kind} with id {body.id}")

    return ResolvedElement(
        source=_SOURCE_NAMES[type(element)],
        record=element.model_dump(mode="json", by_alias=True),
    )
