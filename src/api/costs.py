"""Cost roll-up API endpoints.

Amounts are returned both as numbers and as display strings formatted
with the configured currency.
"""

import math
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from src.api.dependencies import get_formatter
from src.costing import (
    ActivityUtilization,
    MilestoneBudget,
    activity_due_date,
    activity_duration,
    activity_progress,
    activity_total_cost,
    milestone_budgets,
    resource_cost,
    resource_duration,
    resource_utilization,
    task_total_cost,
)
from src.formatting import Formatter
from src.models import (
    Activity,
    HumanResource,
    MaterialResource,
    Milestone,
    RecordModel,
    ResourceType,
    Task,
)

router = APIRouter(prefix="/costs", tags=["costs"])


def _finite(value: float) -> float | None:
    """Report nan (undefined) amounts as null."""
    return None if math.isnan(value) else value


class ResourceCostRequest(RecordModel):
    """Request body for pricing one resource assignment."""

    resource_type: ResourceType
    human_resource: HumanResource | None = None
    material_resource: MaterialResource | None = None
    quantity: float = Field(default=1)
    start_date: str
    end_date: str


class ResourceCostResponse(BaseModel):
    """Priced resource assignment."""

    duration: float | None
    daily_cost: float | None
    total_cost: float | None
    total_display: str


class TaskCostRequest(RecordModel):
    """Request body carrying tasks."""

    tasks: list[Task] = Field(default_factory=list)


class TaskCostRow(BaseModel):
    """Cost of one task."""

    id: str
    name: str
    total_cost: float
    total_display: str


class ActivityCostRequest(RecordModel):
    """Request body carrying activities and their tasks."""

    activities: list[Activity] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)
    total_project_cost: float | None = Field(
        default=None,
        description="Denominator for utilization percentages",
    )
    limit: int | None = Field(default=None, ge=1)


class MilestoneBudgetRequest(RecordModel):
    """Request body carrying milestones and the project cost."""

    milestones: list[Milestone] = Field(default_factory=list)
    total_project_cost: float = Field(default=0, description="Denominator for budget shares")


class MilestoneBudgetRow(MilestoneBudget):
    """Milestone budget with its display amount."""

    budget_display: str


class ActivityCostRow(BaseModel):
    """Roll-up of one activity."""

    id: str
    name: str
    task_count: int
    total_cost: float
    total_display: str
    duration: float
    progress: int
    due_date: datetime | None


class ActivityCostResponse(BaseModel):
    """Activity roll-ups with optional budget utilization."""

    activities: list[ActivityCostRow]
    utilization: list[ActivityUtilization] = Field(default_factory=list)


@router.post("/resource", response_model=ResourceCostResponse)
async def price_resource(
    body: ResourceCostRequest,
    formatter: Formatter = Depends(get_formatter),
) -> ResourceCostResponse:
    """Price a resource over an inclusive date range."""
    resource = (
        body.human_resource
        if body.resource_type == ResourceType.HUMAN
        else body.material_resource
    )
    if resource is None:
        raise HTTPException(
            status_code=422,
            detail=f"{body.resource_type.value}_resource is required",
        )

    duration = resource_duration(body.start_date, body.end_date)
    cost = resource_cost(resource, body.quantity, duration)
    return ResourceCostResponse(
        duration=_finite(duration),
        daily_cost=_finite(cost.daily_cost),
        total_cost=_finite(cost.total_cost),
        total_display=formatter.format_currency(cost.total_cost),
    )


@router.post("/tasks", response_model=list[TaskCostRow])
async def task_costs(
    body: TaskCostRequest,
    formatter: Formatter = Depends(get_formatter),
) -> list[TaskCostRow]:
    """Total resource cost of each task."""
    rows = []
    for task in body.tasks:
        total = task_total_cost(task)
        rows.append(
            TaskCostRow(
                id=task.id,
                name=task.name,
                total_cost=total,
                total_display=formatter.format_currency(total),
            )
        )
    return rows


@router.post("/activities", response_model=ActivityCostResponse)
async def activity_costs(
    body: ActivityCostRequest,
    formatter: Formatter = Depends(get_formatter),
) -> ActivityCostResponse:
    """Cost, duration, progress, and due date of each activity."""
    rows = []
    for activity in body.activities:
        total = activity_total_cost(activity.id, body.tasks)
        rows.append(
            ActivityCostRow(
                id=activity.id,
                name=activity.name,
                task_count=sum(1 for task in body.tasks if task.activity_id == activity.id),
                total_cost=total,
                total_display=formatter.format_currency(total),
                duration=activity_duration(activity.id, body.tasks),
                progress=activity_progress(activity.id, body.tasks),
                due_date=activity_due_date(activity.id, body.tasks),
            )
        )

    utilization: list[ActivityUtilization] = []
    if body.total_project_cost:
        utilization = resource_utilization(
            body.activities,
            body.tasks,
            body.total_project_cost,
            limit=body.limit,
        )

    return ActivityCostResponse(activities=rows, utilization=utilization)


@router.post("/milestones", response_model=list[MilestoneBudgetRow])
async def milestone_budget_shares(
    body: MilestoneBudgetRequest,
    formatter: Formatter = Depends(get_formatter),
) -> list[MilestoneBudgetRow]:
    """Budget of each milestone and its share of the project cost."""
    return [
        MilestoneBudgetRow(
            **row.model_dump(),
            budget_display=formatter.format_currency(row.budget),
        )
        for row in milestone_budgets(body.milestones, body.total_project_cost)
    ]
