"""Cost and duration arithmetic for resources, tasks, and activities.

All helpers are pure and total: malformed dates turn durations into nan
and zero divisors turn rates into nan, rather than raising.
"""

import math
from collections.abc import Sequence
from datetime import datetime

from src.costing.schemas import ActivityUtilization, MilestoneBudget, ResourceCost
from src.dates import DateInput, inclusive_days, parse_calendar_date, parse_instant
from src.models import (
    Activity,
    CostType,
    HumanResource,
    MaterialResource,
    Milestone,
    ResourceAssignment,
    Task,
)

Resource = HumanResource | MaterialResource


def _divide(numerator: float, denominator: float) -> float:
    if not denominator:
        return math.nan
    return numerator / denominator


def resource_duration(start_date: DateInput, end_date: DateInput) -> int | float:
    """Count assigned days, inclusive of both endpoints.

    Examples:
        >>> resource_duration("2025-01-01", "2025-01-05")
        5
    """
    return inclusive_days(start_date, end_date)


def assignment_duration(assignment: ResourceAssignment) -> int | float:
    """Count the days covered by an assignment.

    Multi-range assignments sum the inclusive length of each range;
    otherwise the single start/end pair is used.
    """
    if assignment.multiple_ranges:
        return sum(
            inclusive_days(date_range.start_date, date_range.end_date)
            for date_range in assignment.date_ranges
        )
    return inclusive_days(assignment.start_date, assignment.end_date)


def resource_cost(
    resource: Resource,
    quantity: float,
    duration_days: float,
) -> ResourceCost:
    """Price a resource for a quantity over a number of days.

    - Human: daily = cost_per_day; total = daily x quantity x days
    - Material, one-time: total = cost_amount x quantity;
      daily = cost_amount / days (informational only)
    - Material, recurring: daily = cost_amount / amortization_period;
      total = daily x quantity x days

    Args:
        resource: Human or material resource
        quantity: Units assigned
        duration_days: Days assigned

    Returns:
        ResourceCost with daily and total cost
    """
    if isinstance(resource, HumanResource):
        daily_cost = resource.cost_per_day
        return ResourceCost(
            daily_cost=daily_cost,
            total_cost=daily_cost * quantity * duration_days,
        )

    if resource.cost_type == CostType.ONE_TIME:
        return ResourceCost(
            daily_cost=_divide(resource.cost_amount, duration_days),
            total_cost=resource.cost_amount * quantity,
        )

    daily_cost = _divide(resource.cost_amount, resource.amortization_period)
    return ResourceCost(
        daily_cost=daily_cost,
        total_cost=daily_cost * quantity * duration_days,
    )


def assignment_cost(assignment: ResourceAssignment, resource: Resource) -> ResourceCost:
    """Price an assignment from its own dates and quantity.

    Multi-range assignments are billed per covered day at the daily
    rate, so one-time materials spread over several ranges are charged
    by day rather than once.
    """
    duration = assignment_duration(assignment)
    cost = resource_cost(resource, assignment.quantity, duration)
    if assignment.multiple_ranges:
        return ResourceCost(
            daily_cost=cost.daily_cost,
            total_cost=duration * cost.daily_cost * assignment.quantity,
        )
    return cost


def task_total_cost(task: Task) -> float:
    """Sum the stored total cost of every assignment on a task."""
    return sum(assignment.total_cost for assignment in task.resources)


def _activity_tasks(activity_id: str, tasks: Sequence[Task]) -> list[Task]:
    return [task for task in tasks if task.activity_id == activity_id]


def activity_total_cost(activity_id: str, tasks: Sequence[Task]) -> float:
    """Sum task costs over the tasks of an activity."""
    return sum(task_total_cost(task) for task in _activity_tasks(activity_id, tasks))


def activity_duration(activity_id: str, tasks: Sequence[Task]) -> float:
    """Sum task durations over the tasks of an activity (0 without tasks)."""
    return sum(task.duration or 0 for task in _activity_tasks(activity_id, tasks))


def activity_progress(activity_id: str, tasks: Sequence[Task]) -> int:
    """Percentage of an activity's tasks that are completed, rounded half up."""
    activity_tasks = _activity_tasks(activity_id, tasks)
    if not activity_tasks:
        return 0
    completed = sum(1 for task in activity_tasks if task.is_completed)
    return math.floor(completed / len(activity_tasks) * 100 + 0.5)


def activity_due_date(activity_id: str, tasks: Sequence[Task]) -> datetime | None:
    """Latest end date among an activity's tasks, or None if none is valid."""
    end_dates = [
        end
        for task in _activity_tasks(activity_id, tasks)
        if (end := parse_calendar_date(task.end_date)) is not None
    ]
    return max(end_dates) if end_dates else None


def percent_of_total(amount: float, total: float) -> float:
    """Share of a total as a percentage; 0 when the total is not positive."""
    if total <= 0:
        return 0.0
    return amount / total * 100


def milestone_budgets(
    milestones: Sequence[Milestone],
    total_project_cost: float,
) -> list[MilestoneBudget]:
    """Express each milestone budget as a share of the project cost.

    Milestones without a budget count as 0. Input order is kept.
    """
    rows = []
    for milestone in milestones:
        budget = milestone.budget or 0.0
        rows.append(
            MilestoneBudget(
                id=milestone.id,
                name=milestone.name,
                budget=budget,
                percent_of_total=percent_of_total(budget, total_project_cost),
            )
        )
    return rows


def resource_utilization(
    activities: Sequence[Activity],
    tasks: Sequence[Task],
    total_project_cost: float,
    limit: int | None = None,
) -> list[ActivityUtilization]:
    """Allocated and actually spent budget per activity.

    Allocated covers every assignment on the activity's tasks; actual
    covers completed tasks only. Both are also expressed as a share of
    the total project cost. Results are ordered oldest activity first.

    Args:
        activities: Activities to report on
        tasks: All project tasks
        total_project_cost: Denominator for the percentages
        limit: Keep only the first N activities

    Returns:
        Utilization rows, empty when the project cost is zero
    """
    if not total_project_cost:
        return []

    rows: list[ActivityUtilization] = []
    for activity in activities:
        activity_tasks = _activity_tasks(activity.id, tasks)
        allocated = sum(task_total_cost(task) for task in activity_tasks)
        actual = sum(task_total_cost(task) for task in activity_tasks if task.is_completed)
        rows.append(
            ActivityUtilization(
                id=activity.id,
                name=activity.name,
                allocated_amount=allocated,
                allocated_percent=allocated / total_project_cost * 100,
                actual_amount=actual,
                actual_percent=actual / total_project_cost * 100,
                created_at=activity.created_at,
            )
        )

    def created_key(row: ActivityUtilization) -> tuple[bool, datetime]:
        created = parse_instant(row.created_at)
        return (created is None, created or datetime.min)

    rows.sort(key=created_key)
    return rows[:limit] if limit is not None else rows
