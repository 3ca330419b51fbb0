"""Costing module for resource, task, and activity roll-ups."""

from src.costing.calculator import (
    activity_due_date,
    activity_duration,
    activity_progress,
    activity_total_cost,
    assignment_cost,
    assignment_duration,
    milestone_budgets,
    percent_of_total,
    resource_cost,
    resource_duration,
    resource_utilization,
    task_total_cost,
)
from src.costing.schemas import ActivityUtilization, MilestoneBudget, ResourceCost

__all__ = [
    "ActivityUtilization",
    "MilestoneBudget",
    "ResourceCost",
    "activity_due_date",
    "activity_duration",
    "activity_progress",
    "activity_total_cost",
    "assignment_cost",
    "assignment_duration",
    "milestone_budgets",
    "percent_of_total",
    "resource_cost",
    "resource_duration",
    "resource_utilization",
    "task_total_cost",
]
