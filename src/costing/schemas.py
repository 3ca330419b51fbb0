"""Costing schemas."""

from pydantic import BaseModel, Field


class ResourceCost(BaseModel):
    """Daily and total cost of one resource assignment.

    Values are nan when a zero divisor made them undefined.
    """

    daily_cost: float = Field(description="Cost per assigned day")
    total_cost: float = Field(description="Cost over the whole assignment")


class ActivityUtilization(BaseModel):
    """Budget allocated to and spent by one activity."""

    id: str = Field(description="Activity identifier")
    name: str = Field(description="Activity name")
    allocated_amount: float = Field(description="Cost of all assigned resources")
    allocated_percent: float = Field(description="Allocated share of project cost")
    actual_amount: float = Field(description="Cost of resources on completed tasks")
    actual_percent: float = Field(description="Actual share of project cost")
    created_at: str | None = Field(default=None)


class MilestoneBudget(BaseModel):
    """Budget of one milestone relative to the project cost."""

    id: str = Field(description="Milestone identifier")
    name: str = Field(description="Milestone name")
    budget: float = Field(description="Budget allocated (0 when unset)")
    percent_of_total: float = Field(description="Budget share of project cost")
