"""Human and material resources that can be assigned to tasks."""

from enum import Enum

from pydantic import Field

from src.models.base import BaseRecord


class ResourceType(str, Enum):
    """Kind of resource bound to a task."""

    HUMAN = "human"
    MATERIAL = "material"


class CostType(str, Enum):
    """How a material resource is billed."""

    ONE_TIME = "one-time"
    RECURRING = "recurring"


class HumanResource(BaseRecord):
    """A person (or role) billed per day."""

    name: str = Field(default="", description="Display name")
    role: str | None = Field(default=None, description="Role on the project")
    email: str | None = Field(default=None, description="Contact email")
    cost_per_day: float = Field(default=0.0, description="Daily rate")
    quantity: int = Field(default=1, description="Headcount available")


class MaterialResource(BaseRecord):
    """Equipment or supplies billed once or over an amortization period."""

    name: str = Field(default="", description="Display name")
    type: str | None = Field(default=None, description="Free-text category")
    description: str | None = Field(default=None)
    cost_type: CostType = Field(default=CostType.ONE_TIME, description="Billing model")
    cost_amount: float = Field(default=0.0, description="Purchase or period cost")
    amortization_period: float = Field(
        default=1.0,
        description="Days the cost amount is spread over (recurring billing)",
    )
