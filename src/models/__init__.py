"""Canonical data models for project planning records.

This module exports the records consumed by the planning core:
- RecordModel / BaseRecord: camelCase-aliased base classes
- Activity, Task, ResourceAssignment: the work breakdown
- HumanResource, MaterialResource: billable resources
- Deliverable, DecisionGate, Milestone: dated checkpoints
- Risk: rated risks with mitigation actions
"""

from src.models.activity import Activity, ActivityStatus
from src.models.base import (
    ActivityId,
    BaseRecord,
    DefaultingEnum,
    RecordModel,
    ResourceId,
    TaskId,
)
from src.models.decision_gate import DecisionGate, GateParticipant, GateStatus
from src.models.deliverable import Deliverable, SuccessCriterion
from src.models.milestone import Milestone
from src.models.resource import CostType, HumanResource, MaterialResource, ResourceType
from src.models.risk import MitigationAction, Risk, RiskStatus
from src.models.task import (
    DateRange,
    ResourceAssignment,
    Task,
    TaskPriority,
    TaskStatus,
)

__all__ = [
    # Base
    "RecordModel",
    "BaseRecord",
    "DefaultingEnum",
    "ActivityId",
    "TaskId",
    "ResourceId",
    # Work breakdown
    "Activity",
    "ActivityStatus",
    "Task",
    "TaskStatus",
    "TaskPriority",
    "ResourceAssignment",
    "DateRange",
    # Resources
    "HumanResource",
    "MaterialResource",
    "ResourceType",
    "CostType",
    # Checkpoints
    "Deliverable",
    "SuccessCriterion",
    "DecisionGate",
    "GateParticipant",
    "GateStatus",
    "Milestone",
    # Risks
    "Risk",
    "RiskStatus",
    "MitigationAction",
]
