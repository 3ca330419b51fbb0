"""Map a clicked timeline item back to the record it was built from."""

from collections.abc import Iterable, Sequence
from typing import TypeVar

import structlog

from src.models import Activity, DecisionGate, Deliverable, Task
from src.timeline.schemas import TimelineItemKind

logger = structlog.get_logger()

ClickedElement = Activity | Task | Deliverable | DecisionGate

RecordT = TypeVar("RecordT", Activity, Task, Deliverable, DecisionGate)


def _index(records: Iterable[RecordT]) -> dict[str, RecordT]:
    """Build an id lookup keeping the first record for duplicate ids."""
    index: dict[str, RecordT] = {}
    for record in records:
        index.setdefault(record.id, record)
    return index


def resolve_clicked_element(
    element_id: str,
    kind: TimelineItemKind | str,
    activities: Sequence[Activity],
    tasks: Sequence[Task],
    deliverables: Sequence[Deliverable],
    decision_gates: Sequence[DecisionGate],
) -> ClickedElement | None:
    """Find the source record for a timeline item.

    Activity items (chart type 'project') resolve against activities and
    task items against tasks. Milestones check deliverables first, then
    decision gates, so a deliverable wins when both share an id.

    Args:
        element_id: Identifier of the clicked item
        kind: Item kind or chart type ('project', 'task', 'milestone')
        activities: Activity records
        tasks: Task records
        deliverables: Deliverable records
        decision_gates: Decision gate records

    Returns:
        Matching record, or None if the kind is unknown or nothing matches
    """
    resolved_kind = TimelineItemKind.from_chart_type(kind)
    if resolved_kind is None:
        logger.debug("unknown timeline kind", kind=str(kind), element_id=element_id)
        return None

    if resolved_kind == TimelineItemKind.ACTIVITY:
        return _index(activities).get(element_id)

    if resolved_kind == TimelineItemKind.TASK:
        return _index(tasks).get(element_id)

    deliverable = _index(deliverables).get(element_id)
    if deliverable is not None:
        return deliverable
    return _index(decision_gates).get(element_id)
