"""Timeline aggregation for Gantt chart display.

Turns the flat activity/task/deliverable/decision gate lists of a
project into time-ordered chart items: each activity becomes a bar
spanning its tasks, each task a child bar under it, and each deliverable
or decision gate a zero-width milestone marker.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

import structlog

from src.config import Settings, get_settings
from src.dates import parse_calendar_date, parse_instant
from src.models import Activity, DecisionGate, Deliverable, Task
from src.timeline.schemas import (
    MilestoneKind,
    TimelineItem,
    TimelineItemKind,
    TimelineStyle,
    TimelineWindow,
)

logger = structlog.get_logger()


def _start_key(value: datetime | None) -> tuple[bool, datetime]:
    # Invalid dates sort after every valid one
    return (value is None, value or datetime.min)


def _ordered_span(
    start: datetime | None,
    end: datetime | None,
) -> tuple[datetime | None, datetime | None]:
    """Clamp a reversed span so end is never before start."""
    if start is not None and end is not None and end < start:
        return start, start
    return start, end


def _first_by_id(records: Iterable[Activity]) -> dict[str, Activity]:
    index: dict[str, Activity] = {}
    for record in records:
        index.setdefault(record.id, record)
    return index


def build_timeline(
    activities: Sequence[Activity],
    tasks: Sequence[Task],
    deliverables: Sequence[Deliverable],
    decision_gates: Sequence[DecisionGate],
    *,
    settings: Settings | None = None,
) -> list[TimelineItem]:
    """Build chronologically sorted timeline items.

    Tasks are sorted by start date and grouped under their activity;
    groups are ordered by their earliest task. Each group yields one
    activity bar spanning [earliest start, latest end] followed by its
    task bars. Deliverables and decision gates follow as milestones, and
    the whole list is stable-sorted by start.

    Args:
        activities: Activity records (looked up for display names)
        tasks: Task records; activities without tasks are not emitted, and
            tasks whose activity record is missing are dropped
        deliverables: Deliverables, placed at their deadline
        decision_gates: Decision gates, placed at their date-time
        settings: Colour settings (defaults to application settings)

    Returns:
        New list of TimelineItem; inputs are not modified
    """
    cfg = settings or get_settings()
    activities_by_id = _first_by_id(activities)

    dated_tasks = [
        (task, parse_calendar_date(task.start_date), parse_calendar_date(task.end_date))
        for task in tasks
    ]
    dated_tasks.sort(key=lambda entry: _start_key(entry[1]))

    groups: dict[str, list[tuple[Task, datetime | None, datetime | None]]] = {}
    for entry in dated_tasks:
        groups.setdefault(entry[0].activity_id, []).append(entry)

    ordered_groups = sorted(groups.items(), key=lambda group: _start_key(group[1][0][1]))

    items: list[TimelineItem] = []
    orphaned = 0
    for activity_id, group in ordered_groups:
        activity = activities_by_id.get(activity_id)
        if activity is None:
            orphaned += len(group)
            continue

        starts = [start for _, start, _ in group if start is not None]
        ends = [end for _, _, end in group if end is not None]
        span_start, span_end = _ordered_span(
            min(starts) if starts else None,
            max(ends) if ends else None,
        )
        items.append(
            TimelineItem(
                kind=TimelineItemKind.ACTIVITY,
                id=activity_id,
                name=activity.name or "",
                start=span_start,
                end=span_end,
            )
        )

        for task, start, end in group:
            task_start, task_end = _ordered_span(start, end)
            items.append(
                TimelineItem(
                    kind=TimelineItemKind.TASK,
                    id=task.id,
                    name=task.name,
                    start=task_start,
                    end=task_end,
                    parent=activity_id,
                    style=TimelineStyle(bar_color=cfg.task_bar_color),
                )
            )

    for deliverable in deliverables:
        deadline = parse_calendar_date(deliverable.deadline)
        items.append(
            TimelineItem(
                kind=TimelineItemKind.MILESTONE,
                id=deliverable.id,
                name=deliverable.name,
                start=deadline,
                end=deadline,
                milestone_kind=MilestoneKind.DELIVERABLE,
                style=TimelineStyle(milestone_color=cfg.deliverable_color),
            )
        )

    for gate in decision_gates:
        held_at = parse_instant(gate.date_time)
        items.append(
            TimelineItem(
                kind=TimelineItemKind.MILESTONE,
                id=gate.id,
                name=gate.name,
                start=held_at,
                end=held_at,
                milestone_kind=MilestoneKind.DECISION_GATE,
                style=TimelineStyle(milestone_color=cfg.decision_gate_color),
            )
        )

    items.sort(key=lambda item: _start_key(item.start))

    logger.debug(
        "timeline built",
        activity_groups=len(ordered_groups),
        tasks=len(tasks),
        milestones=len(deliverables) + len(decision_gates),
        orphaned_tasks=orphaned,
        items=len(items),
    )
    return items


def timeline_window(
    items: Sequence[TimelineItem],
    padding_days: int | None = None,
) -> TimelineWindow | None:
    """Compute the chart viewport covering every dated item.

    Args:
        items: Timeline items
        padding_days: Days added before the first start and after the
            last end (defaults to settings.timeline_padding_days)

    Returns:
        Padded window, or None if no item has a valid date
    """
    if padding_days is None:
        padding_days = get_settings().timeline_padding_days

    starts = [item.start for item in items if item.start is not None]
    ends = [item.end for item in items if item.end is not None]
    if not starts or not ends:
        return None

    padding = timedelta(days=padding_days)
    return TimelineWindow(start=min(starts) - padding, end=max(ends) + padding)
