"""Timeline module for Gantt chart data.

This module provides:
- build_timeline: activities/tasks/milestones -> sorted chart items
- timeline_window: padded viewport around the dated items
- resolve_clicked_element: chart item -> source record
- Schemas for items, styles, and view modes
"""

from src.timeline.builder import build_timeline, timeline_window
from src.timeline.resolver import ClickedElement, resolve_clicked_element
from src.timeline.schemas import (
    MilestoneKind,
    TimelineItem,
    TimelineItemKind,
    TimelineResponse,
    TimelineStyle,
    TimelineViewMode,
    TimelineWindow,
)

__all__ = [
    "ClickedElement",
    "MilestoneKind",
    "TimelineItem",
    "TimelineItemKind",
    "TimelineResponse",
    "TimelineStyle",
    "TimelineViewMode",
    "TimelineWindow",
    "build_timeline",
    "resolve_clicked_element",
    "timeline_window",
]
