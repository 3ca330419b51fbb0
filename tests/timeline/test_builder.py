"""Tests for timeline aggregation."""

from datetime import datetime

from src.models import Activity, DecisionGate, Deliverable, Task
from src.timeline import (
    MilestoneKind,
    TimelineItem,
    TimelineItemKind,
    build_timeline,
    timeline_window,
)


def _by_id(items: list[TimelineItem]) -> dict[str, TimelineItem]:
    return {item.id: item for item in items}


class TestBuildTimeline:
    """Tests for build_timeline function."""

    def test_single_activity_scenario(self):
        """Two tasks under one activity give a spanning bar then the tasks."""
        activities = [Activity(id="a1", name="Survey")]
        tasks = [
            Task(id="t1", activity_id="a1", start_date="2025-01-01", end_date="2025-01-03"),
            Task(id="t2", activity_id="a1", start_date="2025-01-04", end_date="2025-01-06"),
        ]

        items = build_timeline(activities, tasks, [], [])

        assert [(item.kind, item.id) for item in items] == [
            (TimelineItemKind.ACTIVITY, "a1"),
            (TimelineItemKind.TASK, "t1"),
            (TimelineItemKind.TASK, "t2"),
        ]
        assert items[0].name == "Survey"
        assert items[0].start == datetime(2025, 1, 1)
        assert items[0].end == datetime(2025, 1, 6)

    def test_activity_span_uses_latest_end(self, test_settings):
        """Span end is the latest end date, not the last task's end."""
        activities = [Activity(id="a1", name="Survey")]
        tasks = [
            Task(id="t1", activity_id="a1", start_date="2025-01-01", end_date="2025-01-20"),
            Task(id="t2", activity_id="a1", start_date="2025-01-05", end_date="2025-01-07"),
        ]

        items = _by_id(build_timeline(activities, tasks, [], [], settings=test_settings))

        assert items["a1"].start == datetime(2025, 1, 1)
        assert items["a1"].end == datetime(2025, 1, 20)

    def test_one_activity_item_per_group(self, activities, tasks):
        """Each activity with tasks appears exactly once."""
        items = build_timeline(activities, tasks, [], [])

        activity_ids = [item.id for item in items if item.kind == TimelineItemKind.ACTIVITY]
        assert sorted(activity_ids) == ["a1", "a2"]

    def test_each_task_once_with_parent(self, activities, tasks):
        """Every task appears once, parented to its activity."""
        items = build_timeline(activities, tasks, [], [])

        task_items = [item for item in items if item.kind == TimelineItemKind.TASK]
        assert sorted(item.id for item in task_items) == ["t1", "t2", "t3"]
        for task in tasks:
            item = _by_id(task_items)[task.id]
            assert item.parent == task.activity_id
            assert item.start == datetime.fromisoformat(task.start_date)
            assert item.end == datetime.fromisoformat(task.end_date)

    def test_tasks_carry_bar_colour(self, activities, tasks, test_settings):
        """Task bars use the configured colour."""
        items = build_timeline(activities, tasks, [], [], settings=test_settings)

        task_item = _by_id(items)["t1"]
        assert task_item.style is not None
        assert task_item.style.bar_color == "#2ECC71"

    def test_milestones_are_points(self, deliverables, decision_gates, test_settings):
        """Deliverables and gates start and end at the same instant."""
        items = _by_id(
            build_timeline([], [], deliverables, decision_gates, settings=test_settings)
        )

        deliverable = items["d1"]
        assert deliverable.kind == TimelineItemKind.MILESTONE
        assert deliverable.milestone_kind == MilestoneKind.DELIVERABLE
        assert deliverable.start == deliverable.end == datetime(2025, 1, 15)
        assert deliverable.style.milestone_color == "#606C38"

        gate = items["g1"]
        assert gate.milestone_kind == MilestoneKind.DECISION_GATE
        assert gate.start == gate.end == datetime(2025, 1, 20, 14, 0)
        assert gate.style.milestone_color == "#BC6C25"

    def test_sorted_by_start(self, activities, tasks, deliverables, decision_gates):
        """Output is non-decreasing by start."""
        items = build_timeline(activities, tasks, deliverables, decision_gates)

        starts = [item.start for item in items]
        assert starts == sorted(starts)
        assert [item.id for item in items] == ["a1", "t1", "t2", "d1", "g1", "a2", "t3"]

    def test_activity_precedes_its_first_task(self):
        """Ties on start keep the activity bar ahead of its task."""
        activities = [Activity(id="a1", name="Survey")]
        tasks = [Task(id="t1", activity_id="a1", start_date="2025-03-01", end_date="2025-03-02")]

        items = build_timeline(activities, tasks, [], [])

        assert [item.id for item in items] == ["a1", "t1"]

    def test_equal_starts_keep_input_order(self):
        """Tasks starting the same day stay in input order."""
        activities = [Activity(id="a1", name="Survey")]
        tasks = [
            Task(id="late", activity_id="a1", start_date="2025-01-01", end_date="2025-01-09"),
            Task(id="early", activity_id="a1", start_date="2025-01-01", end_date="2025-01-02"),
        ]

        items = build_timeline(activities, tasks, [], [])

        assert [item.id for item in items] == ["a1", "late", "early"]

    def test_activity_without_tasks_omitted(self):
        """Activities with no tasks produce no items."""
        activities = [Activity(id="a1", name="Survey"), Activity(id="a2", name="Idle")]
        tasks = [Task(id="t1", activity_id="a1", start_date="2025-01-01", end_date="2025-01-02")]

        items = build_timeline(activities, tasks, [], [])

        assert "a2" not in _by_id(items)

    def test_missing_activity_drops_its_tasks(self):
        """Tasks whose activity record is missing produce no items."""
        activities = [Activity(id="a1")]
        tasks = [Task(id="t1", activity_id="ghost", start_date="2025-01-01", end_date="2025-01-02")]

        assert build_timeline(activities, tasks, [], []) == []

    def test_missing_activity_keeps_other_groups(self):
        """Only the group without an activity record is dropped."""
        activities = [Activity(id="a1", name="Survey")]
        tasks = [
            Task(id="t1", activity_id="a1", start_date="2025-01-01", end_date="2025-01-02"),
            Task(id="t2", activity_id="ghost", start_date="2025-01-01", end_date="2025-01-02"),
        ]

        items = build_timeline(activities, tasks, [], [])

        assert [item.id for item in items] == ["a1", "t1"]

    def test_unnamed_activity_gets_empty_name(self):
        """An activity record without a name keeps an unnamed bar."""
        activities = [Activity(id="a1")]
        tasks = [Task(id="t1", activity_id="a1", start_date="2025-01-01", end_date="2025-01-02")]

        items = build_timeline(activities, tasks, [], [])

        assert items[0].kind == TimelineItemKind.ACTIVITY
        assert items[0].name == ""
        assert items[1].parent == "a1"

    def test_every_parent_exists(self, activities, tasks):
        """Task parents always reference an emitted activity item."""
        items = build_timeline(activities, tasks, [], [])

        activity_ids = {item.id for item in items if item.kind == TimelineItemKind.ACTIVITY}
        assert all(
            item.parent in activity_ids for item in items if item.kind == TimelineItemKind.TASK
        )

    def test_invalid_dates_do_not_raise(self):
        """Unparseable dates become None and sort last."""
        activities = [Activity(id="a1", name="Survey")]
        tasks = [
            Task(id="bad", activity_id="a1", start_date="someday", end_date="later"),
            Task(id="t1", activity_id="a1", start_date="2025-01-01", end_date="2025-01-02"),
        ]
        deliverables = [Deliverable(id="d1", name="Report", deadline="TBD")]

        items = build_timeline(activities, tasks, deliverables, [])
        by_id = _by_id(items)

        assert by_id["bad"].start is None
        assert by_id["bad"].end is None
        assert by_id["d1"].start is None
        assert by_id["a1"].start == datetime(2025, 1, 1)
        assert items[-1].start is None

    def test_reversed_task_clamped(self):
        """A task ending before it starts never yields end < start."""
        activities = [Activity(id="a1", name="Survey")]
        tasks = [Task(id="t1", activity_id="a1", start_date="2025-01-05", end_date="2025-01-01")]

        items = build_timeline(activities, tasks, [], [])

        for item in items:
            assert item.end >= item.start

    def test_inputs_not_mutated(self, activities, tasks):
        """Input lists keep their order and contents."""
        before = [task.model_dump() for task in tasks]

        build_timeline(activities, tasks, [], [])

        assert [task.model_dump() for task in tasks] == before

    def test_idempotent(self, activities, tasks, deliverables, decision_gates):
        """Identical inputs give deep-equal outputs."""
        first = build_timeline(activities, tasks, deliverables, decision_gates)
        second = build_timeline(activities, tasks, deliverables, decision_gates)

        assert first == second

    def test_empty_inputs(self):
        """No records give no items."""
        assert build_timeline([], [], [], []) == []

    def test_chart_type_for_activity(self, activities, tasks):
        """Activity bars report the chart library's 'project' type."""
        items = build_timeline(activities, tasks, [], [])

        assert _by_id(items)["a1"].chart_type == "project"
        assert _by_id(items)["t1"].chart_type == "task"


class TestTimelineWindow:
    """Tests for timeline_window function."""

    def test_padded_window(self, activities, tasks, decision_gates):
        """Window pads one day either side by default."""
        items = build_timeline(activities, tasks, [], decision_gates)

        window = timeline_window(items, padding_days=1)

        assert window is not None
        assert window.start == datetime(2024, 12, 31)
        assert window.end == datetime(2025, 2, 11)

    def test_custom_padding(self, activities, tasks):
        """Padding can be set per call."""
        items = build_timeline(activities, tasks, [], [])

        window = timeline_window(items, padding_days=0)

        assert window.start == datetime(2025, 1, 1)
        assert window.end == datetime(2025, 2, 10)

    def test_no_dates(self):
        """Without any valid date there is no window."""
        assert timeline_window([]) is None
        undated = [TimelineItem(kind=TimelineItemKind.MILESTONE, id="d1")]
        assert timeline_window(undated) is None
