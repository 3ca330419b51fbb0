"""Bulk import of tasks and risks.

Import is the one place where project records are validated: each row
is checked, valid rows become model instances and invalid rows become
error messages naming the row. A bad row never aborts the import.
"""

import json
from collections.abc import Sequence
from typing import Generic, TypeVar
from uuid import uuid4

import structlog
from pydantic import BaseModel, Field, ValidationError, computed_field

from src.dates import inclusive_days
from src.imports.date_normalizer import normalize_import_date
from src.models import Activity, DateRange, Risk, RiskStatus, Task
from src.risk_matrix import RATING_SCALE

logger = structlog.get_logger()

RecordT = TypeVar("RecordT", Task, Risk)


class ImportResult(BaseModel, Generic[RecordT]):
    """Accepted records and per-row errors from one import."""

    records: list[RecordT] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @computed_field
    @property
    def imported(self) -> int:
        """Number of accepted records."""
        return len(self.records)


def _as_bool(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"true", "1", "yes"}
    return bool(value)


def _as_list(value: object) -> list:
    """Read a list field that CSV files may carry as JSON text."""
    if isinstance(value, list):
        return value
    if isinstance(value, str) and value.strip():
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError:
            return []
        return decoded if isinstance(decoded, list) else []
    return []


def _as_rating(value: object) -> int | None:
    try:
        rating = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return rating if rating in RATING_SCALE else None


def _find_activity(reference: str, activities: Sequence[Activity]) -> Activity | None:
    """Match an activity by id first, then by name."""
    for activity in activities:
        if activity.id == reference:
            return activity
    for activity in activities:
        if activity.name == reference:
            return activity
    return None


def _normalize_date(raw: object, label: str, errors: list[str]) -> str | None:
    if raw is None or raw == "":
        return None
    normalized = normalize_import_date(str(raw))
    if normalized is None:
        errors.append(f'{label} "{raw}" is not a valid date')
    return normalized


def _validate_task_row(
    row: dict,
    activities: Sequence[Activity],
) -> tuple[Task | None, list[str]]:
    errors: list[str] = []
    title = str(row.get("title") or row.get("name") or "").strip()

    if not title:
        errors.append("Task title is required")
    if not row.get("status"):
        errors.append("Task status is required")

    activity_ref = str(row.get("activityId") or "").strip()
    activity = _find_activity(activity_ref, activities)
    if activity is None:
        errors.append(f'Activity "{activity_ref}" does not exist')

    multiple_ranges = _as_bool(row.get("multipleRanges", False))
    raw_ranges = _as_list(row.get("dateRanges"))
    has_single_range = bool(row.get("startDate")) and bool(row.get("endDate"))

    if multiple_ranges:
        if has_single_range:
            errors.append("If multipleRanges is true, startDate and endDate cannot be filled.")
        if not raw_ranges:
            errors.append("If multipleRanges is true, dateRanges must be provided.")
    else:
        if raw_ranges:
            errors.append("If multipleRanges is false, dateRanges cannot be filled.")
        if not has_single_range:
            errors.append(
                "If multipleRanges is false, both startDate and endDate must be provided."
            )

    start_date = _normalize_date(row.get("startDate"), "startDate", errors)
    end_date = _normalize_date(row.get("endDate"), "endDate", errors)
    date_ranges: list[DateRange] = []
    for raw_range in raw_ranges:
        if (
            not isinstance(raw_range, dict)
            or not raw_range.get("startDate")
            or not raw_range.get("endDate")
        ):
            errors.append("Each date range must have startDate and endDate")
            continue
        date_ranges.append(
            DateRange(
                start_date=_normalize_date(raw_range.get("startDate"), "startDate", errors),
                end_date=_normalize_date(raw_range.get("endDate"), "endDate", errors),
            )
        )

    if errors:
        return None, errors

    if multiple_ranges:
        duration = sum(inclusive_days(r.start_date, r.end_date) for r in date_ranges)
    else:
        duration = inclusive_days(start_date, end_date)

    try:
        task = Task(
            id=str(uuid4()),
            activity_id=activity.id,
            name=title,
            description=row.get("description") or "",
            status=row.get("status"),
            priority=row.get("priority") or None,
            start_date=start_date,
            end_date=end_date,
            duration=duration,
            assigned_to=row.get("assignedTo") or None,
            multiple_ranges=multiple_ranges,
            date_ranges=date_ranges,
        )
    except ValidationError as e:
        return None, [err["msg"] for err in e.errors()]
    return task, []


def import_tasks(
    rows: Sequence[dict],
    activities: Sequence[Activity],
) -> ImportResult[Task]:
    """Validate task rows and build Task records.

    Rows reference their activity by id or by name. A row must carry
    either a single startDate/endDate pair or, with multipleRanges set,
    a list of dateRanges, never both.

    Args:
        rows: Row dicts from parse_records
        activities: Existing project activities

    Returns:
        ImportResult with new tasks (fresh ids) and per-row errors
    """
    result: ImportResult[Task] = ImportResult[Task]()
    for row in rows:
        task, errors = _validate_task_row(row, activities)
        if task is not None:
            result.records.append(task)
        else:
            title = row.get("title") or row.get("name") or ""
            result.errors.append(f'Task "{title}": {", ".join(errors)}')

    logger.info(
        "tasks imported",
        rows=len(rows),
        imported=result.imported,
        rejected=len(result.errors),
    )
    return result


def _validate_risk_row(
    row: dict,
    activities: Sequence[Activity],
) -> tuple[Risk | None, list[str]]:
    errors: list[str] = []
    name = str(row.get("name") or "").strip()

    if not name:
        errors.append("Risk name is required")
    if not row.get("description"):
        errors.append("Description is required")

    impact = _as_rating(row.get("impact"))
    if impact is None:
        errors.append("Impact must be between 1 and 5")
    probability = _as_rating(row.get("probability"))
    if probability is None:
        errors.append("Probability must be between 1 and 5")

    activity_names = [str(item) for item in _as_list(row.get("associatedActivities"))]
    known_names = {activity.name: activity.id for activity in activities}
    unknown = [activity_name for activity_name in activity_names if activity_name not in known_names]
    if unknown:
        errors.append(
            f"Invalid associated activities: {', '.join(unknown)}. "
            "Ensure they match existing activity names in the project."
        )

    if errors:
        return None, errors

    try:
        risk = Risk(
            id=str(uuid4()),
            name=name,
            description=row.get("description"),
            impact=impact,
            probability=probability,
            status=RiskStatus.ACTIVE,
            associated_activities=[known_names[activity_name] for activity_name in activity_names],
            mitigation_actions=[
                action
                for action in _as_list(row.get("mitigationActions"))
                if isinstance(action, dict)
            ],
        )
    except ValidationError as e:
        return None, [err["msg"] for err in e.errors()]
    return risk, []


def import_risks(
    rows: Sequence[dict],
    activities: Sequence[Activity],
) -> ImportResult[Risk]:
    """Validate risk rows and build Risk records.

    Associated activities are given by name and stored as ids. Imported
    risks start Active with their score derived from the ratings.

    Args:
        rows: Row dicts from parse_records
        activities: Existing project activities

    Returns:
        ImportResult with new risks (fresh ids) and per-row errors
    """
    result: ImportResult[Risk] = ImportResult[Risk]()
    for row in rows:
        risk, errors = _validate_risk_row(row, activities)
        if risk is not None:
            result.records.append(risk)
        else:
            result.errors.append(f'Risk "{row.get("name") or "Unnamed"}": {", ".join(errors)}')

    logger.info(
        "risks imported",
        rows=len(rows),
        imported=result.imported,
        rejected=len(result.errors),
    )
    return result
