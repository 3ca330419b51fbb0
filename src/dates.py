"""Date parsing helpers shared by the timeline and costing modules.

Project records store calendar dates as ISO strings (``YYYY-MM-DD``) and
decision gates as ISO date-times. Parsing never raises: anything that
cannot be read becomes ``None``, which callers treat as an invalid date.
"""

import math
from datetime import UTC, date, datetime

DateInput = str | date | datetime | None


def parse_instant(value: DateInput) -> datetime | None:
    """Parse an ISO date or date-time into a naive UTC datetime.

    Args:
        value: ISO string, date, datetime, or None

    Returns:
        Naive datetime, or None if value is missing or unparseable
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        if not value.strip():
            return None
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    # Aware and naive datetimes cannot be compared, so normalize to naive UTC
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(UTC).replace(tzinfo=None)
    return parsed


def parse_calendar_date(value: DateInput) -> datetime | None:
    """Parse a calendar date, dropping any time-of-day component.

    Returns midnight of the parsed day so calendar dates and decision
    gate instants share one comparable type.
    """
    parsed = parse_instant(value)
    if parsed is None:
        return None
    return datetime(parsed.year, parsed.month, parsed.day)


def inclusive_days(start: DateInput, end: DateInput) -> int | float:
    """Count calendar days between two dates, inclusive of both ends.

    The span is measured as an absolute day difference, so reversed
    ranges still count their days.

    Returns:
        Day count, or nan if either date cannot be parsed
    """
    start_day = parse_calendar_date(start)
    end_day = parse_calendar_date(end)
    if start_day is None or end_day is None:
        return math.nan
    return abs((end_day - start_day).days) + 1
