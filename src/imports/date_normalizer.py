"""Date normalization for imported records.

Spreadsheets exported by hand rarely keep ISO dates, so imported dates
are read leniently ("May 1, 2025", "01/05/2025") and stored as
``YYYY-MM-DD``.
"""

import dateparser

from src.dates import parse_calendar_date


def normalize_import_date(raw_date: str | None) -> str | None:
    """Convert a free-form date to an ISO calendar date.

    Args:
        raw_date: Date text from an import file

    Returns:
        ``YYYY-MM-DD`` string, or None if raw_date is empty or unparseable

    Examples:
        >>> normalize_import_date("May 1, 2025")
        '2025-05-01'
        >>> normalize_import_date("2025-05-01")
        '2025-05-01'
    """
    if raw_date is None:
        return None

    if not raw_date.strip():
        return None

    iso = parse_calendar_date(raw_date)
    if iso is not None:
        return iso.date().isoformat()

    settings: dict = {
        "RETURN_AS_TIMEZONE_AWARE": False,
        "PREFER_DAY_OF_MONTH": "first",
    }

    try:
        parsed = dateparser.parse(raw_date, settings=settings)
        if parsed is None:
            return None
        return parsed.date().isoformat()
    except Exception:
        # dateparser can raise various exceptions on malformed input
        return None
