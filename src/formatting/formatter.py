"""Display formatting for currency, dates, and percentages.

One Formatter, configured from Settings, is shared by every caller so
currency symbols and date patterns live in a single place.
"""

import math
from datetime import UTC, date, datetime
from functools import lru_cache

from src.config import Settings, get_settings
from src.dates import parse_instant

MISSING = "N/A"
INVALID_DATE = "Invalid Date"
INVALID_TIME = "Invalid Time"

# (upper bound in seconds, unit length in seconds, unit name)
_RELATIVE_UNITS = (
    (3600, 60, "minute"),
    (86400, 3600, "hour"),
    (604800, 86400, "day"),
    (2592000, 604800, "week"),
    (31536000, 2592000, "month"),
)

TimestampInput = str | date | datetime | int | float | None


class Formatter:
    """Format values for display.

    Missing values render as "N/A"; values that cannot be read as dates
    render as "Invalid Date" or "Invalid Time".
    """

    def __init__(self, settings: Settings | None = None):
        """Initialize formatter.

        Args:
            settings: Formatting settings (defaults to application settings)
        """
        self._settings = settings or get_settings()

    @staticmethod
    def _to_datetime(value: TimestampInput) -> datetime | None:
        # Numbers are epoch milliseconds, as stored by the dashboard
        if isinstance(value, bool):
            return None
        if isinstance(value, int | float):
            if not math.isfinite(value):
                return None
            try:
                return datetime.fromtimestamp(value / 1000, UTC).replace(tzinfo=None)
            except (OverflowError, OSError, ValueError):
                return None
        return parse_instant(value)

    @staticmethod
    def _is_missing(value: object) -> bool:
        return value is None or value == ""

    def format_currency(self, amount: float | None) -> str:
        """Format an amount with the configured currency symbol.

        Examples:
            >>> Formatter().format_currency(1234.5)
            '$1,234.50'
        """
        if amount is None or math.isnan(amount):
            return MISSING
        decimals = self._settings.currency_decimals
        sign = "-" if amount < 0 else ""
        return f"{sign}{self._settings.currency_symbol}{abs(amount):,.{decimals}f}"

    def format_percent(self, value: float | None, decimals: int = 2) -> str:
        """Format a percentage value (already scaled to 0-100)."""
        if value is None or math.isnan(value):
            return MISSING
        return f"{value:.{decimals}f}%"

    def format_date(self, value: TimestampInput) -> str:
        """Format a calendar date, e.g. 'January 5, 2025'."""
        if self._is_missing(value):
            return MISSING
        parsed = self._to_datetime(value)
        if parsed is None:
            return INVALID_DATE
        return self._settings.date_format.format(d=parsed)

    def format_time(self, value: TimestampInput) -> str:
        """Format a time of day, e.g. '02:30 PM'."""
        if self._is_missing(value):
            return MISSING
        parsed = self._to_datetime(value)
        if parsed is None:
            return INVALID_TIME
        return self._settings.time_format.format(d=parsed)

    def format_datetime(self, value: TimestampInput) -> str:
        """Format a date and time, e.g. 'January 5, 2025 at 02:30 PM'."""
        if self._is_missing(value):
            return MISSING
        return f"{self.format_date(value)} at {self.format_time(value)}"

    def format_relative_time(
        self,
        value: TimestampInput,
        now: datetime | None = None,
    ) -> str:
        """Describe how long ago a moment was, e.g. '3 days ago'.

        Args:
            value: Moment to describe
            now: Reference time (naive UTC; defaults to the current time)

        Returns:
            Relative description, "just now" under a minute
        """
        if self._is_missing(value):
            return MISSING
        parsed = self._to_datetime(value)
        if parsed is None:
            return INVALID_DATE

        reference = now or datetime.now(UTC).replace(tzinfo=None)
        elapsed = math.floor((reference - parsed).total_seconds())

        if elapsed < 60:
            return "just now"

        for upper_bound, unit_seconds, unit in _RELATIVE_UNITS:
            if elapsed < upper_bound:
                return _plural(elapsed // unit_seconds, unit)

        return _plural(elapsed // 31536000, "year")


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit if count == 1 else unit + 's'} ago"


@lru_cache
def get_formatter() -> Formatter:
    """Get cached formatter built from application settings."""
    return Formatter()
