"""Time-range resolution for dashboard filters.

Two families of ranges exist:

- **Calendar-aligned** tokens (current_week, last_month, ...) resolve to a
  concrete [start, end] pair. Ends are inclusive at 23:59:59.999.
- **Relative** tokens (7d, 30d, 3m, 6m, 1y) resolve to a cutoff instant
  ``now - N days``.

"now" is always passed in explicitly so results are reproducible.

Examples:
    >>> from datetime import datetime
    >>> r = resolve_date_range("current_week", now=datetime(2025, 1, 15, 12, 0))
    >>> r.start_date, r.end_date
    (datetime.datetime(2025, 1, 12, 0, 0), datetime.datetime(2025, 1, 18, 23, 59, 59, 999000))
"""

from __future__ import annotations

import calendar
import logging
from datetime import datetime, timedelta

from pos_analytics.config import CALENDAR_RANGES, RELATIVE_RANGE_DAYS
from pos_analytics.exceptions import ConfigError, InvalidRangeError
from pos_analytics.types import DateRange

logger = logging.getLogger(__name__)


def start_of_day(value: datetime) -> datetime:
    """Midnight of the same calendar day, keeping tzinfo."""
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    """23:59:59.999 of the same calendar day, keeping tzinfo."""
    return value.replace(hour=23, minute=59, second=59, microsecond=999000)


def _week_range(anchor: datetime) -> DateRange:
    # weekday() is Monday=0; the dashboard week starts on Sunday
    days_since_sunday = (anchor.weekday() + 1) % 7
    start = start_of_day(anchor - timedelta(days=days_since_sunday))
    end = end_of_day(start + timedelta(days=6))
    return DateRange(start_date=start, end_date=end)


def _month_range(anchor: datetime, year: int, month: int) -> DateRange:
    last_day = calendar.monthrange(year, month)[1]
    start = start_of_day(anchor.replace(year=year, month=month, day=1))
    end = end_of_day(anchor.replace(year=year, month=month, day=last_day))
    return DateRange(start_date=start, end_date=end)


def _year_range(anchor: datetime, year: int) -> DateRange:
    start = start_of_day(anchor.replace(year=year, month=1, day=1))
    end = end_of_day(anchor.replace(year=year, month=12, day=31))
    return DateRange(start_date=start, end_date=end)


def resolve_date_range(
    token: str,
    now: datetime | None = None,
    custom_start: datetime | None = None,
    custom_end: datetime | None = None,
) -> DateRange:
    """Resolve a calendar-aligned range token into concrete instants.

    Args:
        token: One of current_week, current_month, current_year, last_week,
            last_month, last_year, custom.
        now: Reference instant. Defaults to datetime.now(), read once.
        custom_start: Start bound, required for "custom".
        custom_end: End bound, required for "custom".

    Returns:
        DateRange with inclusive start_date and end_date.

    Raises:
        InvalidRangeError: If token is "custom" and either bound is missing.
        ConfigError: If token is not a known range.

    """
    if token not in CALENDAR_RANGES:
        raise ConfigError(f"Unknown time range '{token}'. Must be one of {CALENDAR_RANGES}.")

    if token == "custom":
        if custom_start is None or custom_end is None:
            raise InvalidRangeError("Custom date range requires start and end dates")
        return DateRange(start_date=custom_start, end_date=custom_end)

    if now is None:
        now = datetime.now()

    if token == "current_week":
        result = _week_range(now)
    elif token == "last_week":
        this_week = _week_range(now)
        result = _week_range(this_week.start_date - timedelta(days=1))
    elif token == "current_month":
        result = _month_range(now, now.year, now.month)
    elif token == "last_month":
        year, month = (now.year - 1, 12) if now.month == 1 else (now.year, now.month - 1)
        result = _month_range(now, year, month)
    elif token == "current_year":
        result = _year_range(now, now.year)
    else:  # last_year
        result = _year_range(now, now.year - 1)

    logger.debug("Resolved %s to %s - %s", token, result.start_date, result.end_date)
    return result


def relative_cutoff(time_range: str, now: datetime) -> datetime | None:
    """Return the cutoff instant for a relative range, or None for "all".

    Raises:
        ConfigError: If time_range is neither a relative token nor "all".

    """
    if time_range == "all":
        return None
    try:
        days_back = RELATIVE_RANGE_DAYS[time_range]
    except KeyError:
        raise ConfigError(f"Unknown relative time range '{time_range}'") from None
    return now - timedelta(days=days_back)
