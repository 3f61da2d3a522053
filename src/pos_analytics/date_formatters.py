"""Display formatting utilities for dashboard labels.

This module centralizes the short date and 12-hour labels used across
the aggregators.
"""

from datetime import date


# English month abbreviations (January through December)
MONTH_ABBREVIATIONS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"
]


def format_date_short(d: date) -> str:
    """Format date as a short label like 'Jan 5'.

    Args:
        d: Date object to format

    Returns:
        Month abbreviation followed by the day without padding (e.g., "Jan 5")
    """
    return f"{MONTH_ABBREVIATIONS[d.month - 1]} {d.day}"


def format_hour_label(hour: int) -> str:
    """Format an hour of day (0-23) on a 12-hour clock.

    Examples:
        >>> format_hour_label(0)
        '12 AM'
        >>> format_hour_label(13)
        '1 PM'
    """
    if hour == 0:
        return "12 AM"
    if hour < 12:
        return f"{hour} AM"
    if hour == 12:
        return "12 PM"
    return f"{hour - 12} PM"


def format_hour_key(hour: int) -> str:
    """Zero-padded hour key, e.g. '07'."""
    return f"{hour:02d}"
