"""
Calendar date keys for the activity heatmap.

Dates are keyed by their local calendar fields as YYYY-MM-DD strings.
Nothing here converts through UTC, so a value created at local midnight
keeps its own day.
"""

from datetime import date, datetime, timedelta


MONTH_NAMES = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

LONG_MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


class MalformedDateError(ValueError):
    """Raised when a value is not a canonical YYYY-MM-DD calendar date."""

    pass


def format_date(value: date) -> str:
    """
    Format a date as a canonical YYYY-MM-DD key.

    Uses the value's own year/month/day fields. A datetime keeps its
    local day even when it carries a timezone.

    Args:
        value: A date or datetime

    Returns:
        Zero-padded date key, e.g. "2026-02-07"
    """
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def parse_date(text: str) -> date:
    """
    Parse a canonical YYYY-MM-DD key back into a date.

    Args:
        text: Date key to parse

    Returns:
        The calendar date

    Raises:
        MalformedDateError: If the text is not a canonical calendar date
    """
    if not isinstance(text, str):
        raise MalformedDateError(f"Expected a YYYY-MM-DD string, got {text!r}")

    try:
        parsed = datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        raise MalformedDateError(f"Not a calendar date: {text!r}") from None

    # strptime accepts unpadded fields like "2026-2-7"
    if format_date(parsed) != text:
        raise MalformedDateError(f"Not a canonical YYYY-MM-DD date: {text!r}")

    return parsed


def coerce_date(value) -> date:
    """Accept a date, a datetime (local fields kept) or a date key."""
    if isinstance(value, datetime):
        return date(value.year, value.month, value.day)
    if isinstance(value, date):
        return value
    return parse_date(value)


def add_days(value: date, days: int) -> date:
    """Return the date `days` calendar days after `value` (may be negative)."""
    return value + timedelta(days=days)


def day_of_week(value: date) -> int:
    """Day of week with Sunday as 0 and Saturday as 6."""
    return (value.weekday() + 1) % 7


def week_start(value: date) -> date:
    """Most recent Sunday on or before the given date."""
    return add_days(value, -day_of_week(value))


def week_end(value: date) -> date:
    """Next Saturday on or after the given date."""
    return add_days(value, 6 - day_of_week(value))


def month_name(value: date) -> str:
    return MONTH_NAMES[value.month - 1]


def long_month_name(value: date) -> str:
    return LONG_MONTH_NAMES[value.month - 1]
