"""Datetime utilities for the fixed task date-time format.

Every date-time a user types (and every date-time written to the data file)
uses the ``yyyy-MM-dd HHmm`` pattern, e.g. ``2024-12-31 1800``. Display
strings use English month abbreviations and a 12-hour clock regardless of
the process locale.
"""

import re
from datetime import datetime

INPUT_PATTERN = "yyyy-MM-dd HHmm"

_INPUT_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{4}$")
_STRPTIME_FORMAT = "%Y-%m-%d %H%M"
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def parse_task_datetime(value: str) -> datetime:
    """Parse a ``yyyy-MM-dd HHmm`` string into a naive datetime.

    Args:
        value: Text such as ``"2024-12-31 1800"``. Surrounding whitespace is ignored.

    Returns:
        The parsed datetime (no timezone; tasks are wall-clock times)

    Raises:
        ValueError: If the text does not match the pattern or names an
            impossible date or time
    """
    text = value.strip()
    if not _INPUT_RE.match(text):
        raise ValueError(f"'{value}' does not match {INPUT_PATTERN}")
    return datetime.strptime(text, _STRPTIME_FORMAT)


def format_time(dt: datetime) -> str:
    """Format the time of day as ``h:mmAM`` / ``h:mmPM`` (e.g. ``6:00PM``)."""
    hour = dt.hour % 12 or 12
    marker = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d}{marker}"


def format_display(dt: datetime) -> str:
    """Format a datetime for display, e.g. ``Dec 31 2024, 6:00PM``."""
    month = _MONTHS[dt.month - 1]
    return f"{month} {dt.day:02d} {dt.year:04d}, {format_time(dt)}"


def format_for_file(dt: datetime) -> str:
    """Format a datetime in the storage pattern, the inverse of ``parse_task_datetime``."""
    return f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} {dt.hour:02d}{dt.minute:02d}"
