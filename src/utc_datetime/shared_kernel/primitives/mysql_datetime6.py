"""
Fixed textual layout `YYYY-MM-DD HH:MM:SS.ffffff` (MySQL DATETIME(6)) helpers.

Structure is checked here; calendar semantics are left to `datetime.strptime`.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

_LAYOUT_PATTERN = re.compile(
    r"[0-9]{4}-[0-9]{2}-[0-9]{2} [0-9]{2}:[0-9]{2}:[0-9]{2}\.[0-9]{6}"
)
_STRPTIME_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def is_mysql_datetime6_layout(value: str) -> bool:
    """
    Check that value has exactly the fixed `YYYY-MM-DD HH:MM:SS.ffffff` structure.

    Args:
        value: Candidate text.
    Returns:
        bool: True when every field has the exact width and delimiters are exact.
    Assumptions:
        Only ASCII digits are accepted; no leading or trailing characters are allowed.
    Raises:
        None.
    Side Effects:
        None.
    """
    return _LAYOUT_PATTERN.fullmatch(value) is not None


def parse_mysql_datetime6(value: str) -> datetime:
    """
    Build an aware UTC datetime from text that already passed the layout check.

    Args:
        value: Text in the fixed layout.
    Returns:
        datetime: Timezone-aware UTC datetime.
    Assumptions:
        Calendar validity (month 13, day 32, Feb 29 of a common year, hour 24)
        is decided by the standard library calendar.
    Raises:
        ValueError: If the calendar rejects any field.
    Side Effects:
        None.
    """
    return datetime.strptime(value, _STRPTIME_FORMAT).replace(tzinfo=timezone.utc)


def format_mysql_datetime6(moment: datetime) -> str:
    """
    Format datetime fields into the fixed zero-padded layout.

    Args:
        moment: Datetime whose wall-clock fields are rendered as is.
    Returns:
        str: Text such as `1999-12-31 23:59:59.999999`.
    Assumptions:
        Caller passes a UTC datetime; tzinfo is not rendered.
    Raises:
        None.
    Side Effects:
        None.
    """
    # strftime("%Y") width is platform-dependent.
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}.{moment.microsecond:06d}"
    )


__all__ = [
    "format_mysql_datetime6",
    "is_mysql_datetime6_layout",
    "parse_mysql_datetime6",
]
