"""
Shared Kernel primitives.

This package re-exports the UTC date and time value type and its helpers so that
other modules can import them from one place:

    from utc_datetime.shared_kernel.primitives import UtcDateTime
"""

from .mysql_datetime6 import (
    format_mysql_datetime6,
    is_mysql_datetime6_layout,
    parse_mysql_datetime6,
)
from .utc_date_time import UtcDateTime
from .utc_date_time_limits import (
    MYSQL_DATETIME6_MAX,
    MYSQL_DATETIME6_MIN,
    UNIX_MICRO_TIMESTAMP_MAX,
    UNIX_MICRO_TIMESTAMP_MIN,
    UNIX_MILLI_TIMESTAMP_MAX,
    UNIX_MILLI_TIMESTAMP_MIN,
    UNIX_TIMESTAMP_MAX,
    UNIX_TIMESTAMP_MIN,
)

__all__ = [
    "MYSQL_DATETIME6_MAX",
    "MYSQL_DATETIME6_MIN",
    "UNIX_MICRO_TIMESTAMP_MAX",
    "UNIX_MICRO_TIMESTAMP_MIN",
    "UNIX_MILLI_TIMESTAMP_MAX",
    "UNIX_MILLI_TIMESTAMP_MIN",
    "UNIX_TIMESTAMP_MAX",
    "UNIX_TIMESTAMP_MIN",
    "UtcDateTime",
    "format_mysql_datetime6",
    "is_mysql_datetime6_layout",
    "parse_mysql_datetime6",
]
