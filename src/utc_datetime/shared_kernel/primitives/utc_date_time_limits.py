"""
Inclusive bounds of representable UtcDateTime instants in every supported encoding.

All eight values describe the same span: 1000-01-01 00:00:00.000000 .. 9999-12-31 23:59:59.999999.
"""

from __future__ import annotations

UNIX_TIMESTAMP_MIN = -30_610_224_000
UNIX_TIMESTAMP_MAX = 253_402_300_799

UNIX_MILLI_TIMESTAMP_MIN = -30_610_224_000_000
UNIX_MILLI_TIMESTAMP_MAX = 253_402_300_799_999

UNIX_MICRO_TIMESTAMP_MIN = -30_610_224_000_000_000
UNIX_MICRO_TIMESTAMP_MAX = 253_402_300_799_999_999

# Zero-padded fixed-width fields: string order equals chronological order.
MYSQL_DATETIME6_MIN = "1000-01-01 00:00:00.000000"
MYSQL_DATETIME6_MAX = "9999-12-31 23:59:59.999999"

__all__ = [
    "MYSQL_DATETIME6_MAX",
    "MYSQL_DATETIME6_MIN",
    "UNIX_MICRO_TIMESTAMP_MAX",
    "UNIX_MICRO_TIMESTAMP_MIN",
    "UNIX_MILLI_TIMESTAMP_MAX",
    "UNIX_MILLI_TIMESTAMP_MIN",
    "UNIX_TIMESTAMP_MAX",
    "UNIX_TIMESTAMP_MIN",
]
