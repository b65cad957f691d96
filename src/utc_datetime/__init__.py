"""
Validated immutable UTC date and time convertible between Unix seconds, milliseconds,
microseconds and `YYYY-MM-DD HH:MM:SS.ffffff` text.

    from utc_datetime import UtcDateTime
"""

from .platform.errors import (
    UtcDateTimeClockError,
    UtcDateTimeConstructionError,
    UtcDateTimeError,
    UtcDateTimeInvalidFormatError,
    UtcDateTimeNaiveDatetimeError,
    UtcDateTimeOutOfRangeError,
)
from .platform.time import FixedUtcClock, SystemUtcClock, UtcClock
from .shared_kernel.primitives import UtcDateTime

__all__ = [
    "FixedUtcClock",
    "SystemUtcClock",
    "UtcClock",
    "UtcDateTime",
    "UtcDateTimeClockError",
    "UtcDateTimeConstructionError",
    "UtcDateTimeError",
    "UtcDateTimeInvalidFormatError",
    "UtcDateTimeNaiveDatetimeError",
    "UtcDateTimeOutOfRangeError",
]
