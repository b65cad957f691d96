from .utc_date_time_errors import (
    UtcDateTimeClockError,
    UtcDateTimeConstructionError,
    UtcDateTimeError,
    UtcDateTimeInvalidFormatError,
    UtcDateTimeNaiveDatetimeError,
    UtcDateTimeOutOfRangeError,
)

__all__ = [
    "UtcDateTimeClockError",
    "UtcDateTimeConstructionError",
    "UtcDateTimeError",
    "UtcDateTimeInvalidFormatError",
    "UtcDateTimeNaiveDatetimeError",
    "UtcDateTimeOutOfRangeError",
]
