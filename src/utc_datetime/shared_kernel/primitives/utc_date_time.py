from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import ClassVar

from utc_datetime.platform.errors import (
    UtcDateTimeClockError,
    UtcDateTimeConstructionError,
    UtcDateTimeInvalidFormatError,
    UtcDateTimeNaiveDatetimeError,
    UtcDateTimeOutOfRangeError,
)
from utc_datetime.platform.time import SystemUtcClock, UtcClock

from . import utc_date_time_limits as limits
from .mysql_datetime6 import (
    format_mysql_datetime6,
    is_mysql_datetime6_layout,
    parse_mysql_datetime6,
)

log = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_SECOND = timedelta(seconds=1)


@dataclass(frozen=True, slots=True, order=True)
class UtcDateTime:
    """
    UtcDateTime — validated immutable UTC date and time with microsecond precision.

    Rules:
    - supported span is 1000-01-01 00:00:00.000000 .. 9999-12-31 23:59:59.999999 (inclusive)
    - input datetime must be timezone-aware (naive is forbidden); stored in UTC
    - converts losslessly to Unix seconds/milliseconds/microseconds and
      to the fixed `YYYY-MM-DD HH:MM:SS.ffffff` text layout

    Related:
      - src/utc_datetime/shared_kernel/primitives/utc_date_time_limits.py
      - src/utc_datetime/shared_kernel/primitives/mysql_datetime6.py
      - src/utc_datetime/platform/time/clock.py
    """

    UNIX_TIMESTAMP_MIN: ClassVar[int] = limits.UNIX_TIMESTAMP_MIN
    UNIX_TIMESTAMP_MAX: ClassVar[int] = limits.UNIX_TIMESTAMP_MAX
    UNIX_MILLI_TIMESTAMP_MIN: ClassVar[int] = limits.UNIX_MILLI_TIMESTAMP_MIN
    UNIX_MILLI_TIMESTAMP_MAX: ClassVar[int] = limits.UNIX_MILLI_TIMESTAMP_MAX
    UNIX_MICRO_TIMESTAMP_MIN: ClassVar[int] = limits.UNIX_MICRO_TIMESTAMP_MIN
    UNIX_MICRO_TIMESTAMP_MAX: ClassVar[int] = limits.UNIX_MICRO_TIMESTAMP_MAX
    MYSQL_DATETIME6_MIN: ClassVar[str] = limits.MYSQL_DATETIME6_MIN
    MYSQL_DATETIME6_MAX: ClassVar[str] = limits.MYSQL_DATETIME6_MAX

    value: datetime

    def __post_init__(self) -> None:
        """
        Validate datetime invariants and normalize stored value to UTC.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Any UTC offset is accepted on input; stored value always uses `timezone.utc`.
        Raises:
            TypeError: If value is not a datetime.
            UtcDateTimeNaiveDatetimeError: If value carries no UTC offset.
            UtcDateTimeOutOfRangeError: If value lies outside the supported span.
            UtcDateTimeConstructionError: If UTC normalization fails in the calendar.
        Side Effects:
            Mutates internal frozen dataclass slot `value` with UTC-normalized datetime.
        """
        moment = self.value
        if not isinstance(moment, datetime):
            raise TypeError(
                f"UtcDateTime requires a datetime, got {type(moment).__name__}"
            )
        # tzinfo may be set while utcoffset() still returns None.
        if moment.tzinfo is None or moment.utcoffset() is None:
            raise UtcDateTimeNaiveDatetimeError(
                "UtcDateTime requires a timezone-aware datetime (naive datetime is forbidden)."
            )

        _check_range(
            _floor_unix_seconds(moment),
            encoding="unix_timestamp",
            label="Unix timestamp",
            minimum=limits.UNIX_TIMESTAMP_MIN,
            maximum=limits.UNIX_TIMESTAMP_MAX,
        )

        try:
            moment_utc = moment.astimezone(timezone.utc)
        except (OverflowError, ValueError) as error:
            raise UtcDateTimeConstructionError(
                f"Failed to normalize datetime {moment.isoformat()} to UTC."
            ) from error
        object.__setattr__(self, "value", moment_utc)

    @classmethod
    def now(cls, clock: UtcClock | None = None) -> UtcDateTime:
        """
        Build UtcDateTime for the current instant read from a clock.

        Args:
            clock: Clock capability; a fresh `SystemUtcClock` when omitted.
        Returns:
            UtcDateTime: Current UTC date and time.
        Assumptions:
            Clock returns a timezone-aware datetime.
        Raises:
            UtcDateTimeClockError: If the clock fails or returns an unusable value.
            UtcDateTimeOutOfRangeError: If the current instant is outside the supported span.
        Side Effects:
            Reads the clock.
        """
        source = clock if clock is not None else SystemUtcClock()
        try:
            moment = source.now()
        except Exception as error:
            raise UtcDateTimeClockError(
                "Failed to read the current UTC date and time from the clock."
            ) from error

        if not isinstance(moment, datetime):
            raise UtcDateTimeClockError(
                f"Clock returned {type(moment).__name__} instead of datetime."
            )
        if moment.tzinfo is None or moment.utcoffset() is None:
            raise UtcDateTimeClockError("Clock returned a naive datetime.")

        _check_range(
            _floor_unix_seconds(moment),
            encoding="unix_timestamp",
            label="Current Unix timestamp",
            minimum=limits.UNIX_TIMESTAMP_MIN,
            maximum=limits.UNIX_TIMESTAMP_MAX,
        )
        return cls(moment)

    @classmethod
    def from_datetime(cls, moment: datetime) -> UtcDateTime:
        """
        Build UtcDateTime from any timezone-aware datetime.

        Args:
            moment: Timezone-aware datetime in any offset.
        Returns:
            UtcDateTime: Same instant normalized to UTC.
        Assumptions:
            None.
        Raises:
            UtcDateTimeNaiveDatetimeError: If `moment` is naive.
            UtcDateTimeOutOfRangeError: If `moment` is outside the supported span.
        Side Effects:
            None.
        """
        return cls(moment)

    @classmethod
    def from_unix_timestamp(cls, unix_timestamp: int) -> UtcDateTime:
        """
        Build UtcDateTime from whole Unix seconds.

        Args:
            unix_timestamp: Seconds since 1970-01-01 00:00:00 UTC.
        Returns:
            UtcDateTime: Instant with zero sub-second component.
        Assumptions:
            Range is checked before any calendar arithmetic.
        Raises:
            TypeError: If value is not an int.
            UtcDateTimeOutOfRangeError: If value is outside `[UNIX_TIMESTAMP_MIN, UNIX_TIMESTAMP_MAX]`.
            UtcDateTimeConstructionError: If the calendar fails.
        Side Effects:
            None.
        """
        _require_int(unix_timestamp, name="unix_timestamp")
        _check_range(
            unix_timestamp,
            encoding="unix_timestamp",
            label="Unix timestamp",
            minimum=limits.UNIX_TIMESTAMP_MIN,
            maximum=limits.UNIX_TIMESTAMP_MAX,
        )
        try:
            moment = _EPOCH + timedelta(seconds=unix_timestamp)
        except (OverflowError, ValueError) as error:
            raise UtcDateTimeConstructionError(
                f"Failed to create a datetime from the given Unix timestamp {unix_timestamp}."
            ) from error
        return cls(moment)

    @classmethod
    def from_unix_milli_timestamp(cls, unix_milli_timestamp: int) -> UtcDateTime:
        """
        Build UtcDateTime from Unix milliseconds.

        Args:
            unix_milli_timestamp: Milliseconds since 1970-01-01 00:00:00 UTC.
        Returns:
            UtcDateTime: Instant with millisecond-aligned sub-second component.
        Assumptions:
            Floor division keeps the millisecond remainder in `0..999` for negative values.
        Raises:
            TypeError: If value is not an int.
            UtcDateTimeOutOfRangeError: If value is outside the milli bounds.
            UtcDateTimeConstructionError: If the calendar fails.
        Side Effects:
            None.
        """
        _require_int(unix_milli_timestamp, name="unix_milli_timestamp")
        _check_range(
            unix_milli_timestamp,
            encoding="unix_milli_timestamp",
            label="Unix milli timestamp",
            minimum=limits.UNIX_MILLI_TIMESTAMP_MIN,
            maximum=limits.UNIX_MILLI_TIMESTAMP_MAX,
        )
        seconds, milliseconds = divmod(unix_milli_timestamp, 1000)
        try:
            moment = _EPOCH + timedelta(seconds=seconds, milliseconds=milliseconds)
        except (OverflowError, ValueError) as error:
            raise UtcDateTimeConstructionError(
                "Failed to create a datetime from the given Unix milli timestamp "
                f"{unix_milli_timestamp}."
            ) from error
        return cls(moment)

    @classmethod
    def from_unix_micro_timestamp(cls, unix_micro_timestamp: int) -> UtcDateTime:
        """
        Build UtcDateTime from Unix microseconds.

        Args:
            unix_micro_timestamp: Microseconds since 1970-01-01 00:00:00 UTC.
        Returns:
            UtcDateTime: Instant with full microsecond precision.
        Assumptions:
            Floor division keeps the microsecond remainder in `0..999999` for negative values.
        Raises:
            TypeError: If value is not an int.
            UtcDateTimeOutOfRangeError: If value is outside the micro bounds.
            UtcDateTimeConstructionError: If the calendar fails.
        Side Effects:
            None.
        """
        _require_int(unix_micro_timestamp, name="unix_micro_timestamp")
        _check_range(
            unix_micro_timestamp,
            encoding="unix_micro_timestamp",
            label="Unix micro timestamp",
            minimum=limits.UNIX_MICRO_TIMESTAMP_MIN,
            maximum=limits.UNIX_MICRO_TIMESTAMP_MAX,
        )
        seconds, microseconds = divmod(unix_micro_timestamp, 1_000_000)
        try:
            moment = _EPOCH + timedelta(seconds=seconds, microseconds=microseconds)
        except (OverflowError, ValueError) as error:
            raise UtcDateTimeConstructionError(
                "Failed to create a datetime from the given Unix micro timestamp "
                f"{unix_micro_timestamp}."
            ) from error
        return cls(moment)

    @classmethod
    def from_mysql_datetime6(cls, mysql_datetime6: str) -> UtcDateTime:
        """
        Build UtcDateTime from strict `YYYY-MM-DD HH:MM:SS.ffffff` text.

        Args:
            mysql_datetime6: UTC date and time text with exactly six fraction digits.
        Returns:
            UtcDateTime: Parsed instant; formatting it back reproduces the input exactly.
        Assumptions:
            Checks run in order: structure, calendar parse, text bounds, round-trip.
        Raises:
            TypeError: If value is not a str.
            UtcDateTimeInvalidFormatError: If structure, calendar or round-trip check fails.
            UtcDateTimeOutOfRangeError: If text is outside
                `[MYSQL_DATETIME6_MIN, MYSQL_DATETIME6_MAX]`.
        Side Effects:
            None.
        """
        if not isinstance(mysql_datetime6, str):
            raise TypeError(
                f"mysql_datetime6 must be str, got {type(mysql_datetime6).__name__}"
            )

        if not is_mysql_datetime6_layout(mysql_datetime6):
            log.debug("rejected mysql datetime6 %r: layout mismatch", mysql_datetime6)
            raise UtcDateTimeInvalidFormatError(value=mysql_datetime6)

        try:
            moment = parse_mysql_datetime6(mysql_datetime6)
        except ValueError as error:
            log.debug("rejected mysql datetime6 %r: %s", mysql_datetime6, error)
            raise UtcDateTimeInvalidFormatError(value=mysql_datetime6) from error

        # Valid only because every field in the layout is fixed-width and zero-padded.
        _check_range(
            mysql_datetime6,
            encoding="mysql_datetime6",
            label="MySQL date and time",
            minimum=limits.MYSQL_DATETIME6_MIN,
            maximum=limits.MYSQL_DATETIME6_MAX,
        )

        if format_mysql_datetime6(moment) != mysql_datetime6:
            log.debug("rejected mysql datetime6 %r: round-trip mismatch", mysql_datetime6)
            raise UtcDateTimeInvalidFormatError(value=mysql_datetime6)

        return cls(moment)

    def unix_timestamp(self) -> int:
        """Whole Unix seconds (floor for instants before the epoch)."""
        return _floor_unix_seconds(self.value)

    def unix_milli_timestamp(self) -> int:
        """Unix seconds * 1000 + millisecond-of-second."""
        return 1000 * self.unix_timestamp() + self.value.microsecond // 1000

    def unix_micro_timestamp(self) -> int:
        """Unix seconds * 1_000_000 + microsecond-of-second."""
        return 1_000_000 * self.unix_timestamp() + self.value.microsecond

    def format_mysql_datetime6(self) -> str:
        """Fixed layout text, e.g. `1999-12-31 23:59:59.999999`."""
        return format_mysql_datetime6(self.value)

    def to_datetime(self) -> datetime:
        return self.value

    def __str__(self) -> str:
        """
        Diagnostic representation for logs.
        Example: UtcDateTime{"mysqlDateTime6": "1999-12-31 12:34:56.999999"}
        """
        return type(self).__name__ + json.dumps(
            {"mysqlDateTime6": self.format_mysql_datetime6()}
        )


def _floor_unix_seconds(moment: datetime) -> int:
    # Aware subtraction uses utcoffset(); no astimezone() round trip.
    return (moment - _EPOCH) // _ONE_SECOND


def _require_int(value: object, *, name: str) -> None:
    # bool is an int subclass but never a timestamp.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")


def _check_range(
    value: int | str,
    *,
    encoding: str,
    label: str,
    minimum: int | str,
    maximum: int | str,
) -> None:
    """
    Compare value against inclusive bounds and raise the matching out-of-range error.

    Args:
        value: Candidate value (int timestamp or fixed-layout text).
        encoding: Encoding name stored in error details.
        label: Human-readable subject used in the message.
        minimum: Inclusive lower bound of the same type as `value`.
        maximum: Inclusive upper bound of the same type as `value`.
    Returns:
        None.
    Assumptions:
        Text values are compared lexicographically.
    Raises:
        UtcDateTimeOutOfRangeError: If value is outside `[minimum, maximum]`.
    Side Effects:
        None.
    """
    if value < minimum:  # type: ignore[operator]
        bound, bound_kind, relation = minimum, "min", "less than minimum"
    elif value > maximum:  # type: ignore[operator]
        bound, bound_kind, relation = maximum, "max", "greater than maximum"
    else:
        return

    if isinstance(value, str):
        message = f'{label} "{value}" is {relation} supported {label} "{bound}".'
    else:
        message = f"{label} {value} is {relation} supported {label.removeprefix('Current ')} {bound}."
    log.debug("rejected %s: %s", encoding, message)
    raise UtcDateTimeOutOfRangeError(
        message,
        encoding=encoding,
        value=value,
        bound=bound,
        bound_kind=bound_kind,
    )


__all__ = ["UtcDateTime"]
