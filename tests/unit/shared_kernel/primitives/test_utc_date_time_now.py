from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

import pytest

from utc_datetime import (
    FixedUtcClock,
    UtcDateTime,
    UtcDateTimeClockError,
    UtcDateTimeOutOfRangeError,
)


class _StubClock:
    """
    Clock stub returning a raw value without any normalization.
    """

    def __init__(self, *, now_value: object) -> None:
        self._now_value = now_value
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        return self._now_value  # type: ignore[return-value]


class _BrokenClock:
    def now(self) -> datetime:
        raise RuntimeError("clock source is down")


def test_now_uses_injected_clock() -> None:
    clock = FixedUtcClock(
        now_value=datetime(1999, 12, 31, 23, 59, 59, 999999, tzinfo=timezone.utc)
    )

    utc_date_time = UtcDateTime.now(clock)

    assert utc_date_time.format_mysql_datetime6() == "1999-12-31 23:59:59.999999"
    assert utc_date_time.unix_micro_timestamp() == 946684799999999


def test_now_reads_clock_once() -> None:
    clock = _StubClock(now_value=datetime(2000, 1, 1, tzinfo=timezone.utc))

    UtcDateTime.now(clock)

    assert clock.calls == 1


def test_now_normalizes_clock_offset_to_utc() -> None:
    clock = _StubClock(now_value=datetime(2000, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2))))

    utc_date_time = UtcDateTime.now(clock)

    assert utc_date_time.format_mysql_datetime6() == "2000-01-01 00:00:00.000000"
    assert utc_date_time.to_datetime().tzinfo is timezone.utc


def test_now_defaults_to_system_clock() -> None:
    before = datetime.now(timezone.utc)

    utc_date_time = UtcDateTime.now()

    after = datetime.now(timezone.utc)
    assert before <= utc_date_time.to_datetime() <= after


def test_now_rejects_instant_before_minimum() -> None:
    """
    Verify clock one second before the minimum supported second is reported as out of range.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Floor seconds of 0999-12-31 23:59:59.999999 UTC equal -30610224001.
    Raises:
        AssertionError: If error kind or message differ.
    Side Effects:
        None.
    """
    clock = _StubClock(
        now_value=datetime(999, 12, 31, 23, 59, 59, 999999, tzinfo=timezone.utc)
    )
    expected_message = (
        "Current Unix timestamp -30610224001 is less than minimum supported "
        "Unix timestamp -30610224000."
    )

    with pytest.raises(UtcDateTimeOutOfRangeError, match=re.escape(expected_message)) as exc_info:
        UtcDateTime.now(clock)

    assert exc_info.value.value == -30610224001
    assert exc_info.value.bound == -30610224000


def test_now_rejects_instant_after_maximum() -> None:
    # 9999-12-31 23:00 at -01:00 is 10000-01-01 00:00 UTC.
    clock = _StubClock(
        now_value=datetime(9999, 12, 31, 23, 0, 0, tzinfo=timezone(timedelta(hours=-1)))
    )
    expected_message = (
        "Current Unix timestamp 253402300800 is greater than maximum supported "
        "Unix timestamp 253402300799."
    )

    with pytest.raises(UtcDateTimeOutOfRangeError, match=re.escape(expected_message)):
        UtcDateTime.now(clock)


def test_now_wraps_clock_failure() -> None:
    with pytest.raises(UtcDateTimeClockError) as exc_info:
        UtcDateTime.now(_BrokenClock())

    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert exc_info.value.to_payload()["error"]["code"] == "utc_datetime_clock_unavailable"


@pytest.mark.parametrize(
    "now_value",
    [
        datetime(2000, 1, 1),
        "2000-01-01 00:00:00.000000",
        None,
    ],
)
def test_now_rejects_unusable_clock_value(now_value: object) -> None:
    with pytest.raises(UtcDateTimeClockError):
        UtcDateTime.now(_StubClock(now_value=now_value))
