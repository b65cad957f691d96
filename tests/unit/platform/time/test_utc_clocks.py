from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from utc_datetime.platform.time import FixedUtcClock, SystemUtcClock


def test_system_clock_returns_aware_utc_now() -> None:
    before = datetime.now(timezone.utc)

    now_value = SystemUtcClock().now()

    after = datetime.now(timezone.utc)
    assert now_value.tzinfo is timezone.utc
    assert before <= now_value <= after


def test_fixed_clock_returns_same_instant_for_every_call() -> None:
    clock = FixedUtcClock(now_value=datetime(2000, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1))))

    first = clock.now()
    second = clock.now()

    assert first == second == datetime(2000, 1, 1, tzinfo=timezone.utc)
    assert first.tzinfo is timezone.utc


def test_fixed_clock_rejects_naive_datetime() -> None:
    with pytest.raises(ValueError):
        FixedUtcClock(now_value=datetime(2000, 1, 1))


def test_fixed_clock_rejects_non_datetime() -> None:
    with pytest.raises(TypeError):
        FixedUtcClock(now_value="2000-01-01 00:00:00.000000")  # type: ignore[arg-type]


def test_fixed_clock_rejects_value_outside_utc_calendar() -> None:
    # 9999-12-31 23:00 at -01:00 is past the last representable UTC datetime.
    late = datetime(9999, 12, 31, 23, 0, tzinfo=timezone(timedelta(hours=-1)))

    with pytest.raises(ValueError, match="cannot represent"):
        FixedUtcClock(now_value=late)
