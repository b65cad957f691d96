from __future__ import annotations

from utc_datetime.shared_kernel.primitives import (
    MYSQL_DATETIME6_MAX,
    MYSQL_DATETIME6_MIN,
    UNIX_MICRO_TIMESTAMP_MAX,
    UNIX_MICRO_TIMESTAMP_MIN,
    UNIX_MILLI_TIMESTAMP_MAX,
    UNIX_MILLI_TIMESTAMP_MIN,
    UNIX_TIMESTAMP_MAX,
    UNIX_TIMESTAMP_MIN,
    UtcDateTime,
)


def test_limits_have_expected_values() -> None:
    assert UNIX_TIMESTAMP_MIN == -30610224000
    assert UNIX_TIMESTAMP_MAX == 253402300799
    assert UNIX_MILLI_TIMESTAMP_MIN == -30610224000000
    assert UNIX_MILLI_TIMESTAMP_MAX == 253402300799999
    assert UNIX_MICRO_TIMESTAMP_MIN == -30610224000000000
    assert UNIX_MICRO_TIMESTAMP_MAX == 253402300799999999
    assert MYSQL_DATETIME6_MIN == "1000-01-01 00:00:00.000000"
    assert MYSQL_DATETIME6_MAX == "9999-12-31 23:59:59.999999"


def test_limits_are_exposed_on_utc_date_time() -> None:
    assert UtcDateTime.UNIX_TIMESTAMP_MIN == UNIX_TIMESTAMP_MIN
    assert UtcDateTime.UNIX_TIMESTAMP_MAX == UNIX_TIMESTAMP_MAX
    assert UtcDateTime.UNIX_MILLI_TIMESTAMP_MIN == UNIX_MILLI_TIMESTAMP_MIN
    assert UtcDateTime.UNIX_MILLI_TIMESTAMP_MAX == UNIX_MILLI_TIMESTAMP_MAX
    assert UtcDateTime.UNIX_MICRO_TIMESTAMP_MIN == UNIX_MICRO_TIMESTAMP_MIN
    assert UtcDateTime.UNIX_MICRO_TIMESTAMP_MAX == UNIX_MICRO_TIMESTAMP_MAX
    assert UtcDateTime.MYSQL_DATETIME6_MIN == MYSQL_DATETIME6_MIN
    assert UtcDateTime.MYSQL_DATETIME6_MAX == MYSQL_DATETIME6_MAX


def test_limits_describe_the_same_span_in_every_encoding() -> None:
    """
    Verify milli/micro bounds are the seconds bounds with zero/full sub-second parts.

    Args:
        None.
    Returns:
        None.
    Assumptions:
        Lower bounds have no sub-second part; upper bounds have the maximal one.
    Raises:
        AssertionError: If any pair of bounds drifts apart.
    Side Effects:
        None.
    """
    assert UNIX_MILLI_TIMESTAMP_MIN == UNIX_TIMESTAMP_MIN * 1000
    assert UNIX_MILLI_TIMESTAMP_MAX == UNIX_TIMESTAMP_MAX * 1000 + 999
    assert UNIX_MICRO_TIMESTAMP_MIN == UNIX_TIMESTAMP_MIN * 1_000_000
    assert UNIX_MICRO_TIMESTAMP_MAX == UNIX_TIMESTAMP_MAX * 1_000_000 + 999_999

    assert UtcDateTime.from_mysql_datetime6(MYSQL_DATETIME6_MIN).unix_micro_timestamp() == (
        UNIX_MICRO_TIMESTAMP_MIN
    )
    assert UtcDateTime.from_mysql_datetime6(MYSQL_DATETIME6_MAX).unix_micro_timestamp() == (
        UNIX_MICRO_TIMESTAMP_MAX
    )
