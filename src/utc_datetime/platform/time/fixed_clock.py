from __future__ import annotations

from datetime import datetime, timezone

from .clock import UtcClock


class FixedUtcClock(UtcClock):
    """
    Deterministic UTC clock returning the same instant for every call.

    Used for reproducible runs (`clock.mode: fixed`) and as a test stand-in.
    """

    def __init__(self, *, now_value: datetime) -> None:
        """
        Initialize fixed clock value.

        Args:
            now_value: Timezone-aware datetime returned by `now()`.
        Returns:
            None.
        Assumptions:
            Any UTC offset is accepted and normalized to UTC.
        Raises:
            TypeError: If `now_value` is not a datetime.
            ValueError: If `now_value` is naive or cannot be represented in UTC.
        Side Effects:
            Stores immutable timestamp value.
        """
        if not isinstance(now_value, datetime):
            raise TypeError(
                f"FixedUtcClock requires a datetime, got {type(now_value).__name__}"
            )
        if now_value.tzinfo is None or now_value.utcoffset() is None:
            raise ValueError("FixedUtcClock requires a timezone-aware datetime")
        try:
            self._now_value = now_value.astimezone(timezone.utc)
        except OverflowError as error:
            raise ValueError(
                f"FixedUtcClock cannot represent {now_value.isoformat()} in UTC"
            ) from error

    def now(self) -> datetime:
        return self._now_value

    def __repr__(self) -> str:
        return f"FixedUtcClock(now_value={self._now_value.isoformat()!r})"
