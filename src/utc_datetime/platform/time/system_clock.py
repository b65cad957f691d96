from __future__ import annotations

from datetime import datetime, timezone

from .clock import UtcClock


class SystemUtcClock(UtcClock):
    """
    SystemUtcClock — platform implementation of `UtcClock` backed by system UTC time.
    """

    def now(self) -> datetime:
        """
        Return current timezone-aware UTC datetime.

        Args:
            None.
        Returns:
            datetime: Current UTC datetime.
        Assumptions:
            System clock is reasonably synchronized.
        Raises:
            None.
        Side Effects:
            Reads system wall clock.
        """
        return datetime.now(timezone.utc)
