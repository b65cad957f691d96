from __future__ import annotations

from datetime import datetime
from typing import Protocol


class UtcClock(Protocol):
    """
    UtcClock — port of the "current instant" source used by `UtcDateTime.now`.

    Related:
      - src/utc_datetime/platform/time/system_clock.py
      - src/utc_datetime/platform/time/fixed_clock.py
      - src/utc_datetime/shared_kernel/primitives/utc_date_time.py
    """

    def now(self) -> datetime:
        """
        Return current timezone-aware datetime.

        Args:
            None.
        Returns:
            datetime: Timezone-aware datetime, normalized to UTC by the caller.
        Assumptions:
            Implementations are safe for concurrent reads when shared across threads.
        Raises:
            Exception: Any failure is wrapped by the caller into `UtcDateTimeClockError`.
        Side Effects:
            Implementation-defined.
        """
        ...
