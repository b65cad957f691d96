from .clock import UtcClock
from .fixed_clock import FixedUtcClock
from .system_clock import SystemUtcClock

__all__ = [
    "FixedUtcClock",
    "SystemUtcClock",
    "UtcClock",
]
