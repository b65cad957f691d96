from .utc_clock import UtcClockConfig, build_utc_clock, load_utc_clock_config

__all__ = [
    "UtcClockConfig",
    "build_utc_clock",
    "load_utc_clock_config",
]
