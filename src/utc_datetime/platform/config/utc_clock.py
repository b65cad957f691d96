"""
Runtime config loader for the clock capability used by `UtcDateTime.now`.

Related: utc_datetime.platform.time.system_clock, utc_datetime.platform.time.fixed_clock,
  utc_datetime.shared_kernel.primitives.utc_date_time
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

import yaml

from utc_datetime.platform.time import FixedUtcClock, SystemUtcClock, UtcClock
from utc_datetime.shared_kernel.primitives import (
    UtcDateTime,
    format_mysql_datetime6,
    is_mysql_datetime6_layout,
)

log = logging.getLogger(__name__)

_ENV_NAME_KEY = "UTC_DATETIME_ENV"
_CONFIG_PATH_KEY = "UTC_DATETIME_CONFIG"
_ALLOWED_ENVS = ("dev", "prod", "test")

_MODE_ENV_KEYS = ("UTC_DATETIME_CLOCK_MODE",)
_FIXED_NOW_ENV_KEYS = ("UTC_DATETIME_FIXED_NOW",)

_MODE_SYSTEM = "system"
_MODE_FIXED = "fixed"
_ALLOWED_MODES = (_MODE_SYSTEM, _MODE_FIXED)


@dataclass(frozen=True, slots=True)
class UtcClockConfig:
    """
    Immutable runtime config selecting the clock behind `UtcDateTime.now`.

    Related: utc_datetime.platform.config.utc_clock.build_utc_clock
    """

    mode: str = _MODE_SYSTEM
    fixed_now: str | None = None

    def __post_init__(self) -> None:
        """
        Validate clock config invariants.

        Args:
            None.
        Returns:
            None.
        Assumptions:
            Mode is case-insensitive on input and stored in lowercase.
        Raises:
            ValueError: If mode is unknown or `fixed_now` does not match fixed mode.
        Side Effects:
            Normalizes mode value.
        """
        normalized_mode = self.mode.strip().lower()
        if normalized_mode not in _ALLOWED_MODES:
            raise ValueError(
                f"clock mode must be one of {_ALLOWED_MODES}, got {self.mode!r}"
            )
        object.__setattr__(self, "mode", normalized_mode)

        if normalized_mode == _MODE_FIXED:
            if self.fixed_now is None:
                raise ValueError("fixed_now is required when clock mode is 'fixed'")
            if not is_mysql_datetime6_layout(self.fixed_now):
                raise ValueError(
                    "fixed_now must use layout 'YYYY-MM-DD HH:MM:SS.ffffff', "
                    f"got {self.fixed_now!r}"
                )
        elif self.fixed_now is not None:
            raise ValueError("fixed_now is only allowed when clock mode is 'fixed'")


def load_utc_clock_config(*, environ: Mapping[str, str]) -> UtcClockConfig:
    """
    Load clock config from YAML and env overrides.

    Args:
        environ: Environment mapping used to resolve env and override values.
    Returns:
        UtcClockConfig: Validated clock settings.
    Assumptions:
        Optional `clock` section lives in `utc_datetime.yaml`; a missing file means defaults.
    Raises:
        ValueError: If YAML or environment values are invalid.
    Side Effects:
        Reads at most one YAML file from disk.
    """
    config_path = _resolve_config_path(environ=environ)
    file_payload = _load_optional_clock_payload(path=config_path)

    mode = _resolve_str_setting(
        environ=environ,
        env_keys=_MODE_ENV_KEYS,
        payload=file_payload,
        payload_key="mode",
        default=_MODE_SYSTEM,
    )
    if mode is None or mode.strip().lower() != _MODE_FIXED:
        # fixed_now applies to fixed mode only.
        return UtcClockConfig(mode=mode or _MODE_SYSTEM)

    fixed_now = _resolve_fixed_now_setting(environ=environ, payload=file_payload)
    return UtcClockConfig(mode=mode, fixed_now=fixed_now)


def build_utc_clock(config: UtcClockConfig) -> UtcClock:
    """
    Build clock implementation described by config.

    Args:
        config: Validated clock config.
    Returns:
        UtcClock: `SystemUtcClock` or `FixedUtcClock`.
    Assumptions:
        Fixed instant goes through the same strict text validation as any other input.
    Raises:
        UtcDateTimeInvalidFormatError: If `fixed_now` is not a valid date and time.
        UtcDateTimeOutOfRangeError: If `fixed_now` is outside the supported span.
    Side Effects:
        None.
    """
    if config.mode == _MODE_FIXED and config.fixed_now is not None:
        fixed = UtcDateTime.from_mysql_datetime6(config.fixed_now)
        log.info("using fixed UTC clock at %s", fixed.format_mysql_datetime6())
        return FixedUtcClock(now_value=fixed.to_datetime())
    log.info("using system UTC clock")
    return SystemUtcClock()


def _resolve_config_path(*, environ: Mapping[str, str]) -> Path:
    """
    Resolve YAML path using explicit override or `UTC_DATETIME_ENV`.

    Args:
        environ: Environment mapping.
    Returns:
        Path: Config YAML path.
    Assumptions:
        `UTC_DATETIME_CONFIG` has priority over env-derived path.
    Raises:
        ValueError: If env value is invalid.
    Side Effects:
        None.
    """
    override = environ.get(_CONFIG_PATH_KEY, "").strip()
    if override:
        return Path(override)

    env_name = _resolve_env_name(environ=environ)
    return Path("configs") / env_name / "utc_datetime.yaml"


def _resolve_env_name(*, environ: Mapping[str, str]) -> str:
    raw_env = environ.get(_ENV_NAME_KEY, "dev").strip().lower()
    if raw_env not in _ALLOWED_ENVS:
        raise ValueError(
            f"{_ENV_NAME_KEY} must be one of {_ALLOWED_ENVS}, got {raw_env!r}"
        )
    return raw_env


def _load_optional_clock_payload(*, path: Path) -> Mapping[str, Any]:
    """
    Load optional `clock` mapping from YAML.

    Args:
        path: Config path.
    Returns:
        Mapping[str, Any]: Optional `clock` mapping, or empty mapping.
    Assumptions:
        Unknown keys are ignored by this loader.
    Raises:
        ValueError: If YAML structure is invalid.
    Side Effects:
        Reads one UTF-8 file from disk when it exists.
    """
    if not path.exists():
        log.debug("utc_datetime config %s not found, using defaults", path)
        return {}
    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError("utc_datetime config must be a mapping at top-level")

    clock_map = raw.get("clock")
    if clock_map is None:
        return {}
    if not isinstance(clock_map, dict):
        raise ValueError("clock section must be a mapping")
    return clock_map


def _resolve_str_setting(
    *,
    environ: Mapping[str, str],
    env_keys: tuple[str, ...],
    payload: Mapping[str, Any],
    payload_key: str,
    default: str | None,
) -> str | None:
    """
    Resolve string setting from env -> payload -> default precedence.

    Args:
        environ: Environment mapping.
        env_keys: Candidate env variable names by priority.
        payload: Parsed YAML subsection.
        payload_key: YAML key name.
        default: Fallback default value.
    Returns:
        str | None: Resolved value.
    Assumptions:
        Blank env values are treated as unset.
    Raises:
        ValueError: If YAML value is not a non-empty string.
    Side Effects:
        None.
    """
    for env_key in env_keys:
        raw = environ.get(env_key, "").strip()
        if raw:
            return raw

    payload_value = payload.get(payload_key)
    if payload_value is None:
        return default
    if not isinstance(payload_value, str):
        raise ValueError(
            f"expected string for clock.{payload_key}, "
            f"got {type(payload_value).__name__}"
        )
    normalized = payload_value.strip()
    if not normalized:
        raise ValueError(f"clock.{payload_key} must be non-empty")
    return normalized


def _resolve_fixed_now_setting(
    *,
    environ: Mapping[str, str],
    payload: Mapping[str, Any],
) -> str | None:
    """
    Resolve `fixed_now` from env -> payload precedence, accepting native YAML timestamps.

    Args:
        environ: Environment mapping.
        payload: Parsed YAML subsection.
    Returns:
        str | None: Fixed-layout text, or None when unset.
    Assumptions:
        An unquoted YAML timestamp is loaded by PyYAML as `datetime`; naive values are UTC.
    Raises:
        ValueError: If YAML value is neither a string nor a datetime.
    Side Effects:
        None.
    """
    payload_value = payload.get("fixed_now")
    if isinstance(payload_value, datetime):
        moment = payload_value
        if moment.tzinfo is not None and moment.utcoffset() is not None:
            moment = moment.astimezone(timezone.utc)
        payload = {**payload, "fixed_now": format_mysql_datetime6(moment)}

    return _resolve_str_setting(
        environ=environ,
        env_keys=_FIXED_NOW_ENV_KEYS,
        payload=payload,
        payload_key="fixed_now",
        default=None,
    )


__all__ = [
    "UtcClockConfig",
    "build_utc_clock",
    "load_utc_clock_config",
]
