from __future__ import annotations

from typing import Any, ClassVar, Mapping, Sequence


class UtcDateTimeError(ValueError):
    """
    UtcDateTimeError — canonical error contract for every UtcDateTime construction failure.

    Related:
      - src/utc_datetime/shared_kernel/primitives/utc_date_time.py
      - src/utc_datetime/platform/config/utc_clock.py
    """

    code: ClassVar[str] = "utc_datetime_error"

    def __init__(self, message: str, *, details: Mapping[str, Any] | None = None) -> None:
        """
        Validate message and freeze details into deterministic plain payload.

        Args:
            message: Human-readable failure description.
            details: Optional machine-readable context.
        Returns:
            None.
        Assumptions:
            `code` is a stable machine-readable token defined per subclass.
        Raises:
            ValueError: If `message` is blank.
            TypeError: If `details` is not mapping-compatible when provided.
        Side Effects:
            Stores normalized copy of `details`.
        """
        normalized_message = message.strip()
        if not normalized_message:
            raise ValueError("UtcDateTimeError.message must be non-empty")
        super().__init__(normalized_message)
        self.message = normalized_message

        if details is None:
            self.details: Mapping[str, Any] = {}
            return
        if not isinstance(details, Mapping):
            raise TypeError("UtcDateTimeError.details must be a mapping when provided")
        normalized_details = _normalize_payload_value(value=dict(details))
        if not isinstance(normalized_details, Mapping):
            raise TypeError("UtcDateTimeError.details normalization must produce mapping")
        self.details = normalized_details

    def to_payload(self) -> dict[str, Any]:
        """
        Build deterministic payload representation for logs and API layers.

        Args:
            None.
        Returns:
            dict[str, Any]: `{"error": {"code", "message", "details"}}` payload.
        Assumptions:
            `details` payload is already normalized during initialization.
        Raises:
            None.
        Side Effects:
            None.
        """
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": dict(self.details),
            }
        }


class UtcDateTimeOutOfRangeError(UtcDateTimeError):
    """
    Raised when a value in any encoding falls outside 1000-01-01 .. 9999-12-31.
    """

    code: ClassVar[str] = "utc_datetime_out_of_range"

    def __init__(
        self,
        message: str,
        *,
        encoding: str,
        value: int | str,
        bound: int | str,
        bound_kind: str,
    ) -> None:
        """
        Build out-of-range error carrying the offending value and the violated bound.

        Args:
            message: Human-readable description citing value and bound.
            encoding: Encoding name (`unix_timestamp`, `unix_milli_timestamp`, ...).
            value: Offending value.
            bound: Violated inclusive bound.
            bound_kind: `min` or `max`.
        Returns:
            None.
        Assumptions:
            Caller already compared `value` against `bound`.
        Raises:
            None.
        Side Effects:
            None.
        """
        super().__init__(
            message,
            details={
                "encoding": encoding,
                "value": value,
                "bound": bound,
                "bound_kind": bound_kind,
            },
        )
        self.encoding = encoding
        self.value = value
        self.bound = bound
        self.bound_kind = bound_kind


class UtcDateTimeInvalidFormatError(UtcDateTimeError):
    """
    Raised when text is not a valid `YYYY-MM-DD HH:MM:SS.ffffff` UTC date and time.
    """

    code: ClassVar[str] = "utc_datetime_invalid_format"

    def __init__(self, *, value: str) -> None:
        super().__init__(f'MySQL date and time "{value}" is not valid.', details={"value": value})
        self.value = value


class UtcDateTimeClockError(UtcDateTimeError):
    """
    Raised when the clock capability fails or returns an unusable value.
    """

    code: ClassVar[str] = "utc_datetime_clock_unavailable"


class UtcDateTimeConstructionError(UtcDateTimeError):
    """
    Raised when the calendar fails for a value that already passed range checks.
    """

    code: ClassVar[str] = "utc_datetime_construction_failed"


class UtcDateTimeNaiveDatetimeError(UtcDateTimeError):
    """
    Raised when a datetime without UTC offset is offered as an instant.
    """

    code: ClassVar[str] = "utc_datetime_naive_datetime"


def _normalize_payload_value(*, value: Any) -> Any:
    """
    Normalize nested payload values into deterministic plain-Python structures.

    Args:
        value: Any JSON-compatible value.
    Returns:
        Any: Normalized scalar/list/dict representation.
    Assumptions:
        Non-JSON values are stringified for safe deterministic error payloads.
    Raises:
        None.
    Side Effects:
        None.
    """
    if isinstance(value, Mapping):
        normalized_mapping: dict[str, Any] = {}
        sorted_items = sorted(value.items(), key=lambda item: str(item[0]))
        for raw_key, raw_value in sorted_items:
            normalized_mapping[str(raw_key)] = _normalize_payload_value(value=raw_value)
        return normalized_mapping

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_normalize_payload_value(value=item) for item in value]

    if isinstance(value, (str, int, float, bool)) or value is None:
        return value

    return str(value)


__all__ = [
    "UtcDateTimeClockError",
    "UtcDateTimeConstructionError",
    "UtcDateTimeError",
    "UtcDateTimeInvalidFormatError",
    "UtcDateTimeNaiveDatetimeError",
    "UtcDateTimeOutOfRangeError",
]
