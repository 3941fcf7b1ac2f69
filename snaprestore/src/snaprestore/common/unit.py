"""Time value parsing."""

import re
from datetime import timedelta

_TIME_VALUE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(nanos|micros|ms|s|m|h|d)?\s*$")

_UNIT_SECONDS = {
    "nanos": 1e-9,
    "micros": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
    "d": 86400.0,
}


def parse_time_value(value: str | int | float | timedelta, setting: str = "timeout") -> timedelta:
    """
    Parse a time value such as ``"30s"``, ``"1m"`` or ``"500ms"``.

    Bare numbers are milliseconds. ``-1`` means "no timeout" and is returned
    as a negative timedelta.

    Args:
        value: Time string, milliseconds or timedelta
        setting: Name used in error messages

    Returns:
        Parsed timedelta

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return timedelta(milliseconds=value)

    match = _TIME_VALUE.match(str(value))
    if not match:
        raise ValueError(f"Failed to parse setting [{setting}] with value [{value}] as a time value")

    amount = float(match.group(1))
    unit = match.group(2) or "ms"
    return timedelta(seconds=amount * _UNIT_SECONDS[unit])


def format_time_value(value: timedelta) -> str:
    """Render a timedelta in the most compact whole unit."""
    millis = round(value.total_seconds() * 1000)
    for unit, size in (("d", 86_400_000), ("h", 3_600_000), ("m", 60_000), ("s", 1000)):
        if millis and millis % size == 0:
            return f"{millis // size}{unit}"
    return f"{millis}ms"
