"""Time-of-day parsing and formatting - no I/O dependencies."""

import re

NOON_MINUTES = 12 * 60

_TIME_PATTERN = re.compile(
    r"^\s*(\d{1,2}):(\d{2})(?::(\d{2}))?\s*([AaPp][Mm])?\s*$"
)


class MalformedTimeError(ValueError):
    """Raised when a time-of-day string cannot be parsed."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Malformed time of day: {value!r}")


def parse_time(value: str) -> tuple[int, int]:
    """
    Parse a wall-clock time into (hour, minute) on a 24-hour clock.

    Accepts "H:MM AM/PM", "HH:MM" and "HH:MM:SS" (seconds are ignored).
    Raises MalformedTimeError for anything else.
    """
    if not isinstance(value, str):
        raise MalformedTimeError(value)

    match = _TIME_PATTERN.match(value)
    if not match:
        raise MalformedTimeError(value)

    hours = int(match.group(1))
    minutes = int(match.group(2))
    seconds = int(match.group(3) or 0)
    period = (match.group(4) or "").upper()

    if minutes > 59 or seconds > 59:
        raise MalformedTimeError(value)

    if period:
        if not 1 <= hours <= 12:
            raise MalformedTimeError(value)
        if period == "PM" and hours != 12:
            hours += 12
        elif period == "AM" and hours == 12:
            hours = 0
    elif hours > 23:
        raise MalformedTimeError(value)

    return hours, minutes


def to_minutes(value: str) -> int:
    """Minutes since midnight."""
    hours, minutes = parse_time(value)
    return hours * 60 + minutes


def to_24_hour(value: str) -> str:
    """Zero-padded "HH:MM", safe to compare as a string."""
    hours, minutes = parse_time(value)
    return f"{hours:02d}:{minutes:02d}"


def to_12_hour(value: str) -> str:
    """Display form, e.g. "14:30" -> "2:30 PM"."""
    hours, minutes = parse_time(value)
    period = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {period}"
