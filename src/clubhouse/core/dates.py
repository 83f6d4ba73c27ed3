"""Pure calendar-day helpers - no I/O dependencies."""

from datetime import date, datetime, timedelta
from typing import Iterator


def normalize_day(d: date | datetime) -> date:
    """
    Drop the time-of-day, keeping only the calendar day.

    Aware datetimes are converted to local time first; naive datetimes are
    assumed to already be local. Idempotent.
    """
    if isinstance(d, datetime):
        if d.tzinfo is not None:
            d = d.astimezone()
        return d.date()
    return d


def parse_day(value: str) -> date:
    """
    Calendar day of a "YYYY-MM-DD" string or an ISO timestamp.

    Timestamps with an offset (or a trailing "Z") land on the local day.
    """
    value = str(value).strip()
    if len(value) == 10:
        return date.fromisoformat(value)
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return normalize_day(datetime.fromisoformat(value))


def same_day(a: date | datetime, b: date | datetime) -> bool:
    """True if both values fall on the same local calendar day."""
    return normalize_day(a) == normalize_day(b)


def iso_day(d: date | datetime) -> str:
    """ISO date string (YYYY-MM-DD) used to key completions."""
    return normalize_day(d).isoformat()


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end, inclusive."""
    current = normalize_day(start)
    last = normalize_day(end)
    while current <= last:
        yield current
        current += timedelta(days=1)


def calendar_window(today: date | datetime) -> tuple[date, date]:
    """
    Day range the calendar view populates around today.

    From the first day of the previous month to the last day of the next month.
    """
    today = normalize_day(today)

    if today.month == 1:
        start = date(today.year - 1, 12, 1)
    else:
        start = date(today.year, today.month - 1, 1)

    # First day of the month after next, minus one day
    month = today.month + 2
    year = today.year + (month - 1) // 12
    month = (month - 1) % 12 + 1
    end = date(year, month, 1) - timedelta(days=1)

    return start, end
