"""Timestamp parsing and date bucket helpers

All comparisons happen on naive datetimes in server-local time, so that
"today" means the local calendar day.
"""

from datetime import date, datetime, timedelta
from typing import Any, Callable, Optional

from pydantic import TypeAdapter, ValidationError

Clock = Callable[[], datetime]

BUCKETS = ("all", "today", "tomorrow", "week")

_datetime_adapter = TypeAdapter(datetime)

# Formats some backends echo back, e.g. "1/20/2024 6:30:00 PM"
_FALLBACK_FORMATS = (
    "%m/%d/%Y %I:%M:%S %p",
    "%m/%d/%Y %I:%M %p",
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y",
)


def local_now() -> datetime:
    return datetime.now()


def to_local_naive(value: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through"""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse a stored timestamp leniently, returning None when it cannot be read"""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return to_local_naive(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None

    text = value.strip()
    try:
        return to_local_naive(_datetime_adapter.validate_python(text))
    except ValidationError:
        pass

    cleaned = text
    for suffix in (".000Z", "Z"):
        if cleaned.endswith(suffix):
            cleaned = cleaned[: -len(suffix)].strip()
            break

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
    return None


def is_today(value: Optional[datetime], now: datetime) -> bool:
    return value is not None and value.date() == now.date()


def is_tomorrow(value: Optional[datetime], now: datetime) -> bool:
    return value is not None and value.date() == now.date() + timedelta(days=1)


def is_within_week(value: Optional[datetime], now: datetime) -> bool:
    """Inclusive [now, now + 7 days] window"""
    return value is not None and now <= value <= now + timedelta(days=7)


def in_bucket(bucket: str, value: Optional[datetime], now: datetime) -> bool:
    if bucket == "all":
        return True
    if bucket == "today":
        return is_today(value, now)
    if bucket == "tomorrow":
        return is_tomorrow(value, now)
    if bucket == "week":
        return is_within_week(value, now)
    raise ValueError(f"Unknown date bucket: {bucket}")
