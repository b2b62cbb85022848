import re
from datetime import datetime
from typing import List, Tuple

from app.core.errors import MalformedInputError

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

def to_minutes(time_of_day: str) -> int:
    """Convert "HH:MM" to minutes since midnight."""
    hour, minute = time_of_day.split(":")
    return int(hour) * 60 + int(minute)

def to_time_of_day(minutes: int) -> str:
    """Convert minutes since midnight to zero-padded "HH:MM"."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"

def generate_slots(start: str, end: str, interval: int) -> List[str]:
    """
    Generate evenly spaced start times in [start, end).

    An inverted or empty window yields an empty list.
    """
    if interval <= 0:
        raise MalformedInputError(f"Interval must be positive, got {interval}", field="interval")

    slots: List[str] = []
    current = to_minutes(start)
    end_minutes = to_minutes(end)

    while current < end_minutes:
        slots.append(to_time_of_day(current))
        current += interval

    return slots

def preview_slots(start: str, end: str, interval: int, limit: int) -> Tuple[List[str], bool]:
    """Return the first `limit` generated slots and whether more exist."""
    slots = generate_slots(start, end, interval)
    return slots[:limit], len(slots) > limit

def is_valid_time(value) -> bool:
    return isinstance(value, str) and TIME_PATTERN.match(value) is not None

def is_valid_date(value) -> bool:
    if not isinstance(value, str) or not DATE_PATTERN.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True

def normalize_times(times) -> List[str]:
    """Deduplicate and sort a list of "HH:MM" values."""
    return sorted(set(times))
