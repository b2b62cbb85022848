from typing import Any, Dict, List, Optional
import logging

from app.core.config import settings
from app.core.errors import MalformedInputError
from app.schemas.schedule import SlotMode, UnavailableDateEntry
from app.services.schedule_service import DaySchedule, WeeklySchedule, DAYS_OF_WEEK
from app.services.unavailable_date_service import UnavailableDateSet
from app.utils.time_utils import is_valid_date, is_valid_time, normalize_times

logger = logging.getLogger(__name__)

def serialize_day(day: DaySchedule) -> Dict[str, Any]:
    """Project one enabled day onto its stored shape, without the inactive mode's field."""
    slot = {
        "day": day.day,
        "start": day.start,
        "end": day.end,
        "mode": day.mode.value,
    }
    if day.mode == SlotMode.CUSTOM:
        slot["customSlots"] = list(day.customSlots)
    else:
        slot["interval"] = day.interval
    return slot

def serialize(weekly: WeeklySchedule, unavailable: UnavailableDateSet) -> Dict[str, Any]:
    """
    Build the persisted schedule.

    Disabled days are dropped. Empty collections become None so that "no
    slots" has a single representation.
    """
    available_time_slots = [serialize_day(d) for d in weekly.enabled_days()]
    unavailable_dates = [
        {"date": e.date, "reason": e.reason} for e in unavailable.entries
    ]

    return {
        "availableTimeSlots": available_time_slots if available_time_slots else None,
        "unavailableDates": unavailable_dates if unavailable_dates else None,
    }

def _require_time(value: Any, field: str, day: int) -> str:
    if not is_valid_time(value):
        raise MalformedInputError(f"Day {day}: '{field}' must be HH:MM, got {value!r}", field=field)
    return value

def _hydrate_day(entry: Dict[str, Any]) -> DaySchedule:
    day = entry.get("day")
    if not isinstance(day, int) or isinstance(day, bool) or day not in DAYS_OF_WEEK:
        raise MalformedInputError(f"Day must be an integer 0-6, got {day!r}", field="day")

    start = _require_time(entry.get("start"), "start", day)
    end = _require_time(entry.get("end"), "end", day)

    # Records stored before custom mode existed carry no mode
    mode_value = entry.get("mode") or SlotMode.AUTO.value
    try:
        mode = SlotMode(mode_value)
    except ValueError:
        raise MalformedInputError(f"Day {day}: unknown mode {mode_value!r}", field="mode")

    interval = entry.get("interval")
    if interval is None:
        interval = settings.SCHEDULE_DEFAULT_INTERVAL
    if not isinstance(interval, int) or isinstance(interval, bool) or interval <= 0:
        raise MalformedInputError(f"Day {day}: interval must be a positive integer, got {interval!r}", field="interval")

    custom_slots = entry.get("customSlots") or []
    if not isinstance(custom_slots, list):
        raise MalformedInputError(f"Day {day}: customSlots must be a list", field="customSlots")
    for t in custom_slots:
        _require_time(t, "customSlots", day)

    return DaySchedule(
        day=day,
        enabled=True,
        start=start,
        end=end,
        mode=mode,
        interval=interval,
        customSlots=normalize_times(custom_slots),
    )

def hydrate_weekly_schedule(available_time_slots: Optional[List[Dict[str, Any]]]) -> WeeklySchedule:
    """
    Rebuild the seven day records from a stored slot list.

    Days missing from the list start disabled with default hours.
    """
    weekly = WeeklySchedule()
    seen = set()
    for entry in available_time_slots or []:
        if not isinstance(entry, dict):
            raise MalformedInputError(f"Time slot entry must be an object, got {entry!r}")
        day = _hydrate_day(entry)
        if day.day in seen:
            raise MalformedInputError(f"Day {day.day} listed more than once", field="day")
        seen.add(day.day)
        weekly.days[day.day] = day
    return weekly

def hydrate_unavailable_dates(unavailable_dates: Optional[List[Dict[str, Any]]]) -> UnavailableDateSet:
    """Rebuild the unavailable date set; the first entry for a date wins."""
    entries = {}
    for item in unavailable_dates or []:
        if not isinstance(item, dict):
            raise MalformedInputError(f"Unavailable date entry must be an object, got {item!r}")
        date = item.get("date")
        if not is_valid_date(date):
            raise MalformedInputError(f"Unavailable date must be YYYY-MM-DD, got {date!r}", field="date")
        reason = item.get("reason") or ""
        if not isinstance(reason, str):
            raise MalformedInputError(f"Reason for {date} must be text", field="reason")
        if date in entries:
            logger.warning(f"Duplicate unavailable date {date} dropped during load")
            continue
        entries[date] = UnavailableDateEntry(date=date, reason=reason)

    return UnavailableDateSet(entries=[entries[d] for d in sorted(entries)])

class ScheduleEditor:
    """
    Editable schedule state for one authoring session.

    Holds the weekly schedule and the unavailable dates; all edits go through
    their operations and `serialize()` produces what gets stored.
    """

    def __init__(self, weekly: WeeklySchedule = None, unavailable: UnavailableDateSet = None):
        self.weekly = weekly if weekly is not None else WeeklySchedule()
        self.unavailable = unavailable if unavailable is not None else UnavailableDateSet()

    @classmethod
    def default(cls) -> "ScheduleEditor":
        return cls()

    @classmethod
    def from_stored(cls, stored: Optional[Dict[str, Any]]) -> "ScheduleEditor":
        """Load a previously serialized schedule, or defaults when there is none."""
        if not stored:
            return cls.default()
        return cls(
            weekly=hydrate_weekly_schedule(stored.get("availableTimeSlots")),
            unavailable=hydrate_unavailable_dates(stored.get("unavailableDates")),
        )

    def reset(self, stored: Optional[Dict[str, Any]] = None) -> "ScheduleEditor":
        """Replace the whole state, e.g. when the stored schedule arrives after defaults were shown."""
        loaded = ScheduleEditor.from_stored(stored)
        self.weekly = loaded.weekly
        self.unavailable = loaded.unavailable
        return self

    def serialize(self) -> Dict[str, Any]:
        return serialize(self.weekly, self.unavailable)
