from typing import List
import logging

from pydantic import BaseModel, Field, field_validator

from app.core.config import settings
from app.schemas.schedule import SlotMode
from app.utils.time_utils import generate_slots, normalize_times

logger = logging.getLogger(__name__)

DAYS_OF_WEEK = (0, 1, 2, 3, 4, 5, 6)  # 0=일 ... 6=토
WEEKDAYS = (1, 2, 3, 4, 5)
WEEKEND = (0, 6)

class DaySchedule(BaseModel):
    """
    Operating hours of one weekday.

    `interval` is only read in auto mode and `customSlots` only in custom
    mode. Switching mode keeps the other field so the author can flip back
    without losing entries.
    """
    day: int = Field(..., ge=0, le=6, frozen=True)
    enabled: bool = False
    start: str = Field(default_factory=lambda: settings.SCHEDULE_DEFAULT_START)
    end: str = Field(default_factory=lambda: settings.SCHEDULE_DEFAULT_END)
    mode: SlotMode = SlotMode.AUTO
    interval: int = Field(default_factory=lambda: settings.SCHEDULE_DEFAULT_INTERVAL)
    customSlots: List[str] = []

    @field_validator("customSlots")
    @classmethod
    def _normalize_custom_slots(cls, value: List[str]) -> List[str]:
        return normalize_times(value)

    def set_enabled(self, enabled: bool) -> "DaySchedule":
        self.enabled = enabled
        return self

    def set_start(self, start: str) -> "DaySchedule":
        self.start = start
        return self

    def set_end(self, end: str) -> "DaySchedule":
        self.end = end
        return self

    def set_mode(self, mode: SlotMode) -> "DaySchedule":
        self.mode = SlotMode(mode)
        return self

    def set_interval(self, interval: int) -> "DaySchedule":
        self.interval = interval
        return self

    def add_custom_slot(self, time_of_day: str) -> "DaySchedule":
        """Add a custom start time; adding an existing time is a no-op."""
        if time_of_day not in self.customSlots:
            self.customSlots = sorted(self.customSlots + [time_of_day])
        return self

    def remove_custom_slot(self, time_of_day: str) -> "DaySchedule":
        self.customSlots = [t for t in self.customSlots if t != time_of_day]
        return self

    def generated_slots(self) -> List[str]:
        return generate_slots(self.start, self.end, self.interval)

    def active_slots(self) -> List[str]:
        """Bookable start times according to the current mode."""
        if self.mode == SlotMode.CUSTOM:
            return list(self.customSlots)
        return self.generated_slots()

    def is_bulk_eligible(self) -> bool:
        return self.enabled and self.mode == SlotMode.CUSTOM

class BulkResult(BaseModel):
    applied: bool
    days: List[int] = []

class WeeklySchedule(BaseModel):
    """Seven day records, Sunday (0) through Saturday (6)."""
    days: List[DaySchedule] = Field(
        default_factory=lambda: [DaySchedule(day=day) for day in DAYS_OF_WEEK]
    )

    @field_validator("days")
    @classmethod
    def _require_full_week(cls, value: List[DaySchedule]) -> List[DaySchedule]:
        if [d.day for d in value] != list(DAYS_OF_WEEK):
            raise ValueError("A weekly schedule needs exactly one record per day, ordered 0-6")
        return value

    def day(self, day: int) -> DaySchedule:
        return self.days[day]

    def all_enabled(self) -> bool:
        return all(d.enabled for d in self.days)

    def enabled_days(self) -> List[DaySchedule]:
        return [d for d in self.days if d.enabled]

    def set_all_enabled(self, enabled: bool) -> "WeeklySchedule":
        for d in self.days:
            d.enabled = enabled
        return self

    def toggle_all(self) -> "WeeklySchedule":
        return self.set_all_enabled(not self.all_enabled())

    def apply_weekdays_only(self) -> "WeeklySchedule":
        for d in self.days:
            d.enabled = d.day in WEEKDAYS
        return self

    def apply_weekends_only(self) -> "WeeklySchedule":
        for d in self.days:
            d.enabled = d.day in WEEKEND
        return self

    def apply_start_to_all(self, start: str) -> "WeeklySchedule":
        for d in self.days:
            d.set_start(start)
        return self

    def apply_end_to_all(self, end: str) -> "WeeklySchedule":
        for d in self.days:
            d.set_end(end)
        return self

    def apply_mode_to_all(self, mode: SlotMode) -> "WeeklySchedule":
        for d in self.days:
            d.set_mode(mode)
        return self

    def apply_interval_to_all(self, interval: int) -> "WeeklySchedule":
        for d in self.days:
            d.set_interval(interval)
        return self

    def eligible_for_bulk(self) -> List[DaySchedule]:
        """Days a bulk custom-slot edit may touch: enabled and in custom mode."""
        return [d for d in self.days if d.is_bulk_eligible()]

    def apply_bulk_add(self, times: List[str]) -> BulkResult:
        """Merge `times` into the custom slots of every eligible day."""
        if not times:
            logger.warning("Bulk slot add skipped: no times given")
            return BulkResult(applied=False)

        affected = []
        for d in self.eligible_for_bulk():
            d.customSlots = normalize_times(d.customSlots + list(times))
            affected.append(d.day)

        logger.info(f"Bulk added {len(set(times))} slot(s) to days {affected}")
        return BulkResult(applied=True, days=affected)

    def apply_bulk_remove(self, times: List[str]) -> BulkResult:
        """Drop `times` from the custom slots of every eligible day."""
        if not times:
            logger.warning("Bulk slot remove skipped: no times given")
            return BulkResult(applied=False)

        removing = set(times)
        affected = []
        for d in self.eligible_for_bulk():
            d.customSlots = [t for t in d.customSlots if t not in removing]
            affected.append(d.day)

        logger.info(f"Bulk removed {len(removing)} slot(s) from days {affected}")
        return BulkResult(applied=True, days=affected)
