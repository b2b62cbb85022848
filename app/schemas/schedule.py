from pydantic import BaseModel, Field
from typing import Annotated, Any, Dict, List, Literal, Optional, Union
from enum import Enum

class SlotMode(str, Enum):
    AUTO = "auto"
    CUSTOM = "custom"

class AutoTimeSlot(BaseModel):
    day: int = Field(..., ge=0, le=6)  # 0=일, 1=월, ..., 6=토
    start: str  # "09:00"
    end: str  # "18:00"
    mode: Literal["auto"] = "auto"
    interval: int  # minutes between generated slots

class CustomTimeSlot(BaseModel):
    day: int = Field(..., ge=0, le=6)
    start: str
    end: str
    mode: Literal["custom"] = "custom"
    customSlots: List[str] = []  # sorted, unique "HH:MM"

TimeSlot = Annotated[Union[AutoTimeSlot, CustomTimeSlot], Field(discriminator="mode")]

class UnavailableDateEntry(BaseModel):
    date: str  # Format: "2025-06-01"
    reason: str = ""

class ScheduleConfig(BaseModel):
    """Persisted operating schedule of a product."""
    availableTimeSlots: Optional[List[TimeSlot]] = None
    unavailableDates: Optional[List[UnavailableDateEntry]] = None

class ScheduleSubmission(BaseModel):
    """
    Incoming schedule payload.

    Slot entries are kept as raw mappings so that records written before
    custom mode existed (no "mode" key) still hydrate, and so that malformed
    values surface as MalformedInputError rather than a generic 422.
    """
    availableTimeSlots: Optional[List[Dict[str, Any]]] = None
    unavailableDates: Optional[List[Dict[str, Any]]] = None

class SlotPreviewRequest(BaseModel):
    start: str
    end: str
    interval: int

class SlotPreviewResponse(BaseModel):
    slots: List[str]
    preview: List[str]
    hasMore: bool

class DayOption(BaseModel):
    day: int
    label: str

class ScheduleOptionsResponse(BaseModel):
    days: List[DayOption]
    intervals: List[int]
    defaultStart: str
    defaultEnd: str
    defaultInterval: int
