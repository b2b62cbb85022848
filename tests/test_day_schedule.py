import pytest
from pydantic import ValidationError

from app.schemas.schedule import SlotMode
from app.services.schedule_service import DaySchedule

def test_defaults():
    day = DaySchedule(day=1)
    assert day.enabled is False
    assert day.start == "09:00"
    assert day.end == "18:00"
    assert day.mode == SlotMode.AUTO
    assert day.interval == 60
    assert day.customSlots == []

def test_day_is_immutable():
    day = DaySchedule(day=3)
    with pytest.raises(ValidationError):
        day.day = 4

def test_day_out_of_range():
    with pytest.raises(ValidationError):
        DaySchedule(day=7)

def test_setters_return_record():
    day = DaySchedule(day=1)
    result = day.set_enabled(True).set_start("10:00").set_end("12:00").set_interval(30)
    assert result is day
    assert day.generated_slots() == ["10:00", "10:30", "11:00", "11:30"]

def test_add_custom_slot_sorted_and_deduplicated():
    day = DaySchedule(day=2, enabled=True, mode=SlotMode.CUSTOM)
    day.add_custom_slot("14:00").add_custom_slot("09:00").add_custom_slot("14:00")
    assert day.customSlots == ["09:00", "14:00"]

def test_add_custom_slot_twice_grows_by_one():
    day = DaySchedule(day=2)
    before = len(day.customSlots)
    day.add_custom_slot("11:00")
    day.add_custom_slot("11:00")
    assert len(day.customSlots) == before + 1

def test_remove_custom_slot():
    day = DaySchedule(day=2, customSlots=["09:00", "14:00"])
    day.remove_custom_slot("09:00")
    assert day.customSlots == ["14:00"]
    day.remove_custom_slot("20:00")
    assert day.customSlots == ["14:00"]

def test_custom_slots_normalized_on_construction():
    day = DaySchedule(day=0, customSlots=["15:00", "08:00", "15:00"])
    assert day.customSlots == ["08:00", "15:00"]

def test_mode_switch_keeps_other_mode_data():
    day = DaySchedule(day=4, enabled=True, interval=30)
    day.set_mode(SlotMode.CUSTOM).add_custom_slot("10:00")
    day.set_mode("auto")
    assert day.interval == 30
    assert day.customSlots == ["10:00"]
    day.set_mode(SlotMode.CUSTOM)
    assert day.customSlots == ["10:00"]

def test_active_slots_follow_mode():
    day = DaySchedule(day=5, start="09:00", end="11:00", customSlots=["13:00"])
    assert day.active_slots() == ["09:00", "10:00"]
    day.set_mode(SlotMode.CUSTOM)
    assert day.active_slots() == ["13:00"]

def test_inverted_window_yields_empty_preview():
    day = DaySchedule(day=1, start="18:00", end="09:00")
    assert day.generated_slots() == []

def test_disabling_keeps_fields():
    day = DaySchedule(day=1, enabled=True, start="07:00", customSlots=["07:30"])
    day.set_enabled(False)
    assert day.start == "07:00"
    assert day.customSlots == ["07:30"]
