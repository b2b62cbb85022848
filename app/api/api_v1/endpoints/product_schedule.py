from fastapi import APIRouter, HTTPException, status
import logging

from app.core.config import settings, DAY_OF_WEEK_LABEL
from app.core.errors import MalformedInputError
from app.db.product_schedule import get_product_schedule, save_product_schedule
from app.schemas.schedule import (
    DayOption, ScheduleConfig, ScheduleOptionsResponse, ScheduleSubmission,
    SlotPreviewRequest, SlotPreviewResponse
)
from app.services.schedule_serializer import ScheduleEditor
from app.utils.time_utils import generate_slots, is_valid_time, preview_slots

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/products/{product_id}/schedule", response_model=ScheduleConfig)
async def get_schedule(product_id: str):
    """
    Get a product's operating schedule, normalized
    """
    stored = await get_product_schedule(product_id)
    if stored is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )

    try:
        editor = ScheduleEditor.from_stored(stored)
    except MalformedInputError as e:
        logger.error(f"Stored schedule for product {product_id} is malformed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Stored schedule is malformed"
        )

    return editor.serialize()

@router.put("/products/{product_id}/schedule", response_model=ScheduleConfig)
async def update_schedule(product_id: str, schedule_in: ScheduleSubmission):
    """
    Replace a product's operating schedule
    """
    try:
        editor = ScheduleEditor.from_stored(schedule_in.dict())
    except MalformedInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    schedule = editor.serialize()
    success = await save_product_schedule(product_id, schedule)
    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Product not found"
        )

    return schedule

@router.post("/schedule/preview", response_model=SlotPreviewResponse)
async def preview_schedule(preview_in: SlotPreviewRequest):
    """
    Preview the slots auto mode would generate for a window
    """
    for field in ("start", "end"):
        if not is_valid_time(getattr(preview_in, field)):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"'{field}' must be HH:MM"
            )

    try:
        slots = generate_slots(preview_in.start, preview_in.end, preview_in.interval)
        preview, has_more = preview_slots(
            preview_in.start, preview_in.end, preview_in.interval, settings.SCHEDULE_PREVIEW_LIMIT
        )
    except MalformedInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return {
        "slots": slots,
        "preview": preview,
        "hasMore": has_more,
    }

@router.get("/schedule/options", response_model=ScheduleOptionsResponse)
async def get_schedule_options():
    """
    Day labels, interval choices and defaults for the schedule editor
    """
    return ScheduleOptionsResponse(
        days=[DayOption(day=day, label=label) for day, label in DAY_OF_WEEK_LABEL.items()],
        intervals=settings.SCHEDULE_INTERVAL_OPTIONS,
        defaultStart=settings.SCHEDULE_DEFAULT_START,
        defaultEnd=settings.SCHEDULE_DEFAULT_END,
        defaultInterval=settings.SCHEDULE_DEFAULT_INTERVAL,
    )
