from typing import Any, Dict, Optional
from datetime import datetime
import logging

from bson import ObjectId
from bson.errors import InvalidId

from app.db.mongodb import get_database

logger = logging.getLogger(__name__)

SCHEDULE_FIELDS = {"availableTimeSlots": 1, "unavailableDates": 1}

def _object_id(product_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(product_id)
    except (InvalidId, TypeError):
        return None

async def get_product_schedule(product_id: str) -> Optional[Dict[str, Any]]:
    """
    Get the stored operating schedule of a product.

    Returns None if the product does not exist, otherwise the
    {availableTimeSlots, unavailableDates} pair (either may be None).
    """
    object_id = _object_id(product_id)
    if object_id is None:
        return None

    db = await get_database()
    product = await db["products"].find_one({"_id": object_id}, SCHEDULE_FIELDS)
    if not product:
        return None

    return {
        "availableTimeSlots": product.get("availableTimeSlots"),
        "unavailableDates": product.get("unavailableDates"),
    }

async def save_product_schedule(product_id: str, schedule: Dict[str, Any]) -> bool:
    """Write a serialized schedule onto the product document as-is."""
    object_id = _object_id(product_id)
    if object_id is None:
        return False

    db = await get_database()
    result = await db["products"].update_one(
        {"_id": object_id},
        {"$set": {
            "availableTimeSlots": schedule.get("availableTimeSlots"),
            "unavailableDates": schedule.get("unavailableDates"),
            "updated_at": datetime.utcnow(),
        }}
    )
    logger.info(f"Saved schedule for product {product_id} (matched={result.matched_count})")
    return result.matched_count > 0
