from fastapi import APIRouter
from app.api.api_v1.endpoints import product_schedule

router = APIRouter()

# Include all routers
router.include_router(product_schedule.router, tags=["Operating Schedule"])
