from fastapi import APIRouter

from .features.create_event.router import router as create_event_router
from .features.list_events.router import router as list_events_router

router = APIRouter()

router.include_router(list_events_router)
router.include_router(create_event_router)
