from fastapi import APIRouter

from .features.create_guest.router import router as create_guest_router
from .features.delete_guest.router import router as delete_guest_router
from .features.list_guests.router import router as list_guests_router
from .features.submit_rsvp.router import router as submit_rsvp_router

router = APIRouter()

router.include_router(list_guests_router)
router.include_router(create_guest_router)
router.include_router(delete_guest_router)
router.include_router(submit_rsvp_router)
