from fastapi import APIRouter, Depends, Query

from event_rsvp.guests.features.schemas import GuestResponse
from event_rsvp.guests.repository.filters import GuestFilter
from event_rsvp.guests.repository.read_models import GuestReadModel, SqlGuestReadModel
from event_rsvp.guests.urls import GUESTS_URL

router = APIRouter()


def get_guest_read_model() -> GuestReadModel:
    """Dependency to get guest read model instance."""
    return SqlGuestReadModel()


@router.get(GUESTS_URL, response_model=list[GuestResponse], response_model_exclude_none=True)
async def list_guests(
    status: str | None = Query(None, description="Only guests with this status"),
    search: str | None = Query(None, description="Case-insensitive match on name or email"),
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> list[GuestResponse]:
    """
    List guests, optionally filtered by status and a search term.
    """
    guests = await read_model.list_guests(GuestFilter(status=status, search=search))
    return [GuestResponse.from_dto(guest) for guest in guests]
