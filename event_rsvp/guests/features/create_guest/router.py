from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from event_rsvp.guests.dtos import validate_contact
from event_rsvp.guests.features.schemas import GuestResponse
from event_rsvp.guests.repository.write_models import GuestWriteModel, SqlGuestWriteModel
from event_rsvp.guests.urls import GUESTS_URL
from event_rsvp.models.guest import GuestStatus
from event_rsvp.validation import blank_to_none

router = APIRouter()


class CreateGuestRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    status: str | None = None


def get_guest_write_model() -> GuestWriteModel:
    """Dependency to get guest write model instance."""
    return SqlGuestWriteModel()


@router.post(
    GUESTS_URL,
    response_model=GuestResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_guest(
    guest_data: CreateGuestRequest,
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> GuestResponse:
    """
    Add a guest from the admin panel.
    Unknown statuses default to pending.
    """
    validate_contact(guest_data.name, guest_data.email)

    guest = await write_model.create_guest(
        name=guest_data.name,
        email=guest_data.email,
        phone=blank_to_none(guest_data.phone),
        status=GuestStatus.from_client(guest_data.status),
    )
    return GuestResponse.from_dto(guest)
