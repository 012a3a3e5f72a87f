from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from event_rsvp.errors import ClientInputError
from event_rsvp.guests.dtos import RSVPSubmissionDTO, validate_contact
from event_rsvp.guests.features.submit_rsvp.write_model import RSVPWriteModel, SqlRSVPWriteModel
from event_rsvp.guests.urls import SUBMIT_RSVP_URL
from event_rsvp.models.guest import GuestStatus
from event_rsvp.validation import blank_to_none, parse_positive_id

router = APIRouter()


class RSVPSubmit(BaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    rsvp_status: str | None = None
    notes: str | None = None
    plus_ones: int | None = 0
    dietary_restrictions: str | None = None


class RSVPResponse(BaseModel):
    message: str


def get_rsvp_write_model() -> RSVPWriteModel:
    """Dependency to get RSVP write model instance."""
    return SqlRSVPWriteModel()


@router.post(SUBMIT_RSVP_URL, response_model=RSVPResponse, status_code=status.HTTP_201_CREATED)
async def submit_rsvp(
    event_id: str,
    rsvp_data: RSVPSubmit,
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
) -> RSVPResponse:
    """
    Submit an RSVP for an event.
    "maybe" and unknown statuses are stored as pending.
    """
    parsed_event_id = parse_positive_id(event_id)
    if parsed_event_id is None:
        raise ClientInputError("Invalid event ID")

    validate_contact(rsvp_data.name, rsvp_data.email)
    plus_ones = rsvp_data.plus_ones or 0
    if plus_ones < 0:
        raise ClientInputError("Plus-ones cannot be negative")

    await write_model.submit_rsvp(
        event_id=parsed_event_id,
        rsvp=RSVPSubmissionDTO(
            name=rsvp_data.name,
            email=rsvp_data.email,
            status=GuestStatus.from_client(rsvp_data.rsvp_status),
            phone=blank_to_none(rsvp_data.phone),
            notes=blank_to_none(rsvp_data.notes),
            plus_ones=plus_ones,
            dietary_restrictions=blank_to_none(rsvp_data.dietary_restrictions),
        ),
    )
    return RSVPResponse(message="RSVP saved!")
