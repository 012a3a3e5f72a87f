from fastapi import APIRouter, Depends, Response, status

from event_rsvp.errors import ClientInputError
from event_rsvp.guests.repository.write_models import GuestWriteModel, SqlGuestWriteModel
from event_rsvp.guests.urls import GUEST_URL
from event_rsvp.validation import parse_positive_id

router = APIRouter()


def get_guest_write_model() -> GuestWriteModel:
    """Dependency to get guest write model instance."""
    return SqlGuestWriteModel()


@router.delete(GUEST_URL, status_code=status.HTTP_204_NO_CONTENT)
async def delete_guest(
    guest_id: str,
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> Response:
    """
    Remove a guest. Succeeds even if the guest does not exist.
    """
    parsed_id = parse_positive_id(guest_id)
    if parsed_id is None:
        raise ClientInputError("Invalid guest ID")

    await write_model.delete_guest(parsed_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
