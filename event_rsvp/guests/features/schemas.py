from pydantic import BaseModel

from event_rsvp.guests.dtos import GuestDTO
from event_rsvp.models.guest import GuestStatus
from event_rsvp.validation import Timestamp


class GuestResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: str | None = None
    status: GuestStatus
    created_at: Timestamp | None = None

    @classmethod
    def from_dto(cls, guest: GuestDTO) -> "GuestResponse":
        return cls(
            id=guest.id,
            name=guest.name,
            email=guest.email,
            phone=guest.phone,
            status=guest.status,
            created_at=guest.created_at,
        )
