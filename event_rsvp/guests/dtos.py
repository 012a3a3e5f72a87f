from dataclasses import dataclass
from datetime import datetime

from event_rsvp.errors import ClientInputError, ConflictError
from event_rsvp.models.guest import GuestStatus
from event_rsvp.validation import is_valid_email


class RSVPAlreadyExistsError(ConflictError):
    """Raised when an email has already answered for an event."""

    def __init__(self, event_id: int, email: str) -> None:
        self.event_id = event_id
        self.email = email
        super().__init__("You already RSVP'd to this event")


def validate_contact(name: str | None, email: str | None) -> None:
    """Raise ClientInputError unless name and email are present and the email looks valid."""
    if not name or not email:
        raise ClientInputError("Name and email required")
    if not is_valid_email(email):
        raise ClientInputError("Invalid email format")


@dataclass(frozen=True)
class GuestDTO:
    """DTO for guest data."""

    id: int
    name: str
    email: str
    status: GuestStatus
    phone: str | None = None
    created_at: datetime | None = None
    event_id: int | None = None


@dataclass(frozen=True)
class RSVPSubmissionDTO:
    """DTO for an RSVP answer, status already mapped."""

    name: str
    email: str
    status: GuestStatus
    phone: str | None = None
    notes: str | None = None
    plus_ones: int = 0
    dietary_restrictions: str | None = None
