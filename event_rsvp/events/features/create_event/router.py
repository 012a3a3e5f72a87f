from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from event_rsvp.errors import ClientInputError
from event_rsvp.events.repository.write_models import EventWriteModel, SqlEventWriteModel
from event_rsvp.events.urls import EVENTS_URL
from event_rsvp.validation import TIMESTAMP_EXAMPLE, Timestamp, blank_to_none, parse_timestamp

router = APIRouter()


class CreateEventRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    event_date: str | None = None
    location: str | None = None


class CreateEventResponse(BaseModel):
    id: int
    title: str
    description: str | None = None
    event_date: Timestamp
    location: str | None = None
    message: str


def get_event_write_model() -> EventWriteModel:
    """Dependency to get event write model instance."""
    return SqlEventWriteModel()


@router.post(
    EVENTS_URL,
    response_model=CreateEventResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_event(
    event_data: CreateEventRequest,
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> CreateEventResponse:
    """
    Create a new event from the admin panel.
    Blank description and location are stored as missing.
    """
    title = blank_to_none(event_data.title)
    if title is None:
        raise ClientInputError("Title is required")
    if not event_data.event_date:
        raise ClientInputError("Event date is required")

    try:
        event_date = parse_timestamp(event_data.event_date)
    except ValueError:
        raise ClientInputError(f"Invalid date format, use ISO 8601 (e.g., {TIMESTAMP_EXAMPLE})")

    event = await write_model.create_event(
        title=title,
        event_date=event_date,
        description=blank_to_none(event_data.description),
        location=blank_to_none(event_data.location),
    )

    return CreateEventResponse(
        id=event.id,
        title=event.title,
        description=event.description,
        event_date=event.event_date,
        location=event.location,
        message="Event created!",
    )
