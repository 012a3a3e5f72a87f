from fastapi import APIRouter, Depends
from pydantic import BaseModel

from event_rsvp.events.repository.read_models import EventReadModel, SqlEventReadModel
from event_rsvp.events.urls import EVENTS_URL
from event_rsvp.validation import Timestamp

router = APIRouter()


class EventResponse(BaseModel):
    """Event as shown in the admin list and the RSVP dropdown."""

    id: int
    title: str
    description: str | None = None
    event_date: Timestamp | None = None
    location: str | None = None
    created_at: Timestamp | None = None
    display: str
    rsvps: int


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()


@router.get(EVENTS_URL, response_model=list[EventResponse], response_model_exclude_none=True)
async def list_events(
    read_model: EventReadModel = Depends(get_event_read_model),
) -> list[EventResponse]:
    """
    List all events with a display string and RSVP count.
    """
    events = await read_model.list_events()
    return [
        EventResponse(
            id=event.id,
            title=event.title,
            description=event.description,
            event_date=event.event_date,
            location=event.location,
            created_at=event.created_at,
            display=event.display,
            rsvps=event.rsvps,
        )
        for event in events
    ]
