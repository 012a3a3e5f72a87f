"""Write model for creating events. Returns DTOs instead of ORM models."""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from functools import partial

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from event_rsvp.config.database import async_session_manager
from event_rsvp.errors import StorageError
from event_rsvp.events.dtos import EventDTO
from event_rsvp.models import Event

logger = logging.getLogger(__name__)


class EventWriteModel(ABC):
    @abstractmethod
    async def create_event(
        self,
        title: str,
        event_date: datetime,
        description: str | None = None,
        location: str | None = None,
    ) -> EventDTO:
        """Insert a new event and return it with its store-assigned id.

        Args:
            title: Non-empty event title
            event_date: Timezone-aware start of the event
            description: Optional description, None when not given
            location: Optional location, None when not given
        """
        raise NotImplementedError


class SqlEventWriteModel(EventWriteModel):
    """SQL implementation of event write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_event(
        self,
        title: str,
        event_date: datetime,
        description: str | None = None,
        location: str | None = None,
    ) -> EventDTO:
        try:
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                event = Event(
                    title=title,
                    description=description,
                    event_date=event_date,
                    location=location,
                )
                session.add(event)
                await session.flush()  # Get event.id
                event_id = event.id
        except SQLAlchemyError:
            logger.exception(f"Failed to create event '{title}'")
            raise StorageError("Failed to create event")

        logger.info(f"Created event {event_id} '{title}'")
        return EventDTO(
            id=event_id,
            title=title,
            description=description,
            event_date=event_date,
            location=location,
        )
