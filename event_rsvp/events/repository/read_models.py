import abc
import logging
from functools import partial

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from event_rsvp.config.database import async_session_manager
from event_rsvp.errors import StorageError
from event_rsvp.events.dtos import EventDTO
from event_rsvp.models import Event, Guest

logger = logging.getLogger(__name__)


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_events(self) -> list[EventDTO]:
        """
        Get all events with their RSVP counts.
        """
        raise NotImplementedError


class SqlEventReadModel(EventReadModel):
    """SQL implementation of event read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def list_events(self) -> list[EventDTO]:
        """
        Get all events ordered by id.
        A failing RSVP count only zeroes that event's count.
        """
        try:
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                result = await session.execute(select(Event).order_by(Event.id))
                # copy the rows out before any count can roll a savepoint back
                rows = [
                    dict(
                        id=event.id,
                        title=event.title,
                        description=event.description,
                        event_date=event.event_date,
                        location=event.location,
                        created_at=event.created_at,
                    )
                    for event in result.scalars().all()
                ]
                return [
                    EventDTO(**row, rsvps=await self._count_rsvps_or_zero(session, row["id"]))
                    for row in rows
                ]
        except SQLAlchemyError:
            logger.exception("Failed to load events")
            raise StorageError("Failed to load events")

    async def _count_rsvps_or_zero(self, session: AsyncSession, event_id: int) -> int:
        try:
            async with session.begin_nested():
                return await self._count_rsvps(session, event_id)
        except SQLAlchemyError as e:
            logger.warning(f"RSVP count error for event {event_id}: {e}")
            return 0

    async def _count_rsvps(self, session: AsyncSession, event_id: int) -> int:
        result = await session.execute(
            select(func.count()).select_from(Guest).where(Guest.event_id == event_id)
        )
        return result.scalar_one()
