import abc
import logging
from functools import partial

from sqlalchemy import exists, select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from event_rsvp.config.database import async_session_manager, is_missing_column_error
from event_rsvp.errors import SchemaMismatchError, StorageError
from event_rsvp.guests.dtos import GuestDTO
from event_rsvp.guests.repository.filters import GuestFilter
from event_rsvp.models import Guest

logger = logging.getLogger(__name__)


def guest_to_dto(guest: Guest) -> GuestDTO:
    return GuestDTO(
        id=guest.id,
        name=guest.name,
        email=guest.email,
        status=guest.status,
        phone=guest.phone,
        created_at=guest.created_at,
        event_id=guest.event_id,
    )


async def _exists(session: AsyncSession, *criteria) -> bool:
    result = await session.execute(select(exists().where(*criteria)))
    return bool(result.scalar())


async def _rsvp_exists_for_event(session: AsyncSession, event_id: int, email: str) -> bool:
    try:
        async with session.begin_nested():
            return await _exists(session, Guest.event_id == event_id, Guest.email == email)
    except DBAPIError as e:
        if is_missing_column_error(e):
            raise SchemaMismatchError("Database error") from e
        raise


async def rsvp_exists(session: AsyncSession, event_id: int, email: str) -> bool:
    """
    Check whether ``email`` already answered for ``event_id``.

    Against a legacy ``guests`` table without ``event_id`` the check
    falls back to the email alone, across all events.
    """
    try:
        return await _rsvp_exists_for_event(session, event_id, email)
    except SchemaMismatchError:
        logger.warning("guests.event_id is missing, checking email across all events")
        return await _exists(session, Guest.email == email)


class GuestReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_guests(self, guest_filter: GuestFilter) -> list[GuestDTO]:
        """
        Get guests matching the filter, ordered by id.
        """
        raise NotImplementedError


class SqlGuestReadModel(GuestReadModel):
    """SQL implementation of guest read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def list_guests(self, guest_filter: GuestFilter) -> list[GuestDTO]:
        stmt = guest_filter.apply(select(Guest)).order_by(Guest.id)
        try:
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                result = await session.execute(stmt)
                return [guest_to_dto(guest) for guest in result.scalars().all()]
        except SQLAlchemyError:
            logger.exception("Failed to load guests")
            raise StorageError("Failed to load guests")
