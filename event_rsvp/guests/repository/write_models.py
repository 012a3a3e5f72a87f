"""Guest write models - insert and delete guests, return DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from event_rsvp.config.database import async_session_manager
from event_rsvp.errors import StorageError
from event_rsvp.guests.dtos import GuestDTO
from event_rsvp.guests.repository.read_models import guest_to_dto
from event_rsvp.models import Guest, GuestStatus

logger = logging.getLogger(__name__)


class GuestWriteModel(ABC):
    @abstractmethod
    async def create_guest(
        self,
        name: str,
        email: str,
        status: GuestStatus,
        phone: str | None = None,
    ) -> GuestDTO:
        """Insert a guest that is not tied to any event. Returns DTO."""
        raise NotImplementedError

    @abstractmethod
    async def delete_guest(self, guest_id: int) -> None:
        """Delete a guest by id. Deleting a missing guest is not an error."""
        raise NotImplementedError


class SqlGuestWriteModel(GuestWriteModel):
    """SQL implementation of guest write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_guest(
        self,
        name: str,
        email: str,
        status: GuestStatus,
        phone: str | None = None,
    ) -> GuestDTO:
        try:
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                guest = Guest(name=name, email=email, phone=phone, status=status)
                session.add(guest)
                await session.flush()
                # created_at is assigned by the database
                await session.refresh(guest)
                return guest_to_dto(guest)
        except SQLAlchemyError:
            logger.exception(f"Failed to create guest {email}")
            raise StorageError("Failed to create guest")

    async def delete_guest(self, guest_id: int) -> None:
        try:
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                await session.execute(delete(Guest).where(Guest.id == guest_id))
        except SQLAlchemyError:
            logger.exception(f"Failed to delete guest {guest_id}")
            raise StorageError("Failed to delete guest")
