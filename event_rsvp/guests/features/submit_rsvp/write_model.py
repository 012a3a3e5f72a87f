"""Write model for RSVP submissions.

An RSVP inserts a guest row tied to the event. At most one RSVP per
event and email is accepted: the application checks first and the
``uq_guests_event_email`` constraint catches submissions that race
past the check.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from event_rsvp.config.database import async_session_manager, is_unique_violation
from event_rsvp.errors import StorageError
from event_rsvp.guests.dtos import RSVPAlreadyExistsError, RSVPSubmissionDTO
from event_rsvp.guests.repository.read_models import rsvp_exists
from event_rsvp.models import Guest

logger = logging.getLogger(__name__)


class RSVPWriteModel(ABC):
    @abstractmethod
    async def submit_rsvp(self, event_id: int, rsvp: RSVPSubmissionDTO) -> None:
        """
        Store an RSVP for an event.
        Raises RSVPAlreadyExistsError if the email already answered.
        """
        raise NotImplementedError


class SqlRSVPWriteModel(RSVPWriteModel):
    """SQL implementation of RSVP write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def submit_rsvp(self, event_id: int, rsvp: RSVPSubmissionDTO) -> None:
        try:
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                # 1. Reject a second answer from the same email
                try:
                    already_answered = await rsvp_exists(session, event_id, rsvp.email)
                except SQLAlchemyError:
                    logger.exception(f"Duplicate check failed for event {event_id}")
                    raise StorageError("Database error")
                if already_answered:
                    raise RSVPAlreadyExistsError(event_id, rsvp.email)

                # 2. Insert the guest
                session.add(
                    Guest(
                        event_id=event_id,
                        name=rsvp.name,
                        email=rsvp.email,
                        phone=rsvp.phone,
                        status=rsvp.status,
                        notes=rsvp.notes,
                        plus_ones=rsvp.plus_ones,
                        dietary_restrictions=rsvp.dietary_restrictions,
                    )
                )
                await session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise RSVPAlreadyExistsError(event_id, rsvp.email) from e
            logger.exception(f"Insert failed for RSVP to event {event_id}")
            raise StorageError("Failed to save RSVP")
        except SQLAlchemyError:
            logger.exception(f"Insert failed for RSVP to event {event_id}")
            raise StorageError("Failed to save RSVP")

        logger.info(f"Saved RSVP for event {event_id} ({rsvp.status.value})")
