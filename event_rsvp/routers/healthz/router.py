import logging

from fastapi import APIRouter, Response, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from event_rsvp import __version__
from event_rsvp.config.database import async_session_manager
from event_rsvp.config.settings import settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthCheckResponse(BaseModel):
    status: str
    database: str
    environment: str
    version: str = __version__


async def ping_database() -> bool:
    try:
        async with async_session_manager(auto_commit=False) as session:
            await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.warning(f"Health check could not reach the database: {e}")
        return False
    return True


@router.get("/", response_model=HealthCheckResponse)
async def health_check(response: Response) -> HealthCheckResponse:
    """
    Report whether the API is up and the database answers.
    """
    if await ping_database():
        return HealthCheckResponse(status="healthy", database="ok", environment=settings.ENVIRONMENT)

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthCheckResponse(status="unhealthy", database="unavailable", environment=settings.ENVIRONMENT)
