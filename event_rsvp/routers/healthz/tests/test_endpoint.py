import contextlib
import importlib

import pytest
from sqlalchemy.exc import OperationalError

from event_rsvp import __version__
from event_rsvp.config.settings import settings


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/healthz/")

    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "database": "ok",
        "environment": settings.ENVIRONMENT,
        "version": __version__,
    }


@contextlib.asynccontextmanager
async def unreachable_session(auto_commit=True, session_overwrite=None):
    raise OperationalError("SELECT 1", {}, Exception("connection refused"))
    yield


@pytest.mark.asyncio
async def test_health_check_database_down(client, monkeypatch):
    healthz_router = importlib.import_module("event_rsvp.routers.healthz.router")
    monkeypatch.setattr(healthz_router, "async_session_manager", unreachable_session)

    response = await client.get("/healthz/")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
    assert response.json()["database"] == "unavailable"


@pytest.mark.asyncio
async def test_root(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Welcome to the Event RSVP API"}
