from datetime import UTC, datetime

import pytest
from sqlalchemy import func, select

from event_rsvp.config.database import async_session_manager
from event_rsvp.events.features.create_event.router import get_event_write_model
from event_rsvp.events.urls import EVENTS_URL
from event_rsvp.models import Event
from event_rsvp.tests.inmemory_models import InMemoryEventWriteModel


@pytest.fixture
def write_model():
    return InMemoryEventWriteModel()


@pytest.mark.asyncio
async def test_create_event(client_factory, write_model):
    """Test creating an event echoes the normalized input."""
    payload = {
        "title": "Summer Party",
        "description": "Drinks on the roof",
        "event_date": "2025-08-20T18:00:00Z",
        "location": "Rooftop",
    }

    async with client_factory({get_event_write_model: lambda: write_model}) as client:
        response = await client.post(EVENTS_URL, json=payload)

    assert response.status_code == 201
    assert response.json() == {
        "id": 1,
        "title": "Summer Party",
        "description": "Drinks on the roof",
        "event_date": "2025-08-20T18:00:00Z",
        "location": "Rooftop",
        "message": "Event created!",
    }
    assert write_model.created[0].event_date == datetime(2025, 8, 20, 18, 0, tzinfo=UTC)


@pytest.mark.asyncio
async def test_create_event_blank_optionals_are_absent(client_factory, write_model):
    """Test that blank description and location are stored as missing."""
    payload = {"title": "Standup", "description": "", "event_date": "2025-08-20T09:00:00Z", "location": "  "}

    async with client_factory({get_event_write_model: lambda: write_model}) as client:
        response = await client.post(EVENTS_URL, json=payload)

    assert response.status_code == 201
    data = response.json()
    assert "description" not in data
    assert "location" not in data
    assert write_model.created[0].description is None
    assert write_model.created[0].location is None


@pytest.mark.asyncio
async def test_create_event_offset_is_normalized(client_factory, write_model):
    payload = {"title": "Brunch", "event_date": "2025-08-20T11:30:00+02:00"}

    async with client_factory({get_event_write_model: lambda: write_model}) as client:
        response = await client.post(EVENTS_URL, json=payload)

    assert response.status_code == 201
    assert response.json()["event_date"] == "2025-08-20T09:30:00Z"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload,message",
    [
        ({"event_date": "2025-08-20T18:00:00Z"}, "Title is required"),
        ({"title": "", "event_date": "2025-08-20T18:00:00Z"}, "Title is required"),
        ({"title": "Party"}, "Event date is required"),
        ({"title": "Party", "event_date": ""}, "Event date is required"),
    ],
)
async def test_create_event_missing_fields(client_factory, write_model, payload, message):
    async with client_factory({get_event_write_model: lambda: write_model}) as client:
        response = await client.post(EVENTS_URL, json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": message}
    assert write_model.created == []


@pytest.mark.asyncio
async def test_create_event_invalid_date(client_factory, write_model):
    """Test that an unparseable date is rejected with the expected format."""
    payload = {"title": "Party", "event_date": "not-a-date"}

    async with client_factory({get_event_write_model: lambda: write_model}) as client:
        response = await client.post(EVENTS_URL, json=payload)

    assert response.status_code == 400
    assert "2025-08-20T18:00:00Z" in response.json()["error"]
    assert write_model.created == []


@pytest.mark.asyncio
async def test_create_event_invalid_json(client_factory, write_model):
    async with client_factory({get_event_write_model: lambda: write_model}) as client:
        response = await client.post(
            EVENTS_URL, content="{not json", headers={"Content-Type": "application/json"}
        )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON"}


@pytest.mark.asyncio
async def test_create_event_storage_failure(client_factory):
    write_model = InMemoryEventWriteModel(fail=True)
    payload = {"title": "Party", "event_date": "2025-08-20T18:00:00Z"}

    async with client_factory({get_event_write_model: lambda: write_model}) as client:
        response = await client.post(EVENTS_URL, json=payload)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to create event"}


@pytest.mark.asyncio
async def test_create_event_invalid_date_inserts_nothing(client):
    """Test against the SQL write model that a bad date leaves the table empty."""
    response = await client.post(EVENTS_URL, json={"title": "Party", "event_date": "not-a-date"})

    assert response.status_code == 400
    async with async_session_manager() as session:
        count = (await session.execute(select(func.count()).select_from(Event))).scalar_one()
    assert count == 0


@pytest.mark.asyncio
async def test_create_then_list_events(client):
    """Test the SQL-backed round trip through both event endpoints."""
    response = await client.post(
        EVENTS_URL,
        json={"title": "Picnic", "event_date": "2025-06-01T12:00:00Z", "location": "Park"},
    )
    assert response.status_code == 201
    event_id = response.json()["id"]

    response = await client.get(EVENTS_URL)

    assert response.status_code == 200
    events = response.json()
    assert len(events) == 1
    assert events[0]["id"] == event_id
    assert events[0]["event_date"] == "2025-06-01T12:00:00Z"
    assert events[0]["display"] == "Picnic – Park – 01 Jun 25"
    assert events[0]["rsvps"] == 0
    assert "description" not in events[0]
    assert events[0]["created_at"].endswith("Z")
