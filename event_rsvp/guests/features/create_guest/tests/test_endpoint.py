import pytest

from event_rsvp.guests.features.create_guest.router import get_guest_write_model
from event_rsvp.guests.urls import GUESTS_URL
from event_rsvp.models import GuestStatus
from event_rsvp.tests.inmemory_models import InMemoryGuestWriteModel


@pytest.fixture
def write_model():
    return InMemoryGuestWriteModel()


@pytest.mark.asyncio
async def test_create_guest(client_factory, write_model):
    payload = {"name": "Jo", "email": "jo@example.com", "phone": "555-0100", "status": "attending"}

    async with client_factory({get_guest_write_model: lambda: write_model}) as client:
        response = await client.post(GUESTS_URL, json=payload)

    assert response.status_code == 201
    assert response.json() == {
        "id": 1,
        "name": "Jo",
        "email": "jo@example.com",
        "phone": "555-0100",
        "status": "attending",
        "created_at": "2025-08-01T12:00:00Z",
    }


@pytest.mark.asyncio
@pytest.mark.parametrize("status", ["maybe", "", None])
async def test_create_guest_unknown_status_is_pending(client_factory, write_model, status):
    payload = {"name": "Jo", "email": "jo@example.com", "status": status}

    async with client_factory({get_guest_write_model: lambda: write_model}) as client:
        response = await client.post(GUESTS_URL, json=payload)

    assert response.status_code == 201
    assert response.json()["status"] == "pending"
    assert write_model.guests[1].status == GuestStatus.PENDING


@pytest.mark.asyncio
async def test_create_guest_blank_phone_is_omitted(client_factory, write_model):
    payload = {"name": "Jo", "email": "jo@example.com", "phone": ""}

    async with client_factory({get_guest_write_model: lambda: write_model}) as client:
        response = await client.post(GUESTS_URL, json=payload)

    assert response.status_code == 201
    assert "phone" not in response.json()
    assert write_model.guests[1].phone is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload,message",
    [
        ({"email": "jo@example.com"}, "Name and email required"),
        ({"name": "Jo", "email": ""}, "Name and email required"),
        ({"name": "Jo", "email": "jo@"}, "Invalid email format"),
        ({"name": "Jo", "email": "@example.com"}, "Invalid email format"),
    ],
)
async def test_create_guest_rejects_bad_contact(client_factory, write_model, payload, message):
    async with client_factory({get_guest_write_model: lambda: write_model}) as client:
        response = await client.post(GUESTS_URL, json=payload)

    assert response.status_code == 400
    assert response.json() == {"error": message}
    assert write_model.guests == {}


@pytest.mark.asyncio
async def test_create_guest_against_sql(client):
    """Test that the SQL write model returns the database-assigned fields."""
    response = await client.post(GUESTS_URL, json={"name": "Jo", "email": "jo@example.com"})

    assert response.status_code == 201
    data = response.json()
    assert data["id"] >= 1
    assert data["status"] == "pending"
    assert data["created_at"].endswith("Z")
    assert "phone" not in data
