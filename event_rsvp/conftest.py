import contextlib
import os

# must be set before the settings module is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SENTRY_DSN"] = ""
os.environ["RUN_MIGRATIONS_ON_STARTUP"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from event_rsvp.config.database import engine  # noqa: E402
from event_rsvp.main import app  # noqa: E402
from event_rsvp.models import BaseModel  # noqa: E402


@pytest.fixture
async def database():
    """Fresh in-memory schema for each test."""
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    yield engine

    # dropping the only connection discards the in-memory database
    await engine.dispose()


@pytest.fixture
def client_factory(database):
    """Build a test client with the given dependency overrides applied."""

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None):
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
        finally:
            app.dependency_overrides.clear()

    return factory


@pytest.fixture
async def client(client_factory):
    """Create a test client backed by the SQL read and write models."""
    async with client_factory() as ac:
        yield ac
