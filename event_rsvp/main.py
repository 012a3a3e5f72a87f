import asyncio
import logging
from contextlib import asynccontextmanager

import sentry_sdk
import uvicorn
from alembic import command
from alembic.config import Config
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration

from event_rsvp import __version__
from event_rsvp.config.logging import setup_logging
from event_rsvp.config.settings import settings
from event_rsvp.errors import register_exception_handlers
from event_rsvp.events.routers import router as events_router
from event_rsvp.guests.routers import router as guests_router
from event_rsvp.routers.healthz.router import router as healthz_router

setup_logging()
logger = logging.getLogger(__name__)


async def run_migrations():
    alembic_cfg = Config("alembic.ini")
    await asyncio.to_thread(command.upgrade, alembic_cfg, "head")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        await run_migrations()
        logger.info("Database migrations applied")
    yield


if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )

app = FastAPI(
    title="Event RSVP API",
    description="API for managing events, guests and RSVPs",
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(healthz_router, prefix="/healthz", tags=["Healthz"])
app.include_router(events_router, tags=["Events"])
app.include_router(guests_router, tags=["Guests"])


@app.get("/", tags=["Root"])
async def root():
    return {"message": "Welcome to the Event RSVP API"}


def run():
    uvicorn.run(
        "event_rsvp.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.app_reload,
    )


if __name__ == "__main__":
    run()
