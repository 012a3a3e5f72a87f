import contextlib
from collections.abc import AsyncIterator

from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from event_rsvp.config.settings import settings

UNDEFINED_COLUMN_SQLSTATE = "42703"
UNIQUE_VIOLATION_SQLSTATE = "23505"


def create_engine(url: str):
    url = str(url)
    connect_args = {}
    engine_kwargs = {}
    if "sqlite" in url:
        connect_args = {"timeout": 15}
        if ":memory:" in url or url.endswith("://"):
            # every session has to see the same in-memory database
            engine_kwargs["poolclass"] = StaticPool
    return create_async_engine(
        url,
        echo=settings.log_db,
        connect_args=connect_args,
        **engine_kwargs,
    )


engine = create_engine(settings.database_url)

async_session_maker = async_sessionmaker(engine, expire_on_commit=False)


@contextlib.asynccontextmanager
async def async_session_manager(
    auto_commit=True, session_overwrite: AsyncSession | None = None
) -> AsyncIterator[AsyncSession]:
    if session_overwrite:
        yield session_overwrite
    else:
        async with async_session_maker() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                raise e
            else:
                if auto_commit:
                    await session.commit()


def _sqlstate(exc: DBAPIError) -> str | None:
    for err in (exc.orig, getattr(exc.orig, "__cause__", None)):
        if err is None:
            continue
        code = getattr(err, "sqlstate", None) or getattr(err, "pgcode", None)
        if code:
            return code
    return None


def is_missing_column_error(exc: DBAPIError) -> bool:
    """Whether the driver reported a reference to a column the table lacks."""
    if _sqlstate(exc) == UNDEFINED_COLUMN_SQLSTATE:
        return True
    # sqlite carries no SQLSTATE
    return "no such column" in str(exc.orig)


def is_unique_violation(exc: DBAPIError) -> bool:
    if _sqlstate(exc) == UNIQUE_VIOLATION_SQLSTATE:
        return True
    return "UNIQUE constraint failed" in str(exc.orig)
