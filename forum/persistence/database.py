"""PostgreSQL engine and session factory."""

import logfire
from sqlalchemy import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forum.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the pooled asyncpg engine described by ``settings.database``.

    Connections are pinged on checkout so a restarted database does not
    surface as errors on the first requests afterwards.
    """
    url = make_url(settings.database_url)
    engine = create_async_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": {"application_name": "forum-api"}},
    )
    logfire.info(
        "Database engine created",
        url=url.render_as_string(hide_password=True),
        pool_size=settings.database.pool_size,
    )
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions that leave loaded rows usable after commit.

    Repositories map rows to domain models before returning, so expiring
    them on commit would only force needless reloads.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
