"""Repository providers.

``PersistenceProvider`` is the swappable "persistence" component: the
application runs on the PostgreSQL side defined here, and the test suite
registers an in-memory side.
"""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import Settings
from forum.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from forum.persistence.database import create_engine, create_session_factory
from forum.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresUserRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Where users, posts and comments are stored."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL storage: one pooled engine, one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def sessions(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def transaction(
        self, sessions: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """A session whose work commits when the request finishes cleanly.

        Any exception escaping the request rolls everything back, so a
        comment and the bump of its post's ``updated_at`` land together.
        """
        async with sessions() as session, session.begin():
            yield session

    users = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    posts = provide(
        PostgresPostRepository, provides=PostRepository, scope=Scope.REQUEST
    )
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
