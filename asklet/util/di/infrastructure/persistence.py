"""Persistence component: PostgreSQL engine, request sessions and repositories."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from asklet.config import Settings
from asklet.domain.repository import (
    AnswerRepository,
    NotificationRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
)
from asklet.persistence.database import create_engine, create_session_factory
from asklet.persistence.repository import (
    PostgresAnswerRepository,
    PostgresNotificationRepository,
    PostgresQuestionRepository,
    PostgresTagRepository,
    PostgresUserRepository,
)
from asklet.util.di.base import ProviderBase
from asklet.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base; tests swap in in-memory repositories."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by PostgreSQL, one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Engine for the container's lifetime; disposed when it closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request session, committed when the request scope closes.

        A vote and its reputation change, or an acceptance sweep and its
        reputation changes, therefore land together or not at all.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rolled back", error=str(e))
                await session.rollback()
                raise

    users = provide(PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST)
    questions = provide(
        PostgresQuestionRepository, provides=QuestionRepository, scope=Scope.REQUEST
    )
    answers = provide(
        PostgresAnswerRepository, provides=AnswerRepository, scope=Scope.REQUEST
    )
    notifications = provide(
        PostgresNotificationRepository,
        provides=NotificationRepository,
        scope=Scope.REQUEST,
    )
    tags = provide(PostgresTagRepository, provides=TagRepository, scope=Scope.REQUEST)
