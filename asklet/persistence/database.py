"""Async engine and session factory for PostgreSQL (asyncpg)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from asklet.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the process-wide engine.

    Connections identify as ``asklet-api`` in ``pg_stat_activity`` and carry
    the configured statement timeout, so a stuck query fails its request
    instead of holding a pooled connection.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args={
            "server_settings": {
                "application_name": "asklet-api",
                "statement_timeout": str(database.statement_timeout_ms),
            }
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    One session, and so one transaction, is opened per request. Vote
    writes, reputation adjustments and acceptance changes made while
    handling a request commit or roll back together.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
