"""Async PostgreSQL engine and sessions (asyncpg driver)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from memora.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Args:
        settings: Application settings with database URL and pool sizes

    Returns:
        Async engine, SQL echoed in debug mode
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Sessions keep loaded rows usable after commit; repositories flush
    explicitly, so autoflush is off.

    Args:
        engine: Database engine

    Returns:
        Session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
