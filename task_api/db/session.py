"""Async Session Factory — provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - Tables created from Base.metadata (no migration tooling)
    - Meant for scripts and test fixtures

Design Decisions:
    - Separate from infrastructure/database.py: convenience for non-request contexts
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)

from task_api.db.base import Base


def create_session_factory(
    engine: AsyncEngine,
) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory bound to the given engine."""
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )


async def create_tables(database_url: str) -> AsyncEngine:
    """Create an engine for database_url and ensure all tables exist."""
    import task_api.models  # noqa: F401  (populate Base.metadata)

    engine = create_async_engine(database_url, echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine
