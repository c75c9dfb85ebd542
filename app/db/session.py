"""
Database session and engine configuration.

Sets up the async database connection using SQLAlchemy + asyncpg.
"""

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from app.core.config import settings


# When DEBUG=True the engine echoes SQL to the log
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    future=True,
)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Keeps loaded tasks readable after commit
)

# Alias for dependencies
AsyncSessionLocal = async_session_maker


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Get a database session for one request.

    The service layer owns commit/rollback; this only guarantees the
    session is closed when the request is done.

    Usage in a FastAPI endpoint:
        @router.get("/items")
        async def get_items(db: AsyncSession = Depends(get_db)):
            ...
    """
    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()


@asynccontextmanager
async def get_async_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager helper for async DB sessions (used in tests/scripts).

    Does not commit: TaskService commits its own work, and anything
    left uncommitted is rolled back when the session closes.
    """
    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()
