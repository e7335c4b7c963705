"""
Async SQLAlchemy engine and session factory builders.

Nothing is created at import time: the application lifespan (or a
test fixture) builds one engine and one sessionmaker and passes them
where they are needed.
"""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from underwriting.core.config import settings


def build_engine(url: str | None = None, **kwargs) -> AsyncEngine:
    """Create an async engine; pool settings apply to server databases only."""
    url = url or settings.DATABASE_URL
    if not url.startswith("sqlite"):
        kwargs.setdefault("pool_size", settings.DATABASE_POOL_SIZE)
        kwargs.setdefault("max_overflow", 10)
        kwargs.setdefault("pool_pre_ping", True)
    return create_async_engine(url, **kwargs)


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def session_scope(
    sessionmaker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session that commits on success and rolls back on error."""
    async with sessionmaker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
