"""
Database configuration and session management

Used only by the relational storage backend. Engines are created on demand
so the in-memory backend never needs a DATABASE_URL.
"""
from contextlib import asynccontextmanager
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from motoparts.core.config import settings

Base = declarative_base()


def _pool_config(database_url: str) -> dict:
    """Connection pool settings for the given URL."""
    # SQLite (tests, local dev) picks its own pool class
    if database_url.startswith("sqlite"):
        return {}

    if settings.is_production:
        return {
            "pool_size": settings.DB_POOL_SIZE,
            "max_overflow": settings.DB_MAX_OVERFLOW,
            "pool_recycle": settings.DB_POOL_RECYCLE,
            "pool_pre_ping": True,  # Verify connections before use
        }

    return {
        "pool_size": 2,
        "max_overflow": 5,
        "pool_pre_ping": True,
    }


def create_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """Create an async engine for DATABASE_URL (or an explicit URL)."""
    url = database_url or settings.DATABASE_URL
    if not url:
        raise RuntimeError("DATABASE_URL is not configured")

    return create_async_engine(
        url,
        echo=settings.DEBUG,
        future=True,
        **_pool_config(url),
    )


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """Create every table registered on Base (no-op for existing tables)."""
    # Register models with the metadata
    import motoparts.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_tables(engine: AsyncEngine) -> None:
    import motoparts.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@asynccontextmanager
async def get_db_session(sessionmaker: async_sessionmaker):
    """
    Context manager for a database session.

    Commits on a clean exit, rolls back on any exception.

    Usage:
        async with get_db_session(sessionmaker) as db:
            result = await db.execute(...)
    """
    async with sessionmaker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
