"""
Database engine, session factory and the per-request session dependency.
"""
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from autosales.config import get_settings

settings = get_settings()

# One engine (and connection pool) per process, shared by every request
engine = create_async_engine(
    settings.database_url,
    echo=settings.database_echo,
    pool_pre_ping=True,  # Test connections for liveness when checked out from pool
)

SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()


async def get_db() -> AsyncIterator[AsyncSession]:
    """
    Dependency for FastAPI endpoints that need a database session.
    Creates a new session for each request and closes it when done.
    """
    async with SessionLocal() as session:
        yield session


async def init_db(bind: AsyncEngine = engine) -> None:
    """Create every table that does not exist yet."""
    # Register the tables on Base.metadata
    import autosales.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

