"""
Database engine and session management.

One AsyncSession per request; the session is the unit of work.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.core.config import settings
from app.models import Base


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine. In-memory SQLite shares a single connection."""
    if url.startswith("sqlite") and ":memory:" in url:
        return create_async_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_async_engine(url, echo=echo, pool_pre_ping=True)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=bind, expire_on_commit=False, autoflush=False)


engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
SessionLocal = build_sessionmaker(engine)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Yield a session for the duration of a request.

    Commits if the handler returns normally, rolls back on any exception,
    so every field and relation change of a request lands together or not at all.
    """
    async with SessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def init_models(bind: AsyncEngine | None = None) -> None:
    """Create all tables. Used for SQLite dev databases and tests; Alembic owns Postgres."""
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
