"""Async database engine, session factory and table bootstrap.

SQLite (aiosqlite) is the default backend; PostgreSQL works through the
``postgres`` extra by pointing ``DATABASE_URL`` at it.
"""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from ainotes.config import get_settings


def _engine_kwargs(url: str) -> dict[str, Any]:
    if url.startswith("sqlite"):
        # aiosqlite runs the connection on its own thread
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


def build_engine(url: str) -> AsyncEngine:
    return create_async_engine(url, echo=False, **_engine_kwargs(url))


engine = build_engine(get_settings().async_database_url)

async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Declarative base for the notes schema."""


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create any missing tables for the registered models."""
    from ainotes import models  # noqa: F401 - registers Note with Base

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a request-scoped session; commit on success, roll back on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
