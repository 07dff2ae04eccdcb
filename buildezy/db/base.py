"""Async SQLAlchemy engine wrapper, declarative Base, and FastAPI dependency."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from buildezy.core.config import Settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Declarative Base
# ---------------------------------------------------------------------------
class Base(DeclarativeBase):
    """All ORM models inherit from this base."""


# ---------------------------------------------------------------------------
# Connection pool
# ---------------------------------------------------------------------------
class Database:
    """The process-wide connection pool plus its session factory.

    Built once in ``create_app`` and kept on ``app.state.database``; request
    handlers reach it only through :func:`get_db`.
    """

    def __init__(self, url: str | URL, **engine_kwargs):
        self.engine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> Database:
        url = settings.sqlalchemy_url
        kwargs: dict = {
            "pool_pre_ping": True,
            "echo": settings.resolved_log_level == "DEBUG",
        }
        if url.get_backend_name() == "sqlite":
            # SQLite (local dev/tests) doesn't support connection pooling parameters
            kwargs["connect_args"] = {"check_same_thread": False}
        else:
            kwargs["pool_size"] = settings.db_pool_size
            kwargs["max_overflow"] = settings.db_max_overflow
            if settings.database_ssl:
                # Hosted Postgres: encrypt, but don't verify the server certificate
                kwargs["connect_args"] = {"ssl": "require"}
        return cls(url, **kwargs)

    async def ping(self) -> None:
        """Open one pooled connection and run a trivial query."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_tables(self) -> None:
        # Load all ORM models so their tables are registered on Base.metadata
        import buildezy.domain  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------
async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a session from the app's pool; roll back on error."""
    database: Database = request.app.state.database
    async with database.session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
