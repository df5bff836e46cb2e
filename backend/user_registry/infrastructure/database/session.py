"""Store client — async SQLAlchemy engine, session factory and schema bootstrap."""

import logging
from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from user_registry.domain.exceptions import StoreError
from user_registry.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


class Database:
    """Explicitly constructed handle to the relational store.

    Lifecycle: ``connect()`` and ``ensure_schema()`` run once before traffic
    is accepted, ``session()`` opens a unit of work per request, and
    ``dispose()`` releases pooled connections on shutdown.
    """

    def __init__(self, database_url: str, *, echo: bool = False):
        self.engine = create_async_engine(
            _get_async_url(database_url),
            echo=echo,
            future=True,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def connect(self) -> None:
        """Verify the store is reachable. Raises StoreError otherwise."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            raise StoreError(f"Database connection failed: {e}") from e
        logger.info("Connected to database (%s)", self.engine.url.get_backend_name())

    async def ensure_schema(self) -> None:
        """Create missing tables. Existing tables are left untouched."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to create users table: {e}") from e
        logger.info("Users table is ready.")

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning("Database ping failed: %s", e)
            return False
        return True

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Yield a session that commits on success and rolls back on any error."""
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_database(request: Request) -> Database:
    """FastAPI dependency — the store client attached to the running app."""
    return request.app.state.database


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request."""
    async with get_database(request).session() as session:
        yield session
