"""
SQLAlchemy async engine and session management

This module provides:
1. Base: declarative base for every ORM model
2. Database: owns an event-loop-aware engine and hands out sessions (DI friendly)
3. create_db_and_tables / drop_db_and_tables for scripts and integration tests

Any SQLAlchemy async URL works. PostgreSQL (asyncpg) in production,
SQLite (aiosqlite) for local runs and integration tests.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


def _engine_kwargs(db_url: str) -> dict[str, Any]:
    if db_url.startswith('sqlite'):
        # In-memory SQLite lives on a single connection
        if ':memory:' in db_url or db_url.rstrip('/').endswith('sqlite+aiosqlite:'):
            return {'poolclass': StaticPool, 'connect_args': {'check_same_thread': False}}
        return {}
    return {
        'pool_size': settings.DB_POOL_SIZE,
        'max_overflow': settings.DB_POOL_MAX_OVERFLOW,
        'pool_timeout': settings.DB_POOL_TIMEOUT,
        'pool_recycle': settings.DB_POOL_RECYCLE,
        'pool_pre_ping': settings.DB_POOL_PRE_PING,
    }


class Database:
    """
    Database class for dependency injection

    Engines are bound to the event loop that created them; when the running
    loop changes (each asyncio.run in scripts, each test) a new engine is made.
    """

    def __init__(self, *, db_url: Optional[str] = None) -> None:
        self._db_url = db_url or settings.DATABASE_URL_ASYNC
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def engine(self) -> AsyncEngine:
        try:
            current_loop: Optional[asyncio.AbstractEventLoop] = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if self._engine is None or (current_loop is not None and self._loop is not current_loop):
            if self._engine is not None:
                Logger.base.warning('🔄 [DB] Event loop changed, recreating engine')
            self._engine = create_async_engine(
                self._db_url, echo=False, future=True, **_engine_kwargs(self._db_url)
            )
            self._session_maker = async_sessionmaker(
                self._engine, class_=AsyncSession, expire_on_commit=False
            )
            self._loop = current_loop
        return self._engine

    def _get_session_maker(self) -> async_sessionmaker[AsyncSession]:
        _ = self.engine  # binds engine and session maker to the running loop
        if self._session_maker is None:
            raise RuntimeError('Session maker not initialized')
        return self._session_maker

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for database sessions

        Note: Automatically handles rollback on exception
        """
        async with self._get_session_maker()() as session:
            yield session

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_maker = None


async def create_db_and_tables(database: Database) -> None:
    """Create database tables if they don't exist"""
    # Import models so they register on Base.metadata
    from src.service.inventory.driven_adapter.model import (  # noqa: F401
        event_model,
        event_section_model,
        ticket_listing_model,
    )
    from src.service.shared_kernel.driven_adapter.model import section_model  # noqa: F401
    from src.service.venue_catalog.driven_adapter.model import venue_model  # noqa: F401

    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    Logger.base.info(f'🏗️ [DB] Tables ready: {sorted(Base.metadata.tables)}')


async def drop_db_and_tables(database: Database) -> None:
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
