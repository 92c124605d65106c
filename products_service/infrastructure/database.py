"""Database configuration and session management.

Provides the async SQLAlchemy engine, session factory and the per-request
session dependency. The engine is built once at application startup and
kept on ``app.state``.
"""

from collections.abc import AsyncGenerator

import structlog
from fastapi import Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

logger = structlog.get_logger()

# Base class for models
Base = declarative_base()


class Database:
    """Process-wide handle to the product store.

    Owns the engine (connection pool) and the session factory.

    Example usage:
        database = Database("sqlite+aiosqlite:///./products.db")
        await database.connect()
        async with database.session_factory() as session:
            ...
        await database.disconnect()
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        """Initialize engine and session factory.

        Args:
            url: SQLAlchemy async database URL.
            echo: Whether to log emitted SQL.
        """
        self.url = url
        self.engine: AsyncEngine = create_async_engine(
            url,
            echo=echo,
            pool_pre_ping=True,
        )
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def connect(self, create_tables: bool = False) -> None:
        """Open a first connection to verify the store is reachable.

        Args:
            create_tables: Whether to create missing tables.
        """
        async with self.engine.begin() as conn:
            if create_tables:
                await conn.run_sync(Base.metadata.create_all)
            await conn.execute(text("SELECT 1"))

        logger.info("Database connected", created_tables=create_tables)

    async def ping(self) -> bool:
        """Check database connectivity.

        Returns:
            True if a trivial query succeeds.
        """
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Database ping failed", error=str(e))
            return False
        return True

    async def disconnect(self) -> None:
        """Dispose of the connection pool."""
        await self.engine.dispose()
        logger.info("Database disconnected")


def get_database(request: Request) -> Database:
    """Get the database handle created at startup."""
    return request.app.state.database


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session.

    Commits when the handler succeeds and rolls back otherwise.

    Yields:
        AsyncSession for database operations.
    """
    database = get_database(request)
    async with database.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
