"""Database Session Manager - async connection pool, rollback, and error translation.

Invariants:
    - Every session rolls back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - Every SQLAlchemy exception raised inside storage_errors() surfaces as StorageError
    - close_db() disposes the engine; the pool is closed before process exit

Design Decisions:
    - Singleton db_manager initialized on startup: FastAPI lifespan manages lifecycle
    - expire_on_commit=False: rows stay readable after commit for serialization
    - Error translation at the statement call site, not in get_db: exceptions
      raised there reach the global handlers before the dependency exits
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy import text

from matchfeed.core.errors import StorageError

logger = logging.getLogger(__name__)


def _driver_message(exc: SQLAlchemyError) -> str:
    """Raw message from the DB driver, without SQLAlchemy's statement echo."""
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig).strip() or exc.__class__.__name__
    return str(exc).split("\n", 1)[0]


@asynccontextmanager
async def storage_errors(
    db: AsyncSession, operation: str,
) -> AsyncGenerator[None, None]:
    """Roll back and re-raise any SQLAlchemy failure as StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        message = _driver_message(e)
        logger.error(
            f"DB {operation} failed: {message}",
            extra={"operation": operation, "error_code": "STORAGE_ERROR"},
        )
        raise StorageError(message, operation) from e


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        self.engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
        )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs):
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)


async def close_db() -> None:
    """Dispose the engine and drop the singleton (shutdown)."""
    global db_manager
    if db_manager is None:
        return
    await db_manager.close()
    db_manager = None
    logger.info("Database connection pool closed")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    if not db_manager:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
