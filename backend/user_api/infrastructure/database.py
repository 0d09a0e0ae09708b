"""Database Session Manager — async connection pool with automatic rollback and health checks.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - Connection pool uses pool_pre_ping for stale connection detection
    - All SQLAlchemy exceptions and raw driver bind errors (OverflowError,
      ValueError) mapped to PersistenceError kinds (core/errors.py)
    - PersistenceError raised inside a session passes through after rollback

Design Decisions:
    - No module-level singleton: the app lifespan constructs one manager and
      stores it on app.state (see main.py)
    - expire_on_commit=False: returned rows stay readable after the session closes
    - Pool sizing only applied to server databases; SQLite uses the dialect's default pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import text

from user_api.core.domain_types import PersistenceErrorKind
from user_api.core.errors import PersistenceError
from user_api.db.base import Base
from user_api import models  # noqa: F401

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self._bind(create_async_engine(database_url, **engine_kwargs))

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        """Wrap an existing engine (tests, scripts)."""
        manager = cls.__new__(cls)
        manager._bind(engine)
        return manager

    def _bind(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except PersistenceError:
            await session.rollback()
            raise
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise PersistenceError(
                PersistenceErrorKind.CONSTRAINT,
                "Integrity constraint violated", "commit",
            ) from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise PersistenceError(
                PersistenceErrorKind.CONNECTION,
                "Connection or operational error", "execute",
            ) from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise PersistenceError(
                PersistenceErrorKind.INVALID_DATA,
                "Database driver error", "query",
            ) from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise PersistenceError(
                PersistenceErrorKind.UNKNOWN,
                "Database operation failed", "unknown",
            ) from e
        except (OverflowError, ValueError) as e:
            # unwrapped driver bind errors, e.g. SQLite integer overflow
            await session.rollback()
            logger.error(f"DB parameter error: {e}")
            raise PersistenceError(
                PersistenceErrorKind.INVALID_DATA,
                "Parameter cannot be bound", "bind",
            ) from e
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create all tables known to Base.metadata (no-op for existing tables)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    async def health_check(self) -> bool:
        """Check database connectivity (used by the readiness endpoint)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
