"""
Database Configuration and Session Management

Async SQLAlchemy engine and session management. The engine is created
once at startup by `init_db()` and disposed by `close_db()`.
"""

from typing import AsyncGenerator, Optional
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
    AsyncEngine
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool
from sqlalchemy import text

from jobboard.core.config import get_settings
from jobboard.utils.logger import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""
    pass


class DatabaseManager:
    """Database connection and session management."""

    def __init__(self) -> None:
        """Initialize database manager."""
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        """Get database engine."""
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call init_db() first.")
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """Get session factory."""
        if self._session_factory is None:
            raise RuntimeError("Database not initialized. Call init_db() first.")
        return self._session_factory

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    async def init_database(self, database_url: Optional[str] = None) -> None:
        """Initialize database connections."""
        settings = get_settings()
        url = database_url or settings.DATABASE_URL

        try:
            engine_kwargs = {
                "echo": settings.DEBUG,
            }

            # SQLite-specific configuration
            if url.startswith("sqlite"):
                engine_kwargs["poolclass"] = StaticPool
                engine_kwargs["connect_args"] = {"check_same_thread": False}
            else:
                engine_kwargs["pool_size"] = settings.DATABASE_POOL_SIZE
                engine_kwargs["max_overflow"] = settings.DATABASE_MAX_OVERFLOW
                engine_kwargs["pool_pre_ping"] = True

            self._engine = create_async_engine(url, **engine_kwargs)

            self._session_factory = async_sessionmaker(
                bind=self._engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
                autocommit=False,
            )

            await self._test_database_connection()
            logger.info("Database connection initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize database: {e}")
            raise

    async def _test_database_connection(self) -> None:
        """Test database connection."""
        async with self.engine.begin() as conn:
            await conn.execute(text("SELECT 1"))

    async def create_tables(self) -> None:
        """Create database tables."""
        # Models must be imported so their tables are registered on Base
        from jobboard import models  # noqa: F401

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            logger.info("Database tables created successfully")
        except Exception as e:
            logger.error(f"Failed to create database tables: {e}")
            raise

    async def drop_tables(self) -> None:
        """Drop all database tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def check_health(self) -> bool:
        """Return True if the database answers a trivial query."""
        try:
            await self._test_database_connection()
            return True
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return False

    async def close_connections(self) -> None:
        """Close database connections."""
        if self._engine:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
            logger.info("Database engine disposed")


# Global database manager instance
db_manager = DatabaseManager()


async def init_db() -> None:
    """Initialize database connections and create tables."""
    await db_manager.init_database()
    await db_manager.create_tables()


async def close_db() -> None:
    """Dispose of the database engine."""
    await db_manager.close_connections()


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency to get database session.

    Yields:
        AsyncSession: Database session
    """
    async with db_manager.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def get_db_session_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Context manager for database session.

    Yields:
        AsyncSession: Database session
    """
    async with db_manager.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
