"""Database connection and session management.

This module provides database connection management using SQLAlchemy's
async engine and session handling. Repositories receive the session and
only flush; the session owner commits once per unit of work.

Supported URLs:
- postgresql+asyncpg://...: pooled connections
- sqlite+aiosqlite:///path: one connection per checkout (NullPool)
- sqlite+aiosqlite:///:memory:: single shared connection (StaticPool)
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool, StaticPool


def _engine_options(
    database_url: str, pool_size: int, max_overflow: int
) -> dict[str, Any]:
    """Pick pool and connect arguments for the backend in the URL."""
    if database_url.startswith("sqlite"):
        if ":memory:" in database_url or database_url.endswith("://"):
            return {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }
        return {"poolclass": NullPool}

    options: dict[str, Any] = {
        "pool_pre_ping": True,  # Verify connections before use
        "pool_size": pool_size,
        "max_overflow": max_overflow,
    }
    if "postgresql" in database_url:
        options["connect_args"] = {
            "server_settings": {"jit": "off"},
            "command_timeout": 60,
            "timeout": 30,
        }
    return options


class Database:
    """Database connection and session management.

    Usage:
        db = Database("sqlite+aiosqlite:///./gateway.db")
        async with db.get_session() as session:
            repo = OperationRepository(session)
            await repo.save(operation)
            # Commits when the context exits, rolls back on error
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        """Initialize database with connection parameters.

        Args:
            database_url: Database connection URL.
            echo: If True, log all SQL statements.
            pool_size: Pooled connections (ignored for SQLite).
            max_overflow: Overflow connections (ignored for SQLite).
        """
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            echo=echo,
            **_engine_options(database_url, pool_size, max_overflow),
        )

        self.async_session = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional database session.

        - Commits on successful exit
        - Rolls back on exception (and re-raises)
        - Always closes the session

        Yields:
            AsyncSession: Database session for one unit of work.
        """
        async with self.async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def create_all(self) -> None:
        """Create all catalog tables.

        Warning: For development and tests only. Production uses Alembic.
        """
        # Register every model on the metadata
        import src.infrastructure.persistence.models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        """Drop all catalog tables. Only use for testing."""
        import src.infrastructure.persistence.models  # noqa: F401
        from src.infrastructure.persistence.base import BaseModel

        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        """Close all database connections."""
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Check if database connection is working.

        Returns:
            bool: True if a trivial query succeeds, False otherwise.
        """
        try:
            async with self.get_session() as session:
                await session.execute(text("SELECT 1"))
                return True
        except SQLAlchemyError:
            return False
