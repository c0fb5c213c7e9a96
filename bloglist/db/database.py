"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import getLogger
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from sqlalchemy import event, inspect, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from bloglist.configs import Settings, file_logger
from bloglist.errors.base import BaseAppError
from bloglist.errors.database import DatabaseConnectionError, DatabaseInitializationError

logger = file_logger(getLogger(__name__))

STATEMENT_TIMEOUT_MS = 30000


def engine_kwargs(settings: Settings) -> dict[str, Any]:
    """
    Build `create_async_engine` keyword arguments for the configured backend.

    Pool sizing and server-side timeouts only apply to PostgreSQL (asyncpg);
    SQLite (aiosqlite) uses SQLAlchemy's defaults.

    Args:
        settings: Application settings.

    Returns:
        dict[str, Any]: Engine keyword arguments.
    """
    kwargs: dict[str, Any] = {"echo": settings.DATABASE_ECHO}
    if settings.DATABASE_URL.startswith("sqlite"):
        return kwargs

    kwargs.update(
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_timeout=settings.POOL_TIMEOUT,
        pool_recycle=settings.POOL_RECYCLE,
        pool_pre_ping=True,
    )
    if settings.DATABASE_URL.startswith("postgresql+asyncpg"):
        kwargs["connect_args"] = {
            "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
            "server_settings": {
                "statement_timeout": str(STATEMENT_TIMEOUT_MS),
                "lock_timeout": str(STATEMENT_TIMEOUT_MS),
            },
        }
    return kwargs


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkout")
    def on_checkout(
        dbapi_connection: object,
        connection_record: object,
        connection_proxy: object,
    ) -> None:
        logger.debug("Connection checked out from pool")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


class Database:
    """
    Storage handle owning the async engine and session factory.

    One instance is opened at application startup, stored on
    ``app.state.database`` and closed on shutdown. Handlers reach it only
    through the `get_session` dependency.
    """

    def __init__(self, settings: Settings) -> None:
        """
        Create the engine and session factory.

        Args:
            settings: Application settings providing the database URL and pool options.
        """
        self.url = settings.DATABASE_URL
        self.engine: AsyncEngine = create_async_engine(self.url, **engine_kwargs(settings))
        if settings.DEBUG:
            _configure_engine_events(self.engine)

        self.session_maker: async_sessionmaker[SQLModelAsyncSession] = async_sessionmaker(
            self.engine,
            class_=SQLModelAsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    async def init(self) -> None:
        """
        Create all tables defined by the SQLModel models.

        Raises:
            DatabaseInitializationError: If the schema cannot be created.
        """
        # Import all models to ensure they are registered
        from bloglist.models import BlogDB, UserDB  # noqa: F401, PLC0415

        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        except Exception as e:
            logger.exception("Failed to initialize database")
            raise DatabaseInitializationError from e
        logger.info("Database initialized successfully!")

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession]:
        """
        Context manager for explicit transaction management.

        Commits on successful exit, rolls back on exception.

        Yields:
            AsyncSession: Database session within a transaction
        """
        async with self.session_maker() as session:
            try:
                yield session
                await session.commit()
            except (BaseAppError, RequestValidationError):
                await session.rollback()
                raise
            except Exception:
                await session.rollback()
                logger.exception("Transaction error")
                raise
            finally:
                await session.close()

    async def has_table(self, table_name: str) -> bool:
        """Return True when `table_name` exists in the connected database."""
        async with self.engine.connect() as conn:
            return await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).has_table(table_name),
            )

    async def ping(self) -> bool:
        """Return True when the database answers a trivial query."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception:
            logger.exception("Database health check failed")
            return False
        return True

    async def close(self) -> None:
        """Dispose of all pooled connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")


def get_database(request: Request) -> Database:
    """
    Return the storage handle opened by the application lifespan.

    Raises:
        DatabaseConnectionError: If the application has no open database.
    """
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None:
        raise DatabaseConnectionError(detail="Database is not initialized")
    return database


async def get_session(request: Request) -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    Each request gets its own session inside a transaction.

    Yields:
        AsyncSession: Database session
    """
    async with get_database(request).transaction() as session:
        yield session
