"""
Database connection pool and transaction handling.
"""
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional
import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine

from category_api.config.settings import Settings
from .tables import metadata

logger = logging.getLogger(__name__)


class Database:
    """Owns the async engine (connection pool) and hands out transactions."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.engine: Optional[AsyncEngine] = None

    def _engine_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"echo": self.settings.db_echo}
        if not self.settings.is_sqlite:
            options.update(
                pool_size=self.settings.db_pool_size,
                max_overflow=self.settings.db_max_overflow,
                pool_recycle=self.settings.db_pool_recycle,
                pool_pre_ping=True,
            )
        return options

    async def connect(self) -> None:
        """Create the engine and make sure the schema exists."""
        try:
            self.engine = create_async_engine(self.settings.database_url, **self._engine_options())
            async with self.engine.begin() as conn:
                await conn.run_sync(metadata.create_all)
            logger.info(f"Connected to database: {self.engine.url.render_as_string(hide_password=True)}")
        except Exception as e:
            logger.error(f"Failed to connect to database: {e}")
            raise

    async def disconnect(self) -> None:
        """Dispose of the connection pool."""
        if self.engine is not None:
            await self.engine.dispose()
            self.engine = None
            logger.info("Disconnected from database")

    @property
    def is_connected(self) -> bool:
        """Check if the engine has been created."""
        return self.engine is not None

    async def ping(self) -> bool:
        """Run ``SELECT 1`` for readiness checks."""
        if self.engine is None:
            return False
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return False

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[AsyncConnection]:
        """
        Yield a connection inside an open transaction.

        Commits when the block exits normally. Any exception, cancellation
        included, rolls the transaction back and is re-raised unchanged.
        """
        if self.engine is None:
            raise RuntimeError("Database not connected")

        async with self.engine.connect() as conn:
            tx = await conn.begin()
            try:
                yield conn
            except BaseException as exc:
                await tx.rollback()
                logger.warning(f"Transaction rolled back: {type(exc).__name__}")
                raise
            else:
                await tx.commit()
