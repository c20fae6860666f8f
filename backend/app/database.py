"""
Employee Directory Backend - Connection Pool Management
=======================================================

What:  Declarative base, async engine (connection pool) creation, startup
       connectivity probe and shutdown disposal.
How:   init_pool() builds a bounded async engine and proves the store is
       reachable before the app accepts traffic. The engine is handed to the
       gateway explicitly; there is no module-level engine.
Who:   Called from the FastAPI lifespan in main.py.
When:  Once at startup (init_pool) and once at shutdown (dispose_pool).

Connection Pooling Strategy:
    pool_size=5:      Live connections (DB_POOL_SIZE)
    max_overflow=0:   pool_size is a hard cap
    pool_timeout:     Requests suspend this long waiting for a free connection
    pool_pre_ping:    Validates connections before use (catches stale connections)
    pool_recycle=3600: Recycles connections every hour
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from tenacity import (
    RetryError,
    before_sleep_log,
    retry_if_exception_type,
    retry,
    stop_after_attempt,
    wait_exponential,
)

from app.config import Settings
from app.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)

# Failures raised by the driver or pool when the store is unreachable.
# asyncpg raises OSError subclasses (ConnectionRefusedError, socket.gaierror)
# directly from connect, without SQLAlchemy wrapping.
STORE_ERRORS = (SQLAlchemyError, OSError)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares one metadata object, which tests use to create the employee table.
    """
    pass


def create_engine_from_settings(config: Settings) -> AsyncEngine:
    """Builds the async engine without connecting."""
    return create_async_engine(
        config.database_url,
        pool_size=config.db_pool_size,
        max_overflow=0,
        pool_timeout=config.db_pool_timeout,
        pool_pre_ping=config.db_pool_pre_ping,
        pool_recycle=3600,
        echo=config.log_level == "DEBUG",
    )


async def check_connection(engine: AsyncEngine) -> None:
    """Round-trips SELECT 1 through the pool. Raises on failure."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def init_pool(config: Settings) -> AsyncEngine:
    """
    Create the shared connection pool and verify the store is reachable.

    Steps:
        1. Validate configuration (ConfigError if DATABASE_URL is missing)
        2. Build the engine with a bounded pool
        3. Probe with SELECT 1, retried with exponential backoff up to
           db_connect_attempts times (covers a database container that is
           still booting)

    Returns:
        The ready AsyncEngine. The caller owns it and must dispose it.

    Raises:
        ConfigError: required setting missing
        DatabaseConnectionError: probe failed on every attempt
    """
    config.validate_required()

    engine = create_engine_from_settings(config)

    probe = retry(
        retry=retry_if_exception_type(STORE_ERRORS),
        stop=stop_after_attempt(config.db_connect_attempts),
        wait=wait_exponential(multiplier=0.5, max=5),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=False,
    )(check_connection)

    try:
        await probe(engine)
    except RetryError as e:
        await engine.dispose()
        cause = e.last_attempt.exception()
        logger.error(
            "Store unreachable after %d attempt(s): %s",
            config.db_connect_attempts,
            cause,
        )
        raise DatabaseConnectionError(
            context={
                "attempts": config.db_connect_attempts,
                "error_type": type(cause).__name__,
            },
        ) from cause

    logger.info(
        "Connection pool ready (pool_size=%d, timeout=%.0fs)",
        config.db_pool_size,
        config.db_pool_timeout,
    )
    return engine


async def dispose_pool(engine: AsyncEngine) -> None:
    """Gracefully closes all connections in the pool at shutdown."""
    await engine.dispose()
