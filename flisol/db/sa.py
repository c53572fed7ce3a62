from __future__ import annotations

import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from flisol import config


logger = logging.getLogger("flisol.db")

_engine: Optional[AsyncEngine] = None
_sessionmaker: Optional[async_sessionmaker[AsyncSession]] = None

_PG_SCHEMES = ("postgresql+asyncpg://", "postgresql://", "postgres://")


def async_dsn(dsn: str | None) -> str:
    """Normalize a CMS database DSN to the asyncpg dialect."""
    if not dsn:
        raise RuntimeError("DATABASE_URL is not configured")
    for scheme in _PG_SCHEMES:
        if dsn.startswith(scheme):
            return "postgresql+asyncpg://" + dsn[len(scheme):]
    raise ValueError(f"Unsupported DATABASE_URL scheme: {dsn.split('://', 1)[0]}")


async def init_sa_engine() -> None:
    global _engine, _sessionmaker
    if _engine is None:
        _engine = create_async_engine(
            async_dsn(config.DB_DSN),
            pool_pre_ping=True,
            pool_size=config.DB_POOL_SIZE,
            max_overflow=config.DB_MAX_OVERFLOW,
            # every connection is opened read only; this service never writes
            connect_args={
                "server_settings": {
                    "default_transaction_read_only": "on",
                    "application_name": config.DB_APPLICATION_NAME,
                }
            },
        )
        _sessionmaker = async_sessionmaker(bind=_engine, expire_on_commit=False, autoflush=False)
        logger.info("Content store engine ready", extra={"event": "db_engine_ready", "pool_size": config.DB_POOL_SIZE})


async def close_sa_engine() -> None:
    global _engine, _sessionmaker
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _sessionmaker = None
        logger.info("Content store engine disposed", extra={"event": "db_engine_disposed"})


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request, returned to the pool however the request ends."""
    if _sessionmaker is None:
        raise RuntimeError("Content store engine is not initialized. Call init_sa_engine() first.")
    session = _sessionmaker()
    try:
        yield session
    finally:
        await session.close()
