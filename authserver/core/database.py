#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Database engine and session management.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from authserver.core.config import get_settings


# -----------------------------------------------------------------------------

class Base(DeclarativeBase):
    pass


_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker[AsyncSession]] = None


# -----------------------------------------------------------------------------

def init_db(database_url: Optional[str] = None) -> async_sessionmaker[AsyncSession]:
    """Create the engine and session factory (idempotent per URL)."""
    global _engine, _session_factory
    settings = get_settings()
    url = database_url or settings.database_url
    if _engine is not None and _engine.url.render_as_string(hide_password=False) == url and _session_factory is not None:
        return _session_factory
    _engine = create_async_engine(url, echo=settings.db_echo)
    _session_factory = async_sessionmaker(_engine, class_=AsyncSession, expire_on_commit=False)
    return _session_factory


async def create_all_tables() -> None:
    import authserver.models  # noqa: F401  (registers tables on Base.metadata)

    if _engine is None:
        init_db()
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


# -----------------------------------------------------------------------------

async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — one session per request, committed on success."""
    factory = _session_factory or init_db()
    async with factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


# -----------------------------------------------------------------------------
