"""Async engine and session management for the ``documents`` table.

One engine per process, created lazily from settings. ``init_db`` is run
by the app lifespan and by ``scripts/init_db.py``.
"""

import logging

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

from docfill.core.config import Settings, get_settings

logger = logging.getLogger(__name__)


# Global engine and session maker
_engine: AsyncEngine | None = None
_async_session_maker: async_sessionmaker[AsyncSession] | None = None


def get_engine(settings: Settings | None = None) -> AsyncEngine:
    """Return the process engine, creating it on first use.

    SQLite URLs get the driver's default pool; server databases get a
    sized connection pool.
    """
    global _engine

    if _engine is None:
        settings = settings or get_settings()

        options: dict = {"echo": settings.log_level == "DEBUG", "pool_pre_ping": True}
        if not settings.uses_sqlite:
            options.update(pool_size=10, max_overflow=20)

        try:
            _engine = create_async_engine(settings.database_url, **options)
        except Exception as e:
            logger.error(f"Failed to create database engine: {e}", exc_info=True)
            raise

        logger.info(f"Database engine created for {_engine.url.render_as_string(hide_password=True)}")

    return _engine


def get_session_maker(settings: Settings | None = None) -> async_sessionmaker[AsyncSession]:
    """Return the session factory bound to the process engine."""
    global _async_session_maker

    if _async_session_maker is None:
        _async_session_maker = async_sessionmaker(
            get_engine(settings),
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    return _async_session_maker


async def create_all_tables(settings: Settings | None = None) -> None:
    # Registers DocumentRecord with the metadata
    from docfill.db import models  # noqa: F401

    async with get_engine(settings).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    logger.info("Database tables created")


async def drop_all_tables(settings: Settings | None = None) -> None:
    """Drop every docfill table. All stored documents are lost."""
    from docfill.db import models  # noqa: F401

    logger.warning("Dropping all database tables...")

    async with get_engine(settings).begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)

    logger.warning("All database tables dropped")


async def init_db(settings: Settings | None = None) -> None:
    """Create the docfill tables if they do not exist yet.

    The table only ever holds uploaded documents and their clones. The
    built-in variable templates are served by the template catalog and are
    never written here.

    Args:
        settings: Optional settings. If None, uses global settings.
    """
    try:
        await create_all_tables(settings)
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}", exc_info=True)
        raise


async def close_db() -> None:
    """Dispose of the engine so the next use starts a fresh pool."""
    global _engine, _async_session_maker

    if _engine is None:
        return

    await _engine.dispose()
    _engine = None
    _async_session_maker = None
    logger.info("Database engine closed")
