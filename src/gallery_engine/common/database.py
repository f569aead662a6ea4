"""Async database manager for Gallery-Engine (single-DB)."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from gallery_engine.common.config import GallerySettings, get_settings
from gallery_engine.common.models import Base

# Import all model modules so Base.metadata is complete for create_all().
import gallery_engine.artists.models  # noqa: F401
import gallery_engine.artworks.models  # noqa: F401
import gallery_engine.auth.models  # noqa: F401
import gallery_engine.encouragements.models  # noqa: F401
import gallery_engine.inspirations.models  # noqa: F401
import gallery_engine.site_settings.models  # noqa: F401
import gallery_engine.verification.models  # noqa: F401
import gallery_engine.visitors.models  # noqa: F401

logger = logging.getLogger(__name__)


def sqlite_file_path(url: URL) -> Path | None:
    """Return the on-disk path of a SQLite URL, or None for memory/URI databases."""
    if url.get_backend_name() != "sqlite":
        return None
    database = url.database or ""
    if database in ("", ":memory:") or database.startswith("file:"):
        return None
    return Path(database)


class DatabaseManager:
    """Owns the gallery engine and hands out one transaction per ``get_session``."""

    def __init__(self, settings: GallerySettings | None = None):
        self._settings = settings or get_settings()
        self.engine: AsyncEngine | None = None
        self._session_factory: async_sessionmaker[AsyncSession] | None = None

    async def init(self) -> None:
        url = make_url(self._settings.db_url)
        options: dict = {"echo": self._settings.db_echo}
        if url.get_backend_name() == "sqlite":
            path = sqlite_file_path(url)
            if path is not None:
                path.parent.mkdir(parents=True, exist_ok=True)
            # Concurrent visitor and webhook writes wait instead of failing.
            options["connect_args"] = {"timeout": self._settings.db_busy_timeout}
        self.engine = create_async_engine(url, **options)
        self._session_factory = async_sessionmaker(
            self.engine, expire_on_commit=False
        )
        logger.info("Database ready", extra={"backend": url.get_backend_name()})

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """Yield a session; commit when the block exits cleanly, else roll back."""
        if self._session_factory is None:
            raise RuntimeError("DatabaseManager not initialized, call init() first")
        async with self._session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def create_all(self) -> None:
        if self.engine is None:
            raise RuntimeError("DatabaseManager not initialized, call init() first")
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        """True when the database answers a trivial query."""
        if self.engine is None:
            return False
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.exception("Database ping failed")
            return False
        return True

    async def close(self) -> None:
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self._session_factory = None
