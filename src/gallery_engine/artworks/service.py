"""Artwork CRUD service, always scoped to one artist id."""

import logging
import secrets
import string
import time
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_engine.artworks.models import ArtworkModel
from gallery_engine.common.exceptions import ArtworkNotFoundError
from gallery_engine.tenancy.scoping import require_artist_id

logger = logging.getLogger(__name__)

_BASE36 = string.digits + string.ascii_lowercase

_MUTABLE_FIELDS = (
    "title", "year", "month", "dimensions", "medium",
    "image_url", "description", "price", "artist_name",
)

# Columns an update may reset to NULL.
_NULLABLE_FIELDS = frozenset({"month", "description", "price", "artist_name"})


def generate_artwork_id() -> str:
    """``<epoch-ms>-<9 base36 chars>``, sortable by creation time."""
    suffix = "".join(secrets.choice(_BASE36) for _ in range(9))
    return f"{int(time.time() * 1000)}-{suffix}"


class ArtworkService:
    """Artwork operations. Every query filters on ``artist_id``."""

    async def list_artworks(
        self, session: AsyncSession, artist_id: str
    ) -> list[ArtworkModel]:
        artist_id = require_artist_id(artist_id)
        result = await session.execute(
            select(ArtworkModel)
            .where(ArtworkModel.artist_id == artist_id)
            .order_by(ArtworkModel.created_at.desc(), ArtworkModel.id.desc())
        )
        artworks = list(result.scalars().all())
        logger.debug("Fetched %d artworks for %s", len(artworks), artist_id)
        return artworks

    async def get_artwork(
        self, session: AsyncSession, artist_id: str, artwork_id: str
    ) -> ArtworkModel | None:
        artist_id = require_artist_id(artist_id)
        result = await session.execute(
            select(ArtworkModel).where(
                ArtworkModel.id == artwork_id,
                ArtworkModel.artist_id == artist_id,
            )
        )
        return result.scalar_one_or_none()

    async def add_artwork(
        self, session: AsyncSession, artist_id: str, **fields: Any
    ) -> ArtworkModel:
        artist_id = require_artist_id(artist_id)
        artwork_id = fields.pop("id", None) or generate_artwork_id()
        # The tenant always comes from the argument, never from the payload.
        fields.pop("artist_id", None)
        artwork = ArtworkModel(
            id=artwork_id,
            artist_id=artist_id,
            **{k: v for k, v in fields.items() if k in _MUTABLE_FIELDS},
        )
        session.add(artwork)
        await session.flush()
        logger.info("Artwork added", extra={"artist_id": artist_id, "artwork_id": artwork_id})
        return artwork

    async def update_artwork(
        self, session: AsyncSession, artist_id: str, artwork_id: str, **updates: Any
    ) -> ArtworkModel:
        artwork = await self.get_artwork(session, artist_id, artwork_id)
        if artwork is None:
            raise ArtworkNotFoundError()
        for field in _MUTABLE_FIELDS:
            if field not in updates:
                continue
            value = updates[field]
            if value is None and field not in _NULLABLE_FIELDS:
                continue
            setattr(artwork, field, value)
        await session.flush()
        return artwork

    async def delete_artwork(
        self, session: AsyncSession, artist_id: str, artwork_id: str
    ) -> None:
        artwork = await self.get_artwork(session, artist_id, artwork_id)
        if artwork is None:
            raise ArtworkNotFoundError()
        await session.delete(artwork)
        await session.flush()
        logger.info("Artwork deleted", extra={"artist_id": artist_id, "artwork_id": artwork_id})

    async def recent_artworks(
        self, session: AsyncSession, limit: int = 5
    ) -> list[ArtworkModel]:
        """Newest artworks across all galleries, for the network feed."""
        result = await session.execute(
            select(ArtworkModel).order_by(ArtworkModel.created_at.desc()).limit(limit)
        )
        return list(result.scalars().all())

    async def delete_all_for_artist(self, session: AsyncSession, artist_id: str) -> int:
        artist_id = require_artist_id(artist_id)
        result = await session.execute(
            delete(ArtworkModel).where(ArtworkModel.artist_id == artist_id)
        )
        return result.rowcount or 0
