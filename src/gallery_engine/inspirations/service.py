"""Inspiration records for the artist's studio, scoped to one artist id.

Image bytes live in external storage; this service keeps the URLs, the
extracted colour palette and free-form notes (``metadata``).
"""

import logging
from typing import Any, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_engine.common.exceptions import (
    DuplicateInspirationError,
    InspirationNotFoundError,
)
from gallery_engine.common.models import generate_uuid
from gallery_engine.inspirations.models import InspirationModel
from gallery_engine.tenancy.scoping import require_artist_id

logger = logging.getLogger(__name__)


class InspirationService:
    async def list_inspirations(
        self, session: AsyncSession, artist_id: str
    ) -> list[InspirationModel]:
        artist_id = require_artist_id(artist_id)
        result = await session.execute(
            select(InspirationModel)
            .where(InspirationModel.artist_id == artist_id)
            .order_by(InspirationModel.created_at.desc(), InspirationModel.id.desc())
        )
        return list(result.scalars().all())

    async def get_inspiration(
        self, session: AsyncSession, artist_id: str, inspiration_id: str
    ) -> InspirationModel | None:
        artist_id = require_artist_id(artist_id)
        result = await session.execute(
            select(InspirationModel).where(
                InspirationModel.id == inspiration_id,
                InspirationModel.artist_id == artist_id,
            )
        )
        return result.scalar_one_or_none()

    async def create_inspiration(
        self,
        session: AsyncSession,
        artist_id: str,
        image_url: str,
        blur_image_url: str = "",
        original_image_url: Optional[str] = None,
        color_palette: Optional[list[str]] = None,
        metadata: Optional[dict[str, Any]] = None,
        inspiration_id: Optional[str] = None,
    ) -> InspirationModel:
        """Record an already-uploaded inspiration.

        When an original image is supplied it becomes the main ``image_url``
        and is also noted in the metadata as ``original_image_url``.
        """
        artist_id = require_artist_id(artist_id)
        if inspiration_id and await session.get(InspirationModel, inspiration_id):
            raise DuplicateInspirationError()
        metadata = dict(metadata or {})
        if original_image_url:
            metadata["original_image_url"] = original_image_url
            image_url = original_image_url

        inspiration = InspirationModel(
            id=inspiration_id or generate_uuid(),
            artist_id=artist_id,
            image_url=image_url,
            blur_image_url=blur_image_url or image_url,
            color_palette=list(color_palette or []),
            metadata_=metadata,
        )
        session.add(inspiration)
        await session.flush()
        logger.info(
            "Inspiration saved",
            extra={"artist_id": artist_id, "inspiration_id": inspiration.id},
        )
        return inspiration

    async def update_metadata(
        self,
        session: AsyncSession,
        artist_id: str,
        inspiration_id: str,
        metadata: dict[str, Any],
    ) -> InspirationModel:
        """Replace the notes of one inspiration."""
        inspiration = await self.get_inspiration(session, artist_id, inspiration_id)
        if inspiration is None:
            raise InspirationNotFoundError()
        inspiration.metadata_ = dict(metadata)
        await session.flush()
        return inspiration

    async def delete_inspiration(
        self, session: AsyncSession, artist_id: str, inspiration_id: str
    ) -> None:
        inspiration = await self.get_inspiration(session, artist_id, inspiration_id)
        if inspiration is None:
            raise InspirationNotFoundError()
        await session.delete(inspiration)
        await session.flush()
        logger.info(
            "Inspiration deleted",
            extra={"artist_id": artist_id, "inspiration_id": inspiration_id},
        )

    async def delete_all_for_artist(self, session: AsyncSession, artist_id: str) -> int:
        artist_id = require_artist_id(artist_id)
        result = await session.execute(
            delete(InspirationModel).where(InspirationModel.artist_id == artist_id)
        )
        return result.rowcount or 0
