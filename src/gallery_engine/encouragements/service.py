"""Encouragement messages and the cross-gallery activity feed."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_engine.artworks.service import ArtworkService
from gallery_engine.common.models import as_utc
from gallery_engine.encouragements.models import EncouragementModel
from gallery_engine.encouragements.schemas import FeedItem
from gallery_engine.site_settings.service import SiteSettingsService
from gallery_engine.tenancy.scoping import require_artist_id

logger = logging.getLogger(__name__)

FEED_JOIN_LIMIT = 3
FEED_ART_LIMIT = 5
FEED_ENC_LIMIT = 3


class EncouragementService:
    def __init__(
        self,
        site_settings_service: SiteSettingsService,
        artwork_service: ArtworkService,
    ):
        self.site_settings = site_settings_service
        self.artworks = artwork_service

    async def list_encouragements(
        self, session: AsyncSession, artist_id: str
    ) -> list[EncouragementModel]:
        artist_id = require_artist_id(artist_id)
        result = await session.execute(
            select(EncouragementModel)
            .where(EncouragementModel.target_artist_id == artist_id)
            .order_by(EncouragementModel.created_at.desc())
        )
        return list(result.scalars().all())

    async def create_encouragement(
        self,
        session: AsyncSession,
        artist_id: str,
        author_name: str,
        content: str,
        author_archive_url: Optional[str] = None,
    ) -> EncouragementModel:
        artist_id = require_artist_id(artist_id)
        item = EncouragementModel(
            target_artist_id=artist_id,
            author_name=author_name,
            author_archive_url=author_archive_url,
            content=content,
        )
        session.add(item)
        await session.flush()
        logger.info("Encouragement added", extra={"artist_id": artist_id, "encouragement_id": item.id})
        return item

    async def delete_encouragement(
        self, session: AsyncSession, artist_id: str, encouragement_id: str
    ) -> bool:
        """Delete a message addressed to ``artist_id``. Returns False if none matched."""
        artist_id = require_artist_id(artist_id)
        result = await session.execute(
            select(EncouragementModel).where(
                EncouragementModel.id == encouragement_id,
                EncouragementModel.target_artist_id == artist_id,
            )
        )
        item = result.scalar_one_or_none()
        if item is None:
            return False
        await session.delete(item)
        await session.flush()
        return True

    async def recent_activity(self, session: AsyncSession, limit: int = 10) -> list[FeedItem]:
        """Merge recent joins, artworks and encouragements, newest first."""
        items: list[FeedItem] = []

        for row in await self.site_settings.recently_updated(session, limit=FEED_JOIN_LIMIT):
            when = as_utc(row.updated_at)
            items.append(FeedItem(
                id=f"join-{when.isoformat()}",
                type="JOIN",
                text=f"{row.artist_name} 작가님이 상생 네트워크에 합류하셨습니다!",
                time=when,
            ))

        for art in await self.artworks.recent_artworks(session, limit=FEED_ART_LIMIT):
            when = as_utc(art.created_at)
            items.append(FeedItem(
                id=f"art-{when.isoformat()}",
                type="ART",
                text=f"{art.artist_name or '동료'} 작가님이 새 작품 '{art.title}'을(를) 방금 등록하셨습니다!",
                time=when,
            ))

        result = await session.execute(
            select(EncouragementModel)
            .order_by(EncouragementModel.created_at.desc())
            .limit(FEED_ENC_LIMIT)
        )
        for enc in result.scalars().all():
            when = as_utc(enc.created_at)
            items.append(FeedItem(
                id=f"enc-{when.isoformat()}",
                type="ENC",
                text=f"{enc.author_name}님께서 따뜻한 응원의 한마디를 남겨주셨습니다.",
                time=when,
            ))

        items.sort(key=lambda item: item.time, reverse=True)
        return items[:limit]
