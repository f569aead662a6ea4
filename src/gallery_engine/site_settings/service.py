"""Site settings service: one upserted row per artist."""

import logging

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_engine.common.exceptions import DuplicatePickError
from gallery_engine.site_settings.models import SiteSettingsModel
from gallery_engine.site_settings.schemas import PLACEHOLDER_PICK_IMAGE, ArtistPick, SiteConfig
from gallery_engine.tenancy.scoping import require_artist_id

logger = logging.getLogger(__name__)


def _config_to_columns(config: SiteConfig) -> dict:
    data = config.model_dump()
    data["artist_picks"] = [pick.model_dump() for pick in config.artist_picks]
    return data


class SiteSettingsService:
    """Load / save the per-tenant settings row."""

    async def get_row(
        self, session: AsyncSession, artist_id: str
    ) -> SiteSettingsModel | None:
        return await session.get(SiteSettingsModel, require_artist_id(artist_id))

    async def load_settings(self, session: AsyncSession, artist_id: str) -> SiteConfig:
        """Return the tenant's configuration, or the defaults if none is stored."""
        row = await self.get_row(session, artist_id)
        if row is None:
            logger.info("No settings found for %s, using defaults", artist_id)
            return SiteConfig()
        try:
            return SiteConfig.model_validate(row)
        except ValidationError:
            logger.exception("Stored settings for %s are invalid, using defaults", artist_id)
            return SiteConfig()

    async def save_settings(
        self, session: AsyncSession, artist_id: str, config: SiteConfig
    ) -> SiteConfig:
        """Upsert the full configuration for ``artist_id``."""
        row = await self.get_row(session, artist_id)
        columns = _config_to_columns(config)
        if row is None:
            row = SiteSettingsModel(id=artist_id, **columns)
            session.add(row)
        else:
            for field, value in columns.items():
                setattr(row, field, value)
        await session.flush()
        logger.info("Settings saved", extra={"artist_id": artist_id})
        return config

    async def reset_settings(self, session: AsyncSession, artist_id: str) -> SiteConfig:
        return await self.save_settings(session, artist_id, SiteConfig())

    async def add_artist_pick(
        self, session: AsyncSession, artist_id: str, pick: ArtistPick
    ) -> SiteConfig:
        """Append a peer recommendation, rejecting duplicates by name or URL."""
        config = await self.load_settings(session, artist_id)
        for existing in config.artist_picks:
            if existing.name == pick.name or existing.archive_url == pick.archive_url:
                raise DuplicatePickError()

        if not pick.image_url:
            pick = pick.model_copy(update={"image_url": PLACEHOLDER_PICK_IMAGE})
        config = config.model_copy(update={"artist_picks": [*config.artist_picks, pick]})
        return await self.save_settings(session, artist_id, config)

    async def recently_updated(
        self, session: AsyncSession, limit: int = 3
    ) -> list[SiteSettingsModel]:
        """Newest settings rows across all galleries, for the network feed."""
        result = await session.execute(
            select(SiteSettingsModel)
            .order_by(SiteSettingsModel.updated_at.desc())
            .limit(limit)
        )
        return list(result.scalars().all())
