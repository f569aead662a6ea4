"""VIP artist provisioning service."""

import logging
import re
import secrets
import string

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_engine.artists.models import ArtistModel
from gallery_engine.artworks.service import ArtworkService
from gallery_engine.auth.service import AuthService
from gallery_engine.common.exceptions import ArtistNotFoundError
from gallery_engine.inspirations.service import InspirationService

logger = logging.getLogger(__name__)

LINK_PREFIX = "gallery-vip-"
_LINK_RE = re.compile(r"^gallery-vip-(\d+)$")
_ID_ALPHABET = string.digits + string.ascii_lowercase


def format_link_id(number: int) -> str:
    return f"{LINK_PREFIX}{number:02d}"


def generate_artist_id() -> str:
    """Short opaque tenant key such as ``-k3x9``."""
    return "-" + "".join(secrets.choice(_ID_ALPHABET) for _ in range(4))


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def gallery_url(site_url: str, link_id: str) -> str:
    return f"{site_url.rstrip('/')}/{link_id}"


class ArtistService:
    """Create, look up and remove provisioned galleries."""

    def __init__(
        self,
        auth_service: AuthService,
        artwork_service: ArtworkService,
        inspiration_service: InspirationService | None = None,
    ):
        self.auth = auth_service
        self.artworks = artwork_service
        self.inspirations = inspiration_service

    async def next_vip_number(self, session: AsyncSession) -> int:
        result = await session.execute(
            select(ArtistModel.link_id).where(ArtistModel.link_id.like(f"{LINK_PREFIX}%"))
        )
        numbers = [
            int(match.group(1))
            for link_id in result.scalars().all()
            if (match := _LINK_RE.match(link_id or ""))
        ]
        return max(numbers, default=0) + 1

    async def _unused_artist_id(self, session: AsyncSession) -> str:
        while True:
            candidate = generate_artist_id()
            if await session.get(ArtistModel, candidate) is None:
                return candidate

    async def create_vip_artist(
        self,
        session: AsyncSession,
        name: str,
        password: str,
        is_free: bool = False,
        subscription_price: int | None = None,
        temporary: bool = False,
    ) -> ArtistModel:
        """Allocate the next link id and store the artist with its credential.

        Both rows are written in the caller's transaction, so a failure
        leaves neither behind.
        """
        link_id = format_link_id(await self.next_vip_number(session))
        artist = ArtistModel(
            id=await self._unused_artist_id(session),
            name=name,
            link_id=link_id,
            artist_type="vip",
            is_free=is_free,
            subscription_price=subscription_price,
        )
        session.add(artist)
        await session.flush()
        await self.auth.set_password(session, artist.id, password, temporary=temporary)

        logger.info(
            "VIP artist created",
            extra={"artist_id": artist.id, "link_id": link_id},
        )
        return artist

    async def get_by_id(self, session: AsyncSession, artist_id: str) -> ArtistModel | None:
        return await session.get(ArtistModel, artist_id)

    async def get_by_link_id(
        self, session: AsyncSession, link_id: str
    ) -> ArtistModel | None:
        result = await session.execute(
            select(ArtistModel).where(ArtistModel.link_id == link_id)
        )
        return result.scalar_one_or_none()

    async def list_vip_artists(self, session: AsyncSession) -> list[ArtistModel]:
        result = await session.execute(
            select(ArtistModel)
            .where(ArtistModel.artist_type == "vip")
            .order_by(ArtistModel.link_id.asc())
        )
        return list(result.scalars().all())

    async def search_artists(
        self, session: AsyncSession, query: str, limit: int = 20
    ) -> list[ArtistModel]:
        query = query.strip()
        if not query:
            return []
        result = await session.execute(
            select(ArtistModel)
            .where(
                ArtistModel.artist_type == "vip",
                ArtistModel.name.ilike(f"%{_escape_like(query)}%", escape="\\"),
            )
            .order_by(ArtistModel.name.asc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def delete_vip_artist(self, session: AsyncSession, artist_id: str) -> None:
        """Remove the artist with its artworks, inspirations and credential.

        The settings row is intentionally left in place.
        """
        artist = await self.get_by_id(session, artist_id)
        if artist is None:
            raise ArtistNotFoundError()

        removed = await self.artworks.delete_all_for_artist(session, artist_id)
        if self.inspirations is not None:
            await self.inspirations.delete_all_for_artist(session, artist_id)
        await self.auth.delete_credential(session, artist_id)
        await session.delete(artist)
        await session.flush()
        logger.info(
            "VIP artist deleted",
            extra={"artist_id": artist_id, "artworks_removed": removed},
        )
