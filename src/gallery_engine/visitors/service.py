"""Per-tenant daily visitor counters."""

import datetime
import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_engine.common.models import utcnow
from gallery_engine.tenancy.scoping import require_artist_id
from gallery_engine.visitors.models import VisitorStatModel

logger = logging.getLogger(__name__)


class VisitorService:
    async def _bump(
        self, session: AsyncSession, artist_id: str, day: datetime.date
    ) -> int:
        result = await session.execute(
            update(VisitorStatModel)
            .where(VisitorStatModel.artist_id == artist_id, VisitorStatModel.date == day)
            .values(count=VisitorStatModel.count + 1)
        )
        return result.rowcount or 0

    async def increment_visit(
        self, session: AsyncSession, artist_id: str, day: datetime.date | None = None
    ) -> VisitorStatModel:
        """Add one visit to ``artist_id``'s counter for ``day`` (UTC today)."""
        artist_id = require_artist_id(artist_id)
        day = day or utcnow().date()

        if not await self._bump(session, artist_id, day):
            try:
                async with session.begin_nested():
                    session.add(VisitorStatModel(artist_id=artist_id, date=day, count=1))
            except IntegrityError:
                # A concurrent first visit created the row.
                logger.debug("Visitor row for %s on %s already exists", artist_id, day)
                await self._bump(session, artist_id, day)

        stat = (
            await session.execute(
                select(VisitorStatModel)
                .where(VisitorStatModel.artist_id == artist_id, VisitorStatModel.date == day)
                .execution_options(populate_existing=True)
            )
        ).scalar_one()
        logger.debug("Visit recorded for %s on %s: %d", artist_id, day, stat.count)
        return stat

    async def recent_stats(
        self,
        session: AsyncSession,
        artist_id: str,
        days: int = 7,
        today: datetime.date | None = None,
    ) -> list[VisitorStatModel]:
        """Counters for the last ``days`` calendar days up to ``today``, newest first."""
        artist_id = require_artist_id(artist_id)
        today = today or utcnow().date()
        since = today - datetime.timedelta(days=days - 1)
        result = await session.execute(
            select(VisitorStatModel)
            .where(
                VisitorStatModel.artist_id == artist_id,
                VisitorStatModel.date >= since,
                VisitorStatModel.date <= today,
            )
            .order_by(VisitorStatModel.date.desc())
        )
        return list(result.scalars().all())
