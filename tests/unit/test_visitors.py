"""Tests for per-tenant daily visitor counters."""

from datetime import date, timedelta

import pytest

from gallery_engine.common.exceptions import TenantRequiredError
from gallery_engine.visitors.service import VisitorService


@pytest.fixture
def svc():
    return VisitorService()


class TestIncrement:
    async def test_first_visit_creates_row(self, db, svc):
        async with db.get_session() as session:
            stat = await svc.increment_visit(session, "-vqsk", day=date(2025, 1, 1))
        assert stat.count == 1
        assert stat.date == date(2025, 1, 1)

    async def test_repeat_visits_accumulate(self, db, svc):
        day = date(2025, 1, 1)
        for _ in range(3):
            async with db.get_session() as session:
                stat = await svc.increment_visit(session, "-vqsk", day=day)
        assert stat.count == 3

    async def test_same_session_increments(self, db, svc):
        day = date(2025, 1, 1)
        async with db.get_session() as session:
            await svc.increment_visit(session, "-vqsk", day=day)
            stat = await svc.increment_visit(session, "-vqsk", day=day)
        assert stat.count == 2

    async def test_tenants_counted_separately(self, db, svc):
        day = date(2025, 1, 1)
        async with db.get_session() as session:
            await svc.increment_visit(session, "-vqsk", day=day)
            await svc.increment_visit(session, "-vqsk", day=day)
            other = await svc.increment_visit(session, "-5e4p", day=day)
        assert other.count == 1

    async def test_defaults_to_today(self, db, svc):
        async with db.get_session() as session:
            stat = await svc.increment_visit(session, "-vqsk")
        assert abs((stat.date - date.today()).days) <= 1

    async def test_blank_tenant(self, db, svc):
        async with db.get_session() as session:
            with pytest.raises(TenantRequiredError):
                await svc.increment_visit(session, "")


class TestConcurrentFirstVisit:
    async def test_existing_row_from_concurrent_insert(self, db):
        day = date(2025, 1, 1)
        async with db.get_session() as session:
            await VisitorService().increment_visit(session, "-vqsk", day=day)

        class LateRowService(VisitorService):
            # The first update misses, as if the other insert had not landed yet.
            misses = 1

            async def _bump(self, session, artist_id, day):
                if self.misses:
                    self.misses -= 1
                    return await super()._bump(session, "-none", day)
                return await super()._bump(session, artist_id, day)

        async with db.get_session() as session:
            stat = await LateRowService().increment_visit(session, "-vqsk", day=day)
        assert stat.count == 2

        async with db.get_session() as session:
            stats = await VisitorService().recent_stats(session, "-vqsk", today=day)
        assert [(s.date, s.count) for s in stats] == [(day, 2)]


class TestRecentStats:
    async def test_newest_first_within_window(self, db, svc):
        start = date(2025, 3, 1)
        async with db.get_session() as session:
            for offset in range(10):
                await svc.increment_visit(session, "-vqsk", day=start + timedelta(days=offset))
        async with db.get_session() as session:
            stats = await svc.recent_stats(session, "-vqsk", days=7, today=date(2025, 3, 10))
        assert len(stats) == 7
        assert stats[0].date == date(2025, 3, 10)
        assert stats[-1].date == date(2025, 3, 4)

    async def test_window_is_calendar_days(self, db, svc):
        async with db.get_session() as session:
            await svc.increment_visit(session, "-vqsk", day=date(2025, 1, 1))
            await svc.increment_visit(session, "-vqsk", day=date(2025, 3, 9))
        async with db.get_session() as session:
            stats = await svc.recent_stats(session, "-vqsk", days=7, today=date(2025, 3, 10))
        assert [s.date for s in stats] == [date(2025, 3, 9)]

    async def test_future_rows_excluded(self, db, svc):
        async with db.get_session() as session:
            await svc.increment_visit(session, "-vqsk", day=date(2025, 3, 11))
        async with db.get_session() as session:
            assert await svc.recent_stats(session, "-vqsk", today=date(2025, 3, 10)) == []

    async def test_only_own_tenant(self, db, svc):
        async with db.get_session() as session:
            await svc.increment_visit(session, "-vqsk", day=date(2025, 1, 1))
        async with db.get_session() as session:
            assert await svc.recent_stats(session, "-5e4p") == []
