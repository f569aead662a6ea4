"""Tests for encouragements and the network activity feed."""

import pytest

from gallery_engine.artworks.service import ArtworkService
from gallery_engine.common.exceptions import TenantRequiredError
from gallery_engine.encouragements.service import EncouragementService
from gallery_engine.site_settings.schemas import SiteConfig
from gallery_engine.site_settings.service import SiteSettingsService


@pytest.fixture
def site_settings():
    return SiteSettingsService()


@pytest.fixture
def artworks():
    return ArtworkService()


@pytest.fixture
def svc(site_settings, artworks):
    return EncouragementService(site_settings, artworks)


class TestEncouragements:
    async def test_create_and_list(self, db, svc):
        async with db.get_session() as session:
            item = await svc.create_encouragement(
                session, "-vqsk", "방문객", "멋진 작품이네요", author_archive_url="https://x/y"
            )
        assert item.id
        assert item.target_artist_id == "-vqsk"
        async with db.get_session() as session:
            items = await svc.list_encouragements(session, "-vqsk")
        assert [i.content for i in items] == ["멋진 작품이네요"]
        assert items[0].author_archive_url == "https://x/y"

    async def test_newest_first(self, db, svc):
        for text in ("one", "two", "three"):
            async with db.get_session() as session:
                await svc.create_encouragement(session, "-vqsk", "A", text)
        async with db.get_session() as session:
            items = await svc.list_encouragements(session, "-vqsk")
        assert [i.content for i in items] == ["three", "two", "one"]

    async def test_isolated_per_tenant(self, db, svc):
        async with db.get_session() as session:
            await svc.create_encouragement(session, "-vqsk", "A", "for grim-sil")
            await svc.create_encouragement(session, "-5e4p", "B", "for hwang")
        async with db.get_session() as session:
            items = await svc.list_encouragements(session, "-5e4p")
        assert [i.content for i in items] == ["for hwang"]

    async def test_delete_scoped(self, db, svc):
        async with db.get_session() as session:
            item = await svc.create_encouragement(session, "-vqsk", "A", "hello")
        async with db.get_session() as session:
            assert await svc.delete_encouragement(session, "-5e4p", item.id) is False
        async with db.get_session() as session:
            assert await svc.delete_encouragement(session, "-vqsk", item.id) is True
        async with db.get_session() as session:
            assert await svc.list_encouragements(session, "-vqsk") == []

    async def test_blank_tenant(self, db, svc):
        async with db.get_session() as session:
            with pytest.raises(TenantRequiredError):
                await svc.create_encouragement(session, "null", "A", "hi")


class TestRecentActivity:
    async def test_empty(self, db, svc):
        async with db.get_session() as session:
            assert await svc.recent_activity(session) == []

    async def test_merges_sources_newest_first(self, db, svc, site_settings, artworks):
        async with db.get_session() as session:
            await site_settings.save_settings(session, "-3ibp", SiteConfig(artist_name="문혜경"))
        async with db.get_session() as session:
            await artworks.add_artwork(
                session, "-3ibp", title="여름", year=2024, artist_name="문혜경"
            )
        async with db.get_session() as session:
            await svc.create_encouragement(session, "-3ibp", "방문객", "응원합니다")

        async with db.get_session() as session:
            feed = await svc.recent_activity(session)

        assert [item.type for item in feed] == ["ENC", "ART", "JOIN"]
        assert "문혜경" in feed[2].text
        assert "여름" in feed[1].text
        assert "방문객" in feed[0].text
        assert feed[0].time >= feed[1].time >= feed[2].time

    async def test_anonymous_artwork_author(self, db, svc, artworks):
        async with db.get_session() as session:
            await artworks.add_artwork(session, "-vqsk", title="무제", year=2024)
        async with db.get_session() as session:
            feed = await svc.recent_activity(session)
        assert "동료" in feed[0].text

    async def test_limit(self, db, svc):
        for i in range(3):
            async with db.get_session() as session:
                await svc.create_encouragement(session, "-vqsk", f"A{i}", "hi")
        async with db.get_session() as session:
            feed = await svc.recent_activity(session, limit=2)
        assert len(feed) == 2
