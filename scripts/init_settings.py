#!/usr/bin/env python3
"""Create default settings rows for every artist id known to the host map.

Usage:
    python scripts/init_settings.py
"""

import asyncio
import sys
from pathlib import Path

# Ensure project root is on path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from gallery_engine.common.config import get_settings
from gallery_engine.common.database import DatabaseManager
from gallery_engine.site_settings.schemas import SiteConfig
from gallery_engine.site_settings.service import SiteSettingsService


async def init_settings() -> None:
    settings = get_settings()
    db = DatabaseManager(settings)
    await db.init()
    await db.create_all()

    svc = SiteSettingsService()
    artist_ids = sorted(
        set(settings.host_map.values())
        | {artist_id for _, artist_id in settings.host_keywords}
        | {settings.default_artist_id}
    )

    async with db.get_session() as session:
        for artist_id in artist_ids:
            if await svc.get_row(session, artist_id) is not None:
                print(f"  [skip] {artist_id} already has settings")
                continue
            await svc.save_settings(session, artist_id, SiteConfig())
            print(f"  [created] {artist_id}")

    await db.close()
    print(f"\nDone. {len(artist_ids)} artist ids checked.")


if __name__ == "__main__":
    asyncio.run(init_settings())
