"""Shared test fixtures for Gallery-Engine."""

import os

import pytest
from httpx import ASGITransport, AsyncClient

from gallery_engine.common.config import GallerySettings
from gallery_engine.common.database import DatabaseManager


API_KEY = "test-platform-api-key"
SECRET_KEY = "test-secret-key-for-unit-tests"
ADMIN_PASSWORD = "bootstrap-pass"

DEFAULT_HOST = "grim-sil.com"
VIP_HOST = "hahyunju.com"


def make_settings(**overrides) -> GallerySettings:
    defaults = {
        "db_url": "sqlite+aiosqlite://",
        "secret_key": SECRET_KEY,
        "api_key": API_KEY,
        "default_admin_password": ADMIN_PASSWORD,
    }
    defaults.update(overrides)
    return GallerySettings(**defaults)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
async def db(settings):
    manager = DatabaseManager(settings)
    await manager.init()
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
def api_key():
    return API_KEY


@pytest.fixture
def app():
    """Create a test app with in-memory DB."""
    os.environ["GALLERY_DB_URL"] = "sqlite+aiosqlite://"
    os.environ["GALLERY_SECRET_KEY"] = SECRET_KEY
    os.environ["GALLERY_API_KEY"] = API_KEY
    os.environ["GALLERY_DEFAULT_ADMIN_PASSWORD"] = ADMIN_PASSWORD

    # Clear caches and singletons so new env vars take effect
    from gallery_engine.common.config import get_settings
    get_settings.cache_clear()

    from gallery_engine.deps import reset_singletons
    reset_singletons()

    from gallery_engine.app import create_app
    return create_app()


@pytest.fixture
async def client(app):
    # Manually init DB since ASGITransport doesn't run lifespan
    from gallery_engine.deps import get_db
    db = get_db()
    await db.init()
    await db.create_all()

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url=f"http://{DEFAULT_HOST}",
    ) as ac:
        yield ac

    await db.close()


@pytest.fixture
def admin_headers():
    return {"X-Gallery-Api-Key": API_KEY}


@pytest.fixture
def login_as(client):
    """Return a coroutine that logs in as the admin of a host and yields bearer headers."""

    async def _login(host: str = DEFAULT_HOST, password: str = ADMIN_PASSWORD) -> dict:
        resp = await client.post(
            "/auth/login", json={"password": password}, headers={"host": host}
        )
        assert resp.status_code == 200, resp.text
        client.cookies.clear()
        return {"host": host, "Authorization": f"Bearer {resp.json()['token']}"}

    return _login


@pytest.fixture
async def default_admin(login_as):
    return await login_as(DEFAULT_HOST)


@pytest.fixture
async def vip_admin(login_as):
    return await login_as(VIP_HOST)
