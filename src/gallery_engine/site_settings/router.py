"""Site settings API router."""

from fastapi import APIRouter, Depends, HTTPException

from gallery_engine.auth.session import require_admin
from gallery_engine.common.exceptions import DuplicatePickError
from gallery_engine.site_settings.schemas import ArtistPick, SiteConfig, SiteConfigResponse
from gallery_engine.tenancy.context import TenantContext, get_tenant

router = APIRouter(prefix="/settings", tags=["settings"])


def _get_service():
    from gallery_engine.deps import get_site_settings_service
    return get_site_settings_service()


def _get_db():
    from gallery_engine.deps import get_db
    return get_db()


def _response(artist_id: str, config: SiteConfig, is_default: bool = False) -> SiteConfigResponse:
    return SiteConfigResponse(artist_id=artist_id, is_default=is_default, **config.model_dump())


@router.get("", response_model=SiteConfigResponse)
async def get_settings(tenant: TenantContext = Depends(get_tenant)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        row = await svc.get_row(session, tenant.artist_id)
        config = await svc.load_settings(session, tenant.artist_id)
        return _response(tenant.artist_id, config, is_default=row is None)


@router.put("", response_model=SiteConfigResponse)
async def save_settings(body: SiteConfig, artist_id: str = Depends(require_admin)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        config = await svc.save_settings(session, artist_id, body)
        return _response(artist_id, config)


@router.post("/reset", response_model=SiteConfigResponse)
async def reset_settings(artist_id: str = Depends(require_admin)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        config = await svc.reset_settings(session, artist_id)
        return _response(artist_id, config)


@router.post("/picks", response_model=SiteConfigResponse, status_code=201)
async def add_artist_pick(body: ArtistPick, artist_id: str = Depends(require_admin)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        try:
            config = await svc.add_artist_pick(session, artist_id, body)
        except DuplicatePickError as e:
            raise HTTPException(status_code=409, detail=e.message)
        return _response(artist_id, config)
