"""Artwork API router. The tenant always comes from the resolver."""

from fastapi import APIRouter, Depends, HTTPException

from gallery_engine.artworks.schemas import ArtworkCreate, ArtworkResponse, ArtworkUpdate
from gallery_engine.auth.session import require_admin
from gallery_engine.common.exceptions import ArtworkNotFoundError
from gallery_engine.tenancy.context import TenantContext, get_tenant

router = APIRouter(prefix="/artworks", tags=["artworks"])


def _get_service():
    from gallery_engine.deps import get_artwork_service
    return get_artwork_service()


def _get_db():
    from gallery_engine.deps import get_db
    return get_db()


@router.get("", response_model=list[ArtworkResponse])
async def list_artworks(tenant: TenantContext = Depends(get_tenant)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        artworks = await svc.list_artworks(session, tenant.artist_id)
        return [ArtworkResponse.model_validate(a) for a in artworks]


@router.get("/{artwork_id}", response_model=ArtworkResponse)
async def get_artwork(artwork_id: str, tenant: TenantContext = Depends(get_tenant)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        artwork = await svc.get_artwork(session, tenant.artist_id, artwork_id)
        if artwork is None:
            raise HTTPException(status_code=404, detail="Artwork not found")
        return ArtworkResponse.model_validate(artwork)


@router.post("", response_model=ArtworkResponse, status_code=201)
async def create_artwork(body: ArtworkCreate, artist_id: str = Depends(require_admin)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        artwork = await svc.add_artwork(session, artist_id, **body.model_dump())
        return ArtworkResponse.model_validate(artwork)


@router.put("/{artwork_id}", response_model=ArtworkResponse)
async def update_artwork(
    artwork_id: str, body: ArtworkUpdate, artist_id: str = Depends(require_admin)
):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        try:
            artwork = await svc.update_artwork(
                session, artist_id, artwork_id, **body.model_dump(exclude_unset=True)
            )
        except ArtworkNotFoundError as e:
            raise HTTPException(status_code=404, detail=e.message)
        return ArtworkResponse.model_validate(artwork)


@router.delete("/{artwork_id}", status_code=204)
async def delete_artwork(artwork_id: str, artist_id: str = Depends(require_admin)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        try:
            await svc.delete_artwork(session, artist_id, artwork_id)
        except ArtworkNotFoundError as e:
            raise HTTPException(status_code=404, detail=e.message)
