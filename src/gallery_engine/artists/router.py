"""VIP artist API router.

Search and link lookups are public; provisioning and removal require the
platform API key.
"""

from fastapi import APIRouter, Depends, HTTPException, Query

from gallery_engine.artists.schemas import (
    ArtistCreate,
    ArtistResponse,
    ArtistSearchHit,
    ArtistSearchResponse,
)
from gallery_engine.artists.service import gallery_url
from gallery_engine.common.config import get_settings
from gallery_engine.common.exceptions import ArtistNotFoundError
from gallery_engine.common.security import require_api_key

router = APIRouter(prefix="/artists", tags=["artists"])


def _get_service():
    from gallery_engine.deps import get_artist_service
    return get_artist_service()


def _get_db():
    from gallery_engine.deps import get_db
    return get_db()


@router.post("", response_model=ArtistResponse, status_code=201)
async def create_artist(body: ArtistCreate, _=Depends(require_api_key)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        artist = await svc.create_vip_artist(
            session,
            name=body.name,
            password=body.password,
            is_free=body.is_free,
            subscription_price=body.subscription_price,
        )
        return ArtistResponse.model_validate(artist)


@router.get("", response_model=list[ArtistResponse])
async def list_artists(_=Depends(require_api_key)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        artists = await svc.list_vip_artists(session)
        return [ArtistResponse.model_validate(a) for a in artists]


@router.get("/search", response_model=ArtistSearchResponse)
async def search_artists(q: str = Query("", max_length=100)):
    svc = _get_service()
    db = _get_db()
    site_url = get_settings().site_url
    async with db.get_session() as session:
        artists = await svc.search_artists(session, q)
        return ArtistSearchResponse(
            artists=[
                ArtistSearchHit(
                    id=a.id,
                    name=a.name,
                    link_id=a.link_id,
                    archive_url=gallery_url(site_url, a.link_id),
                )
                for a in artists
            ]
        )


@router.get("/{link_id}", response_model=ArtistResponse)
async def get_artist_by_link(link_id: str):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        artist = await svc.get_by_link_id(session, link_id)
        if artist is None:
            raise HTTPException(status_code=404, detail="Gallery not found")
        return ArtistResponse.model_validate(artist)


@router.delete("/{artist_id}", status_code=204)
async def delete_artist(artist_id: str, _=Depends(require_api_key)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        try:
            await svc.delete_vip_artist(session, artist_id)
        except ArtistNotFoundError as e:
            raise HTTPException(status_code=404, detail=e.message)
