"""Studio inspiration API router."""

from fastapi import APIRouter, Depends, HTTPException

from gallery_engine.auth.session import require_admin
from gallery_engine.common.exceptions import (
    DuplicateInspirationError,
    InspirationNotFoundError,
)
from gallery_engine.inspirations.schemas import (
    InspirationCreate,
    InspirationMetadataUpdate,
    InspirationResponse,
)
from gallery_engine.tenancy.context import TenantContext, get_tenant

router = APIRouter(prefix="/inspirations", tags=["inspirations"])


def _get_service():
    from gallery_engine.deps import get_inspiration_service
    return get_inspiration_service()


def _get_db():
    from gallery_engine.deps import get_db
    return get_db()


@router.get("", response_model=list[InspirationResponse])
async def list_inspirations(tenant: TenantContext = Depends(get_tenant)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        items = await svc.list_inspirations(session, tenant.artist_id)
        return [InspirationResponse.from_model(i) for i in items]


@router.post("", response_model=InspirationResponse, status_code=201)
async def create_inspiration(
    body: InspirationCreate, artist_id: str = Depends(require_admin)
):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        try:
            item = await svc.create_inspiration(
                session,
                artist_id,
                image_url=body.image_url,
                blur_image_url=body.blur_image_url,
                original_image_url=body.original_image_url,
                color_palette=body.color_palette,
                metadata=body.metadata,
                inspiration_id=body.id,
            )
        except DuplicateInspirationError as e:
            raise HTTPException(status_code=409, detail=e.message)
        return InspirationResponse.from_model(item)


@router.patch("/{inspiration_id}", response_model=InspirationResponse)
async def update_inspiration(
    inspiration_id: str,
    body: InspirationMetadataUpdate,
    artist_id: str = Depends(require_admin),
):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        try:
            item = await svc.update_metadata(session, artist_id, inspiration_id, body.metadata)
        except InspirationNotFoundError as e:
            raise HTTPException(status_code=404, detail=e.message)
        return InspirationResponse.from_model(item)


@router.delete("/{inspiration_id}", status_code=204)
async def delete_inspiration(inspiration_id: str, artist_id: str = Depends(require_admin)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        try:
            await svc.delete_inspiration(session, artist_id, inspiration_id)
        except InspirationNotFoundError as e:
            raise HTTPException(status_code=404, detail=e.message)
