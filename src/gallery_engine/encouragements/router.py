"""Encouragement and network feed API router."""

from fastapi import APIRouter, Depends, HTTPException, Query

from gallery_engine.auth.session import require_admin
from gallery_engine.encouragements.schemas import (
    EncouragementCreate,
    EncouragementResponse,
    FeedResponse,
)
from gallery_engine.tenancy.context import TenantContext, get_tenant

router = APIRouter(tags=["encouragements"])


def _get_service():
    from gallery_engine.deps import get_encouragement_service
    return get_encouragement_service()


def _get_db():
    from gallery_engine.deps import get_db
    return get_db()


@router.get("/encouragements", response_model=list[EncouragementResponse])
async def list_encouragements(tenant: TenantContext = Depends(get_tenant)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        items = await svc.list_encouragements(session, tenant.artist_id)
        return [EncouragementResponse.model_validate(i) for i in items]


@router.post("/encouragements", response_model=EncouragementResponse, status_code=201)
async def create_encouragement(
    body: EncouragementCreate, tenant: TenantContext = Depends(get_tenant)
):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        item = await svc.create_encouragement(
            session,
            tenant.artist_id,
            author_name=body.author_name,
            content=body.content,
            author_archive_url=body.author_archive_url,
        )
        return EncouragementResponse.model_validate(item)


@router.delete("/encouragements/{encouragement_id}", status_code=204)
async def delete_encouragement(
    encouragement_id: str, artist_id: str = Depends(require_admin)
):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        deleted = await svc.delete_encouragement(session, artist_id, encouragement_id)
    if not deleted:
        raise HTTPException(status_code=404, detail="Encouragement not found")


@router.get("/network/feed", response_model=FeedResponse)
async def network_feed(limit: int = Query(10, ge=1, le=50)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        items = await svc.recent_activity(session, limit=limit)
    return FeedResponse(items=items)
