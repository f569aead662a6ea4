"""Visitor counter API router."""

from fastapi import APIRouter, Depends, Query

from gallery_engine.auth.session import require_admin
from gallery_engine.tenancy.context import TenantContext, get_tenant
from gallery_engine.visitors.schemas import VisitorStat, VisitorStatsResponse, VisitResponse

router = APIRouter(prefix="/visitors", tags=["visitors"])


def _get_service():
    from gallery_engine.deps import get_visitor_service
    return get_visitor_service()


def _get_db():
    from gallery_engine.deps import get_db
    return get_db()


@router.post("", response_model=VisitResponse)
async def record_visit(tenant: TenantContext = Depends(get_tenant)):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        stat = await svc.increment_visit(session, tenant.artist_id)
        return VisitResponse(artist_id=tenant.artist_id, date=stat.date, count=stat.count)


@router.get("/stats", response_model=VisitorStatsResponse)
async def visitor_stats(
    days: int = Query(7, ge=1, le=90),
    artist_id: str = Depends(require_admin),
):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        stats = await svc.recent_stats(session, artist_id, days=days)
        return VisitorStatsResponse(
            artist_id=artist_id,
            stats=[VisitorStat.model_validate(s) for s in stats],
        )
