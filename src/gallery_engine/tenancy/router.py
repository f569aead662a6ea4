"""Tenant diagnostics router."""

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from gallery_engine.tenancy.context import TenantContext, get_tenant, injected_artist_id

router = APIRouter(prefix="/tenant", tags=["tenancy"])


class TenantResponse(BaseModel):
    artist_id: str
    source: str
    host: str
    header_artist_id: str | None = None


@router.get("", response_model=TenantResponse)
async def current_tenant(request: Request, tenant: TenantContext = Depends(get_tenant)):
    """Report how the current request was mapped to a tenant."""
    return TenantResponse(
        artist_id=tenant.artist_id,
        source=tenant.source,
        host=request.headers.get("host", ""),
        header_artist_id=injected_artist_id(request),
    )
