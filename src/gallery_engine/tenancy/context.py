"""Request-scoped tenant context for route handlers."""

from dataclasses import dataclass

from fastapi import Request

from gallery_engine.tenancy.middleware import ARTIST_HEADER, OVERRIDE_PARAM
from gallery_engine.tenancy.resolver import ResolutionSource, resolver_from_settings


@dataclass(frozen=True)
class TenantContext:
    """Resolved tenant info available to request handlers."""
    artist_id: str
    source: str = ResolutionSource.DEFAULT.value


async def get_tenant(request: Request) -> TenantContext:
    """FastAPI dependency returning the tenant stamped by the middleware.

    Falls back to resolving inline when the middleware is not mounted
    (e.g. a router included in a bare test app).
    """
    artist_id = getattr(request.state, "artist_id", None)
    if artist_id:
        return TenantContext(
            artist_id=artist_id,
            source=getattr(request.state, "artist_source", ResolutionSource.DEFAULT.value),
        )

    resolution = resolver_from_settings()(
        request.headers.get("host", ""), request.query_params.get(OVERRIDE_PARAM)
    )
    return TenantContext(artist_id=resolution.artist_id, source=resolution.source.value)


def injected_artist_id(request: Request) -> str | None:
    """Read the ``x-artist-id`` header as seen by downstream handlers."""
    return request.headers.get(ARTIST_HEADER)
