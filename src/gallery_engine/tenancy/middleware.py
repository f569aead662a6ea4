"""Edge interceptor that stamps every request with its artist id."""

import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from gallery_engine.tenancy.resolver import resolver_from_settings

logger = logging.getLogger(__name__)

ARTIST_HEADER = "x-artist-id"
SOURCE_HEADER = "x-artist-source"
OVERRIDE_PARAM = "vipId"


class TenantResolverMiddleware(BaseHTTPMiddleware):
    """Resolve the tenant from Host / ``vipId`` and inject ``x-artist-id``.

    A client-supplied ``x-artist-id`` header is always replaced so callers
    cannot pick another tenant by header alone.
    """

    EXEMPT_PATHS = {"/health", "/openapi.json", "/docs", "/redoc", "/favicon.ico"}

    def __init__(self, app, settings=None):
        super().__init__(app)
        self._resolve = resolver_from_settings(settings)

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.EXEMPT_PATHS:
            return await call_next(request)

        host = request.headers.get("host", "")
        override = request.query_params.get(OVERRIDE_PARAM)
        resolution = self._resolve(host, override)

        raw_headers = [
            (name, value)
            for name, value in request.scope["headers"]
            if name.lower() != ARTIST_HEADER.encode()
        ]
        raw_headers.append((ARTIST_HEADER.encode(), resolution.artist_id.encode()))
        request.scope["headers"] = raw_headers

        request.state.artist_id = resolution.artist_id
        request.state.artist_source = resolution.source.value

        logger.debug(
            "Host %s -> %s (%s) for %s",
            host, resolution.artist_id, resolution.source.value, request.url.path,
        )

        response = await call_next(request)
        response.headers[ARTIST_HEADER] = resolution.artist_id
        response.headers[SOURCE_HEADER] = resolution.source.value
        return response
