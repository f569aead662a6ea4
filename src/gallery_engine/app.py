"""FastAPI application factory for Gallery-Engine."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gallery_engine.common.config import get_settings
from gallery_engine.common.exceptions import GalleryError
from gallery_engine.common.logging import setup_logging
from gallery_engine.common.schemas import ErrorResponse, HealthResponse
from gallery_engine.tenancy.middleware import TenantResolverMiddleware

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        from gallery_engine.deps import get_db, get_sms_sender
        db = get_db()
        await db.init()
        await db.create_all()
        if not settings.sms_configured:
            logger.info("Aligo credentials not set; SMS runs in test mode")
        yield
        # Shutdown
        await get_sms_sender().close()
        await db.close()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
    )

    app.add_middleware(TenantResolverMiddleware, settings=settings)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["x-artist-id", "x-artist-source"],
    )

    @app.exception_handler(GalleryError)
    async def gallery_error_handler(request: Request, exc: GalleryError):
        logger.warning("Unhandled domain error: %s", exc.code, extra={"path": request.url.path})
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=exc.message, code=exc.code).model_dump(),
        )

    @app.get("/health", response_model=HealthResponse)
    async def health():
        from gallery_engine.deps import get_db
        if await get_db().ping():
            return HealthResponse(version=settings.api_version)
        return HealthResponse(
            status="degraded", version=settings.api_version, database="unavailable"
        )

    # Mount routers
    from gallery_engine.artists.router import router as artists_router
    from gallery_engine.artworks.router import router as artworks_router
    from gallery_engine.auth.router import router as auth_router
    from gallery_engine.encouragements.router import router as encouragements_router
    from gallery_engine.inspirations.router import router as inspirations_router
    from gallery_engine.provisioning.router import router as provisioning_router
    from gallery_engine.site_settings.router import router as settings_router
    from gallery_engine.tenancy.router import router as tenancy_router
    from gallery_engine.verification.router import router as verification_router
    from gallery_engine.visitors.router import router as visitors_router

    prefix = settings.api_prefix
    app.include_router(tenancy_router, prefix=prefix)
    app.include_router(artworks_router, prefix=prefix)
    app.include_router(settings_router, prefix=prefix)
    app.include_router(artists_router, prefix=prefix)
    app.include_router(auth_router, prefix=prefix)
    app.include_router(verification_router, prefix=prefix)
    app.include_router(provisioning_router, prefix=prefix)
    app.include_router(encouragements_router, prefix=prefix)
    app.include_router(inspirations_router, prefix=prefix)
    app.include_router(visitors_router, prefix=prefix)

    return app
