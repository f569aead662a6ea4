"""Platform API key authentication dependency."""

import hmac

from fastapi import Header, HTTPException


async def require_api_key(
    x_gallery_api_key: str = Header(..., alias="X-Gallery-Api-Key"),
) -> str:
    """FastAPI dependency that validates the platform operator API key."""
    from gallery_engine.common.config import get_settings

    settings = get_settings()
    if not hmac.compare_digest(x_gallery_api_key, settings.api_key):
        raise HTTPException(status_code=403, detail="Invalid API key")
    return x_gallery_api_key
