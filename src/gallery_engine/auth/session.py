"""Signed admin session tokens, one tenant per token."""

from fastapi import Depends, HTTPException, Request
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired

from gallery_engine.tenancy.context import TenantContext, get_tenant

COOKIE_NAME = "gallery_admin_session"


def _get_serializer() -> URLSafeTimedSerializer:
    from gallery_engine.common.config import get_settings
    return URLSafeTimedSerializer(get_settings().secret_key, salt="admin-session")


def create_session_token(artist_id: str) -> str:
    """Sign a session payload and return the token value."""
    s = _get_serializer()
    return s.dumps({"artist_id": artist_id})


def verify_session_token(token: str, max_age: int | None = None) -> dict | None:
    """Verify and decode a session token. Returns payload or None."""
    from gallery_engine.common.config import get_settings

    s = _get_serializer()
    try:
        return s.loads(token, max_age=max_age or get_settings().session_max_age)
    except (BadSignature, SignatureExpired):
        return None


def get_session(request: Request) -> dict | None:
    """Extract and verify the session from a bearer header or cookie."""
    auth = request.headers.get("authorization", "")
    scheme, _, token = auth.partition(" ")
    if scheme.lower() != "bearer" or not token:
        token = request.cookies.get(COOKIE_NAME, "")
    if not token:
        return None
    return verify_session_token(token.strip())


async def require_admin(
    request: Request, tenant: TenantContext = Depends(get_tenant)
) -> str:
    """FastAPI dependency: a valid session for the tenant being addressed.

    Returns the artist id the handler must scope its writes to.
    """
    session = get_session(request)
    if session is None:
        raise HTTPException(status_code=401, detail="Login required")
    if session.get("artist_id") != tenant.artist_id:
        raise HTTPException(status_code=403, detail="Session is for a different gallery")
    return tenant.artist_id
