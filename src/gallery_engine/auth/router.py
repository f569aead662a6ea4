"""Admin login / password API router."""

from fastapi import APIRouter, Depends, HTTPException, Response

from gallery_engine.auth.schemas import LoginRequest, LoginResponse, PasswordChangeRequest
from gallery_engine.auth.session import COOKIE_NAME, create_session_token, require_admin
from gallery_engine.common.exceptions import InvalidCredentialsError, WeakPasswordError
from gallery_engine.common.schemas import MessageResponse
from gallery_engine.tenancy.context import TenantContext, get_tenant

router = APIRouter(prefix="/auth", tags=["auth"])


def _get_service():
    from gallery_engine.deps import get_auth_service
    return get_auth_service()


def _get_db():
    from gallery_engine.deps import get_db
    return get_db()


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    response: Response,
    tenant: TenantContext = Depends(get_tenant),
):
    from gallery_engine.common.config import get_settings

    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        try:
            credential = await svc.login(session, tenant.artist_id, body.password)
        except InvalidCredentialsError as e:
            raise HTTPException(status_code=401, detail=e.message)

    token = create_session_token(tenant.artist_id)
    response.set_cookie(
        COOKIE_NAME,
        token,
        max_age=get_settings().session_max_age,
        httponly=True,
        samesite="lax",
    )
    return LoginResponse(
        artist_id=tenant.artist_id,
        token=token,
        must_change_password=bool(credential and credential.is_temporary),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response):
    response.delete_cookie(COOKIE_NAME)
    return MessageResponse(message="Logged out")


@router.post("/password/change", response_model=MessageResponse)
async def change_password(
    body: PasswordChangeRequest, artist_id: str = Depends(require_admin)
):
    svc = _get_service()
    db = _get_db()
    async with db.get_session() as session:
        try:
            await svc.change_password(session, artist_id, body.new_password)
        except WeakPasswordError as e:
            raise HTTPException(status_code=400, detail=e.message)
    return MessageResponse(message="Password changed")
