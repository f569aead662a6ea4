"""SMS verification API router."""

import logging

from fastapi import APIRouter, HTTPException

from gallery_engine.common.exceptions import VerificationError
from gallery_engine.verification.schemas import (
    SendCodeRequest,
    SendCodeResponse,
    VerifyCodeRequest,
    VerifyCodeResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sms", tags=["verification"])


def _get_service():
    from gallery_engine.deps import get_verification_service
    return get_verification_service()


def _get_sms_sender():
    from gallery_engine.deps import get_sms_sender
    return get_sms_sender()


def _get_db():
    from gallery_engine.deps import get_db
    return get_db()


@router.post("/send", response_model=SendCodeResponse)
async def send_code(body: SendCodeRequest):
    svc = _get_service()
    sender = _get_sms_sender()
    db = _get_db()
    async with db.get_session() as session:
        await svc.purge_expired(session)
        code = await svc.issue_code(session, body.phone)

    if not sender.configured:
        logger.info("Verification code issued in test mode", extra={"phone": body.phone})
        return SendCodeResponse(
            success=True,
            message="인증번호가 발송되었습니다.",
            test_mode=True,
            test_code=code,
        )

    if not await sender.send_verification_code(body.phone, code):
        raise HTTPException(status_code=502, detail="SMS 발송에 실패했습니다.")
    return SendCodeResponse(success=True, message="인증번호가 발송되었습니다.")


@router.post("/verify", response_model=VerifyCodeResponse)
async def verify_code(body: VerifyCodeRequest):
    svc = _get_service()
    db = _get_db()
    failure: VerificationError | None = None
    # Commit even on failure so an expired code is removed.
    async with db.get_session() as session:
        try:
            await svc.verify_code(session, body.phone, body.code)
        except VerificationError as e:
            failure = e

    if failure is not None:
        raise HTTPException(
            status_code=400, detail={"code": failure.code, "message": failure.message}
        )
    return VerifyCodeResponse(success=True, message="인증되었습니다.", verified=True)
