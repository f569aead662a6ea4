"""SMS verification codes kept in the database with a TTL.

Codes live in ``verification_codes`` rather than process memory so any
instance can verify a code issued by another.
"""

import logging
import re
import secrets
from datetime import datetime, timedelta

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_engine.common.config import GallerySettings
from gallery_engine.common.exceptions import VerificationError
from gallery_engine.common.models import as_utc, utcnow
from gallery_engine.verification.models import VerificationCodeModel

logger = logging.getLogger(__name__)


def normalize_phone(phone: str) -> str:
    """Drop separators so ``010-1234-5678`` and ``01012345678`` share a code."""
    return re.sub(r"[\s\-().]", "", phone or "")


def generate_code() -> str:
    return f"{secrets.randbelow(900000) + 100000}"


class VerificationService:
    def __init__(self, settings: GallerySettings):
        self.settings = settings

    async def issue_code(
        self, session: AsyncSession, phone: str, now: datetime | None = None
    ) -> str:
        """Store a fresh 6-digit code for ``phone``, replacing any earlier one."""
        phone = normalize_phone(phone)
        now = now or utcnow()
        code = generate_code()
        expires_at = now + timedelta(seconds=self.settings.verification_ttl)

        record = await session.get(VerificationCodeModel, phone)
        if record is None:
            session.add(VerificationCodeModel(phone=phone, code=code, expires_at=expires_at))
        else:
            record.code = code
            record.expires_at = expires_at
        await session.flush()
        return code

    async def verify_code(
        self, session: AsyncSession, phone: str, code: str, now: datetime | None = None
    ) -> None:
        """Consume the code for ``phone`` or raise ``VerificationError``."""
        phone = normalize_phone(phone)
        now = now or utcnow()

        record = await session.get(VerificationCodeModel, phone)
        if record is None:
            raise VerificationError("Request a verification code first", code="NOT_REQUESTED")

        if now > as_utc(record.expires_at):
            await session.delete(record)
            await session.flush()
            raise VerificationError("Verification code expired, request a new one", code="EXPIRED")

        if not secrets.compare_digest(record.code, (code or "").strip()):
            raise VerificationError("Verification code does not match", code="MISMATCH")

        await session.delete(record)
        await session.flush()

    async def purge_expired(self, session: AsyncSession, now: datetime | None = None) -> int:
        now = now or utcnow()
        result = await session.execute(
            delete(VerificationCodeModel).where(VerificationCodeModel.expires_at < now)
        )
        removed = result.rowcount or 0
        if removed:
            logger.info("Purged %d expired verification codes", removed)
        return removed
