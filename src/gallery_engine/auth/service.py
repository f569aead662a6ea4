"""Admin credential service: bcrypt hashes in ``auth_passwords``."""

import logging

from passlib.context import CryptContext
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from gallery_engine.auth.models import AuthPasswordModel
from gallery_engine.common.config import GallerySettings
from gallery_engine.common.exceptions import (
    InvalidCredentialsError,
    WeakPasswordError,
)
from gallery_engine.tenancy.scoping import require_artist_id

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def check_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


class AuthService:
    """Per-tenant password storage and verification."""

    def __init__(self, settings: GallerySettings):
        self.settings = settings

    async def get_credential(
        self, session: AsyncSession, artist_id: str
    ) -> AuthPasswordModel | None:
        return await session.get(AuthPasswordModel, require_artist_id(artist_id))

    async def set_password(
        self,
        session: AsyncSession,
        artist_id: str,
        password: str,
        temporary: bool = False,
    ) -> AuthPasswordModel:
        """Create or replace the credential for ``artist_id``."""
        credential = await self.get_credential(session, artist_id)
        if credential is None:
            credential = AuthPasswordModel(
                artist_id=artist_id,
                password_hash=hash_password(password),
                is_temporary=temporary,
            )
            session.add(credential)
        else:
            credential.password_hash = hash_password(password)
            credential.is_temporary = temporary
        await session.flush()
        return credential

    async def verify_password(
        self, session: AsyncSession, artist_id: str, password: str
    ) -> bool:
        """Check ``password`` for ``artist_id``.

        Tenants that never stored a credential accept the configured
        bootstrap password until they set one.
        """
        credential = await self.get_credential(session, artist_id)
        if credential is None:
            return password == self.settings.default_admin_password
        return check_password(password, credential.password_hash)

    async def login(
        self, session: AsyncSession, artist_id: str, password: str
    ) -> AuthPasswordModel | None:
        """Verify and return the stored credential (None for bootstrap logins)."""
        if not await self.verify_password(session, artist_id, password):
            logger.warning("Failed admin login", extra={"artist_id": artist_id})
            raise InvalidCredentialsError()
        return await self.get_credential(session, artist_id)

    async def change_password(
        self, session: AsyncSession, artist_id: str, new_password: str
    ) -> AuthPasswordModel:
        if len(new_password) < self.settings.min_password_length:
            raise WeakPasswordError(
                f"Password must be at least {self.settings.min_password_length} characters"
            )
        credential = await self.set_password(session, artist_id, new_password)
        logger.info("Password changed", extra={"artist_id": artist_id})
        return credential

    async def delete_credential(self, session: AsyncSession, artist_id: str) -> None:
        await session.execute(
            delete(AuthPasswordModel).where(
                AuthPasswordModel.artist_id == require_artist_id(artist_id)
            )
        )
