"""SQLAlchemy model for per-artist admin credentials."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from gallery_engine.common.models import Base, TimestampMixin, UpdatedAtMixin


class AuthPasswordModel(Base, TimestampMixin, UpdatedAtMixin):
    __tablename__ = "auth_passwords"

    artist_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    # Set for passwords issued by provisioning; cleared by the first change.
    is_temporary: Mapped[bool] = mapped_column(Boolean, default=False)
