"""SQLAlchemy model for provisioned (VIP) artists."""

from typing import Optional

from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gallery_engine.common.models import Base, TimestampMixin


class ArtistModel(Base, TimestampMixin):
    __tablename__ = "artists"

    # The tenant key used by artworks / settings / auth_passwords.
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    link_id: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    artist_type: Mapped[str] = mapped_column(String(16), default="vip")
    is_free: Mapped[bool] = mapped_column(Boolean, default=False)
    subscription_price: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
