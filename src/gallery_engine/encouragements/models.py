"""SQLAlchemy model for visitor encouragement messages."""

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gallery_engine.common.models import Base, TimestampMixin, generate_uuid


class EncouragementModel(Base, TimestampMixin):
    __tablename__ = "encouragements"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    target_artist_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    author_name: Mapped[str] = mapped_column(String(100), nullable=False)
    author_archive_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
