"""SQLAlchemy model for artworks."""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gallery_engine.common.models import Base, TimestampMixin


class ArtworkModel(Base, TimestampMixin):
    __tablename__ = "artworks"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    artist_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    month: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    dimensions: Mapped[str] = mapped_column(String(100), default="")
    medium: Mapped[str] = mapped_column(String(255), default="")
    image_url: Mapped[str] = mapped_column(Text, default="")
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    artist_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
