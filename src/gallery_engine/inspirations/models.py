"""SQLAlchemy model for studio inspirations (reference images with notes)."""

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gallery_engine.common.models import Base, TimestampMixin, generate_uuid


class InspirationModel(Base, TimestampMixin):
    __tablename__ = "inspirations"

    id: Mapped[str] = mapped_column(String(64), primary_key=True, default=generate_uuid)
    artist_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    blur_image_url: Mapped[str] = mapped_column(Text, default="")
    color_palette: Mapped[list] = mapped_column(JSON, default=list)
    metadata_: Mapped[dict] = mapped_column("metadata", JSON, default=dict)
