"""SQLAlchemy model for per-artist site settings."""

from sqlalchemy import JSON, Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from gallery_engine.common.models import Base, UpdatedAtMixin


class SiteSettingsModel(Base, UpdatedAtMixin):
    __tablename__ = "settings"

    # One row per tenant; the primary key is the artist id itself.
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    gallery_name_en: Mapped[str] = mapped_column(String(255), default="")
    gallery_name_ko: Mapped[str] = mapped_column(String(255), default="")
    artist_name: Mapped[str] = mapped_column(String(255), default="")
    site_title: Mapped[str] = mapped_column(String(255), default="")
    site_description: Mapped[str] = mapped_column(Text, default="")
    theme: Mapped[str] = mapped_column(String(16), default="white")
    grid_columns: Mapped[int] = mapped_column(Integer, default=4)
    show_price: Mapped[bool] = mapped_column(Boolean, default=False)
    show_artist_note: Mapped[bool] = mapped_column(Boolean, default=True)
    show_critique: Mapped[bool] = mapped_column(Boolean, default=True)
    show_history: Mapped[bool] = mapped_column(Boolean, default=True)
    default_artist_note: Mapped[str] = mapped_column(Text, default="")
    aboutme_note: Mapped[str] = mapped_column(Text, default="")
    aboutme_critique: Mapped[str] = mapped_column(Text, default="")
    aboutme_history: Mapped[str] = mapped_column(Text, default="")
    aboutme_image: Mapped[str] = mapped_column(Text, default="")
    artist_picks: Mapped[list] = mapped_column(JSON, default=list)
    news_text: Mapped[str] = mapped_column(Text, default="")
