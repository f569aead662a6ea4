"""SQLAlchemy model for daily visitor counters."""

import datetime

from sqlalchemy import Date, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from gallery_engine.common.models import Base, generate_uuid


class VisitorStatModel(Base):
    __tablename__ = "visitor_stats"
    __table_args__ = (UniqueConstraint("artist_id", "date", name="uq_visitor_stats_artist_date"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    artist_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
