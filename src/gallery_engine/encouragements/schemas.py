"""Pydantic schemas for encouragements and the network feed."""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


class EncouragementCreate(BaseModel):
    author_name: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1, max_length=1000)
    author_archive_url: Optional[str] = None


class EncouragementResponse(BaseModel):
    id: str
    target_artist_id: str
    author_name: str
    author_archive_url: Optional[str] = None
    content: str
    created_at: datetime

    model_config = {"from_attributes": True}


class FeedItem(BaseModel):
    id: str
    type: Literal["JOIN", "ART", "ENC"]
    text: str
    time: datetime


class FeedResponse(BaseModel):
    items: list[FeedItem]
