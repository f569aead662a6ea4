"""Pydantic schemas for VIP artist endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ArtistCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=4)
    is_free: bool = False
    subscription_price: Optional[int] = Field(default=None, ge=0)


class ArtistResponse(BaseModel):
    id: str
    name: str
    link_id: str
    artist_type: str
    is_free: bool
    subscription_price: Optional[int] = None
    created_at: datetime

    model_config = {"from_attributes": True}


class ArtistSearchHit(BaseModel):
    id: str
    name: str
    link_id: str
    archive_url: str


class ArtistSearchResponse(BaseModel):
    artists: list[ArtistSearchHit]
