"""Pydantic schemas for artwork endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ArtworkCreate(BaseModel):
    id: Optional[str] = Field(default=None, max_length=64)
    title: str = Field(..., min_length=1, max_length=255)
    year: int = Field(..., ge=1000, le=9999)
    month: Optional[int] = Field(default=None, ge=1, le=12)
    dimensions: str = ""
    medium: str = ""
    image_url: str = ""
    description: Optional[str] = None
    price: Optional[str] = None
    artist_name: Optional[str] = None


class ArtworkUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    year: Optional[int] = Field(default=None, ge=1000, le=9999)
    month: Optional[int] = Field(default=None, ge=1, le=12)
    dimensions: Optional[str] = None
    medium: Optional[str] = None
    image_url: Optional[str] = None
    description: Optional[str] = None
    price: Optional[str] = None
    artist_name: Optional[str] = None


class ArtworkResponse(BaseModel):
    id: str
    artist_id: str
    title: str
    year: int
    month: Optional[int] = None
    dimensions: str
    medium: str
    image_url: str
    description: Optional[str] = None
    price: Optional[str] = None
    artist_name: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}
