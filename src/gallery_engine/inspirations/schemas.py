"""Pydantic schemas for inspiration endpoints."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class InspirationCreate(BaseModel):
    id: Optional[str] = Field(default=None, max_length=64)
    image_url: str = Field(..., min_length=1)
    blur_image_url: str = ""
    original_image_url: Optional[str] = None
    color_palette: list[str] = Field(default_factory=list, max_length=16)
    metadata: dict[str, Any] = Field(default_factory=dict)


class InspirationMetadataUpdate(BaseModel):
    metadata: dict[str, Any]


class InspirationResponse(BaseModel):
    id: str
    artist_id: str
    image_url: str
    blur_image_url: str
    color_palette: list[str]
    metadata: dict[str, Any]
    created_at: datetime

    @classmethod
    def from_model(cls, model) -> "InspirationResponse":
        return cls(
            id=model.id,
            artist_id=model.artist_id,
            image_url=model.image_url,
            blur_image_url=model.blur_image_url or "",
            color_palette=model.color_palette or [],
            metadata=model.metadata_ or {},
            created_at=model.created_at,
        )
