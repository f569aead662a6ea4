"""Pydantic schemas for site settings."""

from typing import Literal, Optional

from pydantic import BaseModel, Field

PLACEHOLDER_PICK_IMAGE = (
    "https://images.unsplash.com/photo-1544005313-94ddf0286df2?w=400&h=400&fit=crop"
)


class ArtistPick(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    archive_url: str = Field(..., min_length=1)
    image_url: Optional[str] = None


class SiteConfig(BaseModel):
    """Display, theme and content configuration for one gallery.

    Field defaults are the built-in configuration returned for tenants that
    have never saved settings.
    """

    gallery_name_en: str = "Online Gallery"
    gallery_name_ko: str = "온라인 갤러리"
    artist_name: str = "작가님"
    site_title: str = "작가님의 온라인 화첩"
    site_description: str = "작가님의 작품세계를 담은 온라인 화첩입니다."
    theme: Literal["white", "black"] = "white"
    grid_columns: Literal[1, 3, 4] = 4
    show_price: bool = False
    show_artist_note: bool = True
    show_critique: bool = True
    show_history: bool = True
    default_artist_note: str = ""
    aboutme_note: str = ""
    aboutme_critique: str = ""
    aboutme_history: str = ""
    aboutme_image: str = ""
    artist_picks: list[ArtistPick] = Field(default_factory=list)
    news_text: str = (
        "🎨 작가님의 새로운 소식과 전시 일정을 전해드립니다. "
        "방문해 주신 모든 분들을 환영합니다. ✨"
    )

    model_config = {"from_attributes": True}


class SiteConfigResponse(SiteConfig):
    artist_id: str
    is_default: bool = False
