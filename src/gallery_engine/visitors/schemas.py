"""Pydantic schemas for visitor statistics."""

import datetime

from pydantic import BaseModel


class VisitorStat(BaseModel):
    date: datetime.date
    count: int

    model_config = {"from_attributes": True}


class VisitResponse(BaseModel):
    artist_id: str
    date: datetime.date
    count: int


class VisitorStatsResponse(BaseModel):
    artist_id: str
    stats: list[VisitorStat]
