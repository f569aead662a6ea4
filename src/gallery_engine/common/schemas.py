"""Shared Pydantic schemas for Gallery-Engine."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    service: str = "gallery-engine"
    database: str = "ok"


class ErrorResponse(BaseModel):
    error: str
    code: str
    detail: str = ""


class MessageResponse(BaseModel):
    success: bool = True
    message: str = ""
