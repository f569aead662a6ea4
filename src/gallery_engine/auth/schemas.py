"""Pydantic schemas for admin auth endpoints."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    artist_id: str
    token: str
    must_change_password: bool = False


class PasswordChangeRequest(BaseModel):
    new_password: str
