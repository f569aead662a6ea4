"""Pydantic schemas for SMS verification endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class SendCodeRequest(BaseModel):
    phone: str = Field(..., min_length=8, max_length=32)


class SendCodeResponse(BaseModel):
    success: bool
    message: str
    test_mode: bool = False
    # Only populated in test mode, when no gateway is configured.
    test_code: Optional[str] = None


class VerifyCodeRequest(BaseModel):
    phone: str = Field(..., min_length=8, max_length=32)
    code: str = Field(..., min_length=1, max_length=6)


class VerifyCodeResponse(BaseModel):
    success: bool
    message: str
    verified: bool = False
