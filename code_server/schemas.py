"""Pydantic schemas for request/response payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class VerifyCodeRequest(BaseModel):
    code: str = Field(min_length=1)


class GeneratedCode(BaseModel):
    code: str
    created_at: datetime


class CodeResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: Optional[dict] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    outstanding_codes: int
