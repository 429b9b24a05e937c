"""Shared API envelope models."""

from __future__ import annotations

from pydantic import BaseModel


class ApiErrorResponse(BaseModel):
    """Body of every error response. Success responses are never wrapped."""

    success: bool = False
    error: str
